"""
Compiler Message Renderer

This module renders compiler diagnostics (severity, message, optional source
location) into machine-readable output for IDEs and build tools. Renderers are
selected by name through a factory and share a common protocol; the XML
renderer produces one element per diagnostic inside a ``MESSAGES`` root.

Features:
- Single-pass XML escaping of message bodies and paths
- Name-keyed renderer lookup
- Report widget that brackets diagnostics into a complete document
- Command-line conversion of JSON diagnostics files
"""

from typing import Any, Dict, List, Optional

from .core import (
    CompilerMessageSeverity,
    OutputFormat,
    CompilerDiagnostic,
    CompilerMessageSourceLocation,
    RendererException,
    DiagnosticsLoadError,
)

from .renderers import (
    MessageRenderer,
    XmlMessageRenderer,
    xml_message_renderer,
    RendererFactory,
    escape_xml,
    replace_all,
)

from .widgets import MessageReportWidget

from .utils import load_diagnostics, parse_diagnostics, parse_args, main_cli

__version__ = "0.1.0"


def render_diagnostics(
    diagnostics: List[Dict[str, Any]],
    output_format: str = "xml",
    usage: Optional[str] = None,
) -> str:
    """
    Render diagnostics given as plain dictionaries.

    Args:
        diagnostics: Diagnostic objects with ``severity``, ``message`` and
            optional ``location``
        output_format: Name of the renderer to use
        usage: Optional usage text appended after the diagnostics

    Returns:
        The complete rendered document
    """
    renderer = RendererFactory.create_renderer(output_format)
    return MessageReportWidget(renderer).render_report(
        parse_diagnostics(diagnostics), usage
    )


__all__ = [
    "CompilerMessageSeverity",
    "OutputFormat",
    "CompilerDiagnostic",
    "CompilerMessageSourceLocation",
    "RendererException",
    "DiagnosticsLoadError",
    "MessageRenderer",
    "XmlMessageRenderer",
    "xml_message_renderer",
    "RendererFactory",
    "escape_xml",
    "replace_all",
    "MessageReportWidget",
    "load_diagnostics",
    "parse_diagnostics",
    "parse_args",
    "main_cli",
    "render_diagnostics",
]
