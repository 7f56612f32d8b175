"""
Message report widget.

This module brackets a sequence of diagnostics into a complete document with
a chosen renderer, and writes the result to disk.
"""

from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from loguru import logger

from ..core.data_structures import CompilerDiagnostic
from ..core.enums import CompilerMessageSeverity
from ..renderers.base import MessageRenderer
from ..renderers.xml_renderer import xml_message_renderer


class MessageReportWidget:
    """Widget for turning diagnostics into a rendered report."""

    def __init__(self, renderer: Optional[MessageRenderer] = None):
        """Initialize the widget with a renderer, XML by default."""
        self.renderer = renderer or xml_message_renderer

    def render_report(
        self,
        diagnostics: Iterable[CompilerDiagnostic],
        usage: Optional[str] = None,
    ) -> str:
        """
        Render diagnostics as one document.

        Args:
            diagnostics: Diagnostics in the order they should appear
            usage: Optional usage text appended after the diagnostics

        Returns:
            Preamble, one fragment per diagnostic, the usage fragment if any,
            and the conclusion, concatenated
        """
        parts = [self.renderer.render_preamble()]
        for diagnostic in diagnostics:
            parts.append(
                self.renderer.render(
                    diagnostic.severity, diagnostic.message, diagnostic.location
                )
            )
        if usage is not None:
            parts.append(self.renderer.render_usage(usage))
        parts.append(self.renderer.render_conclusion())
        return "".join(parts)

    def write_report(
        self,
        diagnostics: Iterable[CompilerDiagnostic],
        output_path: Union[str, Path],
        usage: Optional[str] = None,
    ) -> Path:
        """Render diagnostics and write the document to a UTF-8 file."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        document = self.render_report(diagnostics, usage)
        with output_path.open("w", encoding="utf-8") as report_file:
            report_file.write(document)
        logger.info(f"{self.renderer.name} report written to {output_path}")
        return output_path

    @staticmethod
    def summary(diagnostics: Iterable[CompilerDiagnostic]) -> Dict[str, int]:
        """Count diagnostics per severity, with error and warning totals."""
        counts = Counter(d.severity for d in diagnostics)
        result = {severity.value: counts.get(severity, 0) for severity in CompilerMessageSeverity}
        result["errors"] = sum(n for s, n in counts.items() if s.is_error)
        result["warnings"] = sum(n for s, n in counts.items() if s.is_warning)
        result["total"] = sum(counts.values())
        return result
