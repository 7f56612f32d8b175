"""
Core module for the message renderer.

This module contains the severity, location and diagnostic types consumed by
every renderer.
"""

from .enums import CompilerMessageSeverity, OutputFormat
from .data_structures import CompilerDiagnostic, CompilerMessageSourceLocation
from .exceptions import RendererException, DiagnosticsLoadError

__all__ = [
    "CompilerMessageSeverity",
    "OutputFormat",
    "CompilerDiagnostic",
    "CompilerMessageSourceLocation",
    "RendererException",
    "DiagnosticsLoadError",
]
