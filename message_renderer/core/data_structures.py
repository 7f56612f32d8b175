"""
Data structures for the message renderer.

This module contains the read-only values a renderer consumes: where a
diagnostic points to in the source, and the diagnostic itself.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from .enums import CompilerMessageSeverity


@dataclass(frozen=True)
class CompilerMessageSourceLocation:
    """Position in a source file a diagnostic refers to."""

    UNKNOWN: ClassVar[int] = -1

    path: str
    line: int = UNKNOWN
    column: int = UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert the location to a dictionary."""
        return {"path": self.path, "line": self.line, "column": self.column}


@dataclass(frozen=True)
class CompilerDiagnostic:
    """A single message emitted by the compiler."""

    severity: CompilerMessageSeverity
    message: str
    location: Optional[CompilerMessageSourceLocation] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the diagnostic to a dictionary."""
        result: Dict[str, Any] = {
            "severity": self.severity.value,
            "message": self.message,
        }
        if self.location is not None:
            result["location"] = self.location.to_dict()
        return result
