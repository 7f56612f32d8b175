"""
Enums for the message renderer.

This module contains the severity levels a compiler can attach to a diagnostic
and the output formats a renderer can be selected by.
"""

from enum import Enum, StrEnum, auto


class CompilerMessageSeverity(StrEnum):
    """
    Severity of a compiler diagnostic.

    The value of each member is its presentable name, which renderers use
    verbatim (the XML renderer uses it as the element tag).
    """

    EXCEPTION = "EXCEPTION"
    ERROR = "ERROR"
    STRONG_WARNING = "STRONG_WARNING"
    WARNING = "WARNING"
    INFO = "INFO"
    LOGGING = "LOGGING"
    OUTPUT = "OUTPUT"

    @property
    def presentable_name(self) -> str:
        """Name shown to tools consuming rendered output."""
        return self.value

    @property
    def is_error(self) -> bool:
        """Check if this severity fails the compilation."""
        return self in {self.EXCEPTION, self.ERROR}

    @property
    def is_warning(self) -> bool:
        """Check if this severity is any kind of warning."""
        return self in {self.STRONG_WARNING, self.WARNING}

    @classmethod
    def from_string(cls, severity: str) -> "CompilerMessageSeverity":
        """Convert a severity name (case-insensitive) to an enum value."""
        normalized = str(severity).strip().upper()
        if normalized in cls.__members__:
            return cls[normalized]
        valid = ", ".join(s.value for s in cls)
        raise ValueError(
            f"Unsupported severity: {severity}. Valid severities: {valid}"
        )


class OutputFormat(Enum):
    """Enumeration of supported output formats."""

    XML = auto()

    @classmethod
    def from_string(cls, format_name: str) -> "OutputFormat":
        """Convert string format name to enum value."""
        name = format_name.upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Unsupported output format: {format_name}")
