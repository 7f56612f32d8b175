"""
Base renderer interface.

This module defines the protocol that all message renderers must implement.
"""

from typing import Optional, Protocol

from ..core.data_structures import CompilerMessageSourceLocation
from ..core.enums import CompilerMessageSeverity


class MessageRenderer(Protocol):
    """Protocol defining interface for compiler message renderers."""

    @property
    def name(self) -> str:
        """Key the renderer is selected by."""
        ...

    def render_preamble(self) -> str:
        """Return the text emitted once before any message."""
        ...

    def render(
        self,
        severity: CompilerMessageSeverity,
        message: str,
        location: Optional[CompilerMessageSourceLocation],
    ) -> str:
        """Render a single diagnostic."""
        ...

    def render_usage(self, usage: str) -> str:
        """Render command-line usage text through the diagnostics channel."""
        ...

    def render_conclusion(self) -> str:
        """Return the text emitted once after the last message."""
        ...
