"""
Renderer factory for looking up renderer instances by name.

This module keeps a table of renderers keyed by their upper-cased name, so a
driver can pick one from a command-line option.
"""

from typing import Dict, List, Union

from loguru import logger

from ..core.enums import OutputFormat
from .base import MessageRenderer
from .xml_renderer import xml_message_renderer


class RendererFactory:
    """Factory for selecting message renderer instances by name."""

    _renderers: Dict[str, MessageRenderer] = {
        xml_message_renderer.name.upper(): xml_message_renderer,
    }

    @classmethod
    def register(cls, renderer: MessageRenderer) -> None:
        """Register a renderer under its name, replacing any previous one."""
        key = renderer.name.upper()
        if key in cls._renderers:
            logger.debug(f"Replacing renderer registered as {key}")
        cls._renderers[key] = renderer

    @classmethod
    def available_renderers(cls) -> List[str]:
        """Return the names of all registered renderers."""
        return sorted(cls._renderers)

    @classmethod
    def create_renderer(cls, format_type: Union[OutputFormat, str]) -> MessageRenderer:
        """Return the renderer for the given output format."""
        key = format_type.name if isinstance(format_type, OutputFormat) else str(format_type)
        renderer = cls._renderers.get(key.strip().upper())
        if renderer is None:
            raise ValueError(f"Unsupported output format: {format_type}")
        return renderer
