"""
Renderer modules for different output formats.

This module provides the renderer protocol, the XML renderer and a factory
to select renderers by name.
"""

from .base import MessageRenderer
from .escaping import escape_xml, replace_all
from .xml_renderer import XmlMessageRenderer, xml_message_renderer
from .factory import RendererFactory

__all__ = [
    'MessageRenderer',
    'XmlMessageRenderer',
    'xml_message_renderer',
    'RendererFactory',
    'escape_xml',
    'replace_all',
]
