"""
Widget modules for the message renderer.

This module provides widgets that drive renderers over collections of
diagnostics.
"""

from .report import MessageReportWidget

__all__ = [
    'MessageReportWidget'
]
