"""
Utility modules for the message renderer.

This module provides diagnostics loading and CLI support.
"""

from .loader import load_diagnostics, parse_diagnostics
from .cli import parse_args, main_cli

__all__ = [
    'load_diagnostics',
    'parse_diagnostics',
    'parse_args',
    'main_cli'
]
