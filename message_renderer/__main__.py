"""
Main entry point for the message renderer.

This module allows running the renderer as ``python -m message_renderer``.
"""

import sys

from .utils.cli import main_cli

if __name__ == "__main__":
    sys.exit(main_cli())
