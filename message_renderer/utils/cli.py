"""
Command-line interface utilities.

This module provides CLI argument parsing and the main function that renders
a JSON diagnostics file to a report.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel

from ..core.exceptions import DiagnosticsLoadError
from ..renderers.factory import RendererFactory
from ..widgets.report import MessageReportWidget
from .loader import load_diagnostics

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class ReportOptions(BaseModel):
    """Options controlling a single CLI run."""

    input_path: Path
    output_format: str = "xml"
    output_path: Optional[Path] = None
    usage: Optional[str] = None
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ReportOptions":
        return cls(
            input_path=args.input,
            output_format=args.format,
            output_path=args.output,
            usage=args.usage,
            verbose=args.verbose,
        )


def configure_logging(verbose: bool = False) -> None:
    """Route log output to stderr so stdout stays free for the report."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level="DEBUG" if verbose else "INFO")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="message-renderer",
        description="Render compiler diagnostics from a JSON file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print an XML report to stdout
  message-renderer diagnostics.json

  # Write the report to a file and append usage text
  message-renderer diagnostics.json -o build/messages.xml --usage "usage: kotlinc <files>"
""",
    )

    parser.add_argument(
        "input", type=Path, help="JSON file with the diagnostics to render."
    )

    parser.add_argument(
        "--format",
        type=str.lower,
        choices=[name.lower() for name in RendererFactory.available_renderers()],
        default="xml",
        help="Output format (default: xml).",
    )

    parser.add_argument(
        "-o", "--output", type=Path, help="Output file (default: standard output)."
    )

    parser.add_argument(
        "--usage", help="Usage text to render after the diagnostics."
    )

    parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose logging output."
    )

    return parser.parse_args(argv)


def main_cli(argv: Optional[List[str]] = None) -> int:
    """Main function for command-line operation."""
    options = ReportOptions.from_args(parse_args(argv))
    configure_logging(options.verbose)

    renderer = RendererFactory.create_renderer(options.output_format)
    widget = MessageReportWidget(renderer)

    try:
        diagnostics = load_diagnostics(options.input_path)
    except DiagnosticsLoadError as e:
        logger.debug(f"Aborting after load failure: {e.error_code}")
        return 1

    stats = widget.summary(diagnostics)
    logger.info(
        f"Rendering {stats['total']} diagnostics "
        f"({stats['errors']} errors, {stats['warnings']} warnings) as {renderer.name}"
    )

    if options.output_path is not None:
        try:
            widget.write_report(diagnostics, options.output_path, options.usage)
        except OSError as e:
            logger.error(f"Error writing report: {e}")
            return 1
    else:
        sys.stdout.write(widget.render_report(diagnostics, options.usage))
        sys.stdout.write("\n")

    return 0
