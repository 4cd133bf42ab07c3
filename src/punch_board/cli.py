"""
pbc command-line interface.

Commands:
- envelope: paper size and punch location for an envelope
- fraction: show a decimal value as a mixed number

Configuration and logging are set up once per invocation, before the
command runs. Errors are printed to stderr and the command exits with 1.
"""

import argparse
import sys
from typing import Sequence

from pydantic import ValidationError

from punch_board import __version__
from punch_board.config import DEFAULT_LOGGING_LEVEL, ConfigError, Settings, load_settings
from punch_board.core.domain import EnvelopeDimensions
from punch_board.core.math import DecimalParseError, layout_for, parse_decimal
from punch_board.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

PROG = "pbc"
DESCRIPTION = (
    "pbc (punch-board-calculator) is a CLI application for calculating envelope "
    "punch positions when using a 1-2-3 punch board."
)


# =============================================================================
# COMMANDS
# =============================================================================


def _with_fraction(text: str) -> str:
    # "15.7" → "15.7 (15 + 7/10)"
    return f"{text} ({parse_decimal(text)})"


def run_envelope(args: argparse.Namespace) -> int:
    """Entry point for the envelope command."""
    length, width = args.length, args.width

    print(f"Content (length x width): {length:0.2f} x {width:0.2f}")

    try:
        dimensions = EnvelopeDimensions(
            length=length,
            width=width,
            is_loose=args.loose,
            is_mini=args.mini,
        )
    except ValidationError as e:
        print(f"Error: {e.errors()[0]['msg']}", file=sys.stderr)
        return 1

    layout = layout_for(dimensions)
    logger.debug(
        "calculated envelope",
        length=length,
        width=width,
        is_loose=args.loose,
        is_mini=args.mini,
        margin=layout.margin,
        paper_size=layout.paper_size,
        punch_location=layout.punch_location,
    )

    paper_text = f"{layout.paper_size:0.1f}"
    punch_text = f"{layout.punch_location:0.1f}"
    if args.fraction:
        # Huge results render as digit strings beyond int64, or as "inf"
        try:
            paper_text = _with_fraction(paper_text)
            punch_text = _with_fraction(punch_text)
        except DecimalParseError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(f"Paper size: {paper_text}")
    print(f"Punch location: {punch_text}")
    return 0


def run_fraction(args: argparse.Namespace) -> int:
    """Entry point for the fraction command."""
    try:
        value = parse_decimal(args.value)
    except DecimalParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("parsed decimal", text=args.value, rational=repr(value))
    print(value)
    return 0


# =============================================================================
# PARSER
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(prog=PROG, description=DESCRIPTION)
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s version {__version__}"
    )
    parser.add_argument(
        "--config", default="", help="config file (default is $HOME/.pbc/config)"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")

    envelope = subparsers.add_parser(
        "envelope", help="calculate punch positions for an envelope"
    )
    envelope.add_argument("-l", "--length", type=float, default=0.0, help="length of envelope")
    envelope.add_argument("-w", "--width", type=float, default=0.0, help="width of envelope")
    envelope.add_argument("--loose", action="store_true", help="loose envelope")
    envelope.add_argument("--mini", action="store_true", help="mini punch board")
    envelope.add_argument(
        "--fraction", action="store_true", help="also show results as mixed numbers"
    )
    envelope.set_defaults(handler=run_envelope)

    fraction = subparsers.add_parser(
        "fraction", help="show a decimal value as a mixed number"
    )
    fraction.add_argument("value", help="decimal value, e.g. 1.25 or -.2")
    fraction.set_defaults(handler=run_fraction)

    return parser


# =============================================================================
# STARTUP
# =============================================================================


def init_config(config_file: str) -> Settings:
    """
    Load settings and configure logging.

    An unknown logging level falls back to the default level with a warning.

    Raises:
        ConfigError: If the config file is missing or invalid
    """
    settings, path = load_settings(config_file or None)
    if path is not None:
        print("Using config file:", path)

    log_format = settings.logging.format
    try:
        configure_logging(settings.logging.level, log_format)
    except ValueError as e:
        configure_logging(DEFAULT_LOGGING_LEVEL, log_format)
        logger.warning("error parsing logging level", error=str(e))

    logger.debug("set log level", log_level=settings.logging.level)
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        init_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command is None:
        parser.print_help()
        return 0

    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
