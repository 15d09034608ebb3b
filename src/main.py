"""Brickset Stats - Main Entry Point with CLI Commands.

Supports:
- (no command): Print the fixed demonstration report
- summary: Print grouped theme, packaging and tag tables
"""

import argparse
import sys

import polars as pl
from loguru import logger
from pydantic import ValidationError

from src.analysis import lego_sets, summary
from src.core.config import Settings, get_settings


def configure_logging(settings: Settings) -> None:
    """Send loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level.upper())


def cmd_report(args: argparse.Namespace) -> None:
    """Print the demonstration report, one value or name per line."""
    settings = get_settings()
    logger.info("=== Running Brickset Report ===")

    print(lego_sets.count_sets_with_tag(settings.demo_tag))
    print(lego_sets.max_pieces())
    lego_sets.print_names_sorted()
    lego_sets.print_names_with_pieces_between(settings.piece_range_low, settings.piece_range_high)
    lego_sets.print_names_starting_with(settings.name_initial)
    print(lego_sets.count_specified_packaging())
    print(lego_sets.average_pieces(settings.demo_theme))

    logger.success("Brickset report completed")


def cmd_summary(args: argparse.Namespace) -> None:
    """Print grouped summary tables."""
    logger.info("=== Running Brickset Summary ===")

    with pl.Config(tbl_rows=-1):
        print(summary.average_pieces_by_theme())
        print(summary.count_by_packaging())
        print(summary.tag_frequencies())

    logger.success("Brickset summary completed")


def main(argv: list[str] | None = None) -> None:
    """Main entry point with CLI argument parsing."""
    configure_logging(get_settings())

    parser = argparse.ArgumentParser(
        description="Brickset Stats - Queries over the Brickset LEGO set collection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.set_defaults(func=cmd_report)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Summary command
    parser_summary = subparsers.add_parser("summary", help="Print grouped summary tables")
    parser_summary.set_defaults(func=cmd_summary)

    # Parse arguments and execute
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (OSError, ValidationError) as e:
        logger.error(f"Failed to load LEGO sets: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
