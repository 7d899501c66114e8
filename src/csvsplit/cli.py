"""Command-line interface for csvsplit."""

import argparse
import logging
import sys

from csvsplit.errors import CsvSplitError
from csvsplit.splitter import SplitConfig, split

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="csvsplit",
        usage="%(prog)s [options] -records <number of records> [file]",
        description=(
            "Split a .csv into multiple, smaller files named 1.csv, 2.csv, etc. "
            "Reads standard input when no file is given."
        ),
        allow_abbrev=False,
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        help="Path to the input .csv file (default: standard input)",
    )

    parser.add_argument(
        "-records",
        type=int,
        help="Number of records per output file (required, >= 1)",
    )

    parser.add_argument(
        "-headers",
        type=int,
        default=0,
        help="Number of header lines in the input to repeat in each output file (default: 0)",
    )

    parser.add_argument(
        "-output",
        default="",
        help="Filename prefix / path of the output files (default: current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Validate flags before any I/O.
    if args.records is None or args.records < 1:
        parser.error("-records must be >= 1")
    if args.headers < 0:
        parser.error("-headers must be >= 0")
    if args.headers >= args.records:
        parser.error("-headers must be < -records")

    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    config = SplitConfig(
        records=args.records,
        headers=args.headers,
        output=args.output,
    )

    try:
        split(config, args.input_file)
    except CsvSplitError as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
