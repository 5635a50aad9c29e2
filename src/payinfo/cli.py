"""Command line entry point: convert a pay stub text dump to CSV.

Usage:
    payinfo <pay_stub.txt> [-o events.csv] [--encoding ENC] [-v]
    python -m payinfo <pay_stub.txt>

CSV is written to stdout unless --output is given.  Logs go to stderr.
"""

import argparse
import logging
import sys
from pathlib import Path

from payinfo import config
from payinfo.errors import StubReadError
from payinfo.pipeline import convert_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the payinfo command."""
    parser = argparse.ArgumentParser(
        prog="payinfo", description="Extract pay events from a pay stub text report as CSV"
    )
    parser.add_argument("file", type=Path, help="Path to the pay stub text file")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write CSV to this file instead of stdout")
    parser.add_argument("--encoding", default=None, help=f"Input text encoding (default: {config.INPUT_ENCODING})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log dropped blocks and summary rows to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, convert the pay stub, and write the CSV."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else config.LOG_LEVEL
    logging.basicConfig(level=level, format=config.LOG_FORMAT)

    try:
        csv_text = convert_file(args.file, args.encoding)
    except StubReadError as exc:
        logger.debug("Read failure: %s", exc.reason)
        print(f"Error: Failed to read file {args.file}", file=sys.stderr)
        return 1

    if args.output is None:
        print(csv_text)
        return 0

    try:
        with open(args.output, "w", encoding="utf-8", newline="") as fopen:
            fopen.write(csv_text + "\n")
    except OSError as exc:
        print(f"Error: Failed to write file {args.output}: {exc}", file=sys.stderr)
        return 1
    logger.info("Wrote CSV to %s", args.output)
    return 0
