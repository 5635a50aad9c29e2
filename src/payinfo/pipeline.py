"""Main extraction pipeline: report text -> table blocks -> events -> CSV.

``run`` works on text already in memory; ``convert_file`` adds the file read
and is the only step that can fail loudly.  Blocks that do not parse as
tables are dropped without affecting the other blocks.
"""

import logging
from pathlib import Path

from payinfo import config
from payinfo.errors import StubReadError, TableParseError
from payinfo.formatting import to_csv
from payinfo.parser import parse_table
from payinfo.schema import Event, EventTable
from payinfo.segmentation import split_tables

logger = logging.getLogger(__name__)


def parse_stub(text: str) -> EventTable:
    """Collect the events of every table in *text*, in order of appearance."""
    blocks = split_tables(text)
    logger.info("Detected %d table blocks", len(blocks))

    events: list[Event] = []
    for idx, block in enumerate(blocks):
        try:
            table_events = parse_table(block)
        except TableParseError as exc:
            logger.debug("Dropping block %d/%d: %s", idx + 1, len(blocks), exc)
            continue
        logger.debug("Block %d/%d: %d events", idx + 1, len(blocks), len(table_events))
        events.extend(table_events)

    logger.info("Parsed %d events", len(events))
    return EventTable(events=tuple(events))


def run(text: str) -> str:
    """Extract all pay events from report *text* and render them as CSV."""
    return to_csv(parse_stub(text))


def read_stub(path: Path | str, encoding: str | None = None) -> str:
    """Read a whole pay stub file, raising StubReadError if it cannot be read."""
    encoding = encoding or config.INPUT_ENCODING
    try:
        with open(path, "r", encoding=encoding, newline="") as fopen:
            return fopen.read()
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise StubReadError(path, str(exc)) from exc


def convert_file(path: Path | str, encoding: str | None = None) -> str:
    """Read the pay stub at *path* and return its events as CSV text."""
    text = read_stub(path, encoding)
    logger.info("Read %d characters from %s", len(text), path)
    return run(text)
