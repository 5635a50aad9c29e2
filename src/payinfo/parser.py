"""Record parsing for segmented pay details tables.

A table block is a fixed preamble followed by fixed-width event rows,
interleaved with weekly summary rows.  ``parse_table`` keeps the event rows and
``parse_event_line`` slices each one at the offsets in ``EVENT_COLUMNS``.
"""

import logging

from payinfo.classifiers import is_event_line, split_lines, starts_with_footer
from payinfo.errors import TableParseError
from payinfo.fields import (
    parse_decimal,
    parse_meals,
    parse_optional_text,
    parse_text,
    parse_time,
    parse_time_or_midnight,
)
from payinfo.patterns import EVENT_COLUMNS, LINE_PADDING, PREAMBLE_LINES
from payinfo.schema import Event

logger = logging.getLogger(__name__)

# Converter applied to each sliced column, keyed by Event field
FIELD_PARSERS = {
    "name": parse_text,
    "date": parse_text,
    "adder": parse_optional_text,
    "hours": parse_decimal,
    "msr": parse_decimal,
    "time_in": parse_time_or_midnight,
    "time_out": parse_time_or_midnight,
    "meals": parse_meals,
    "travel_meet_time": parse_time,
    "travel_rtn_time": parse_time,
}


def slice_columns(line: str) -> dict[str, str]:
    """Cut a line into its raw (untrimmed) fixed-width column strings."""
    # Trailing columns are often missing entirely, so pad before slicing
    padded = line + " " * LINE_PADDING
    return {field: padded[start:end] for field, start, end in EVENT_COLUMNS}


def parse_event_line(line: str) -> Event:
    """Parse one candidate row into an Event.

    Never fails: every column that cannot be converted takes its fallback
    value (0.0, 00:00, or absent).
    """
    columns = slice_columns(line)
    values = {field: FIELD_PARSERS[field](raw) for field, raw in columns.items()}
    return Event(**values)


def table_rows(block: str) -> list[str]:
    """Return the trimmed rows of *block* between the preamble and the footer note."""
    lines = split_lines(block)
    if len(lines) <= PREAMBLE_LINES:
        raise TableParseError(f"Table block has {len(lines)} lines, no rows after the {PREAMBLE_LINES}-line preamble")

    rows: list[str] = []
    for line in lines[PREAMBLE_LINES:]:
        row = line.strip()
        if starts_with_footer(row):
            break
        rows.append(row)
    return rows


def parse_table(block: str) -> list[Event]:
    """Parse every event row of a table block.

    Raises TableParseError when the block is too short to hold any rows.
    """
    rows = table_rows(block)
    event_rows = [row for row in rows if is_event_line(row)]
    skipped = len(rows) - len(event_rows)
    if skipped:
        logger.debug("Skipped %d summary rows", skipped)
    return [parse_event_line(row) for row in event_rows]
