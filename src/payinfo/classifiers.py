"""Line classification helpers for pay stub table detection.

Each predicate takes a single line of report text and returns True/False to
classify it as a table header, table footer, or candidate event row.
"""

from payinfo.patterns import (
    SUMMARY_LABEL_WIDTH,
    TABLE_FOOTER_MARKER,
    TABLE_HEADER_MARKER,
    WEEK_ROW_PREFIX,
)


def split_lines(text: str) -> list[str]:
    """Split report text on newlines, dropping a trailing '\\r' from each line.

    Only '\\n' ends a line.  Form feeds from page breaks stay inside the line so
    that table preambles keep their fixed line count.
    """
    if not text:
        return []
    lines = text.split("\n")
    # A trailing newline does not start another line
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_table_header(line: str) -> bool:
    """Return True if the raw line opens a table ('... Pay Details')."""
    return line.endswith(TABLE_HEADER_MARKER)


def is_table_footer(line: str) -> bool:
    """Return True if the raw line closes a table (travel pay note at end of line)."""
    return line.endswith(TABLE_FOOTER_MARKER)


def starts_with_footer(line: str) -> bool:
    """Return True if a trimmed table line is the travel pay footer note."""
    return line.startswith(TABLE_FOOTER_MARKER)


def is_summary_row(line: str) -> bool:
    """Return True for week separators and mostly-numeric total rows.

    A row counts as a summary when it starts with "Week", or when every
    character past the short label is a decimal digit.  An empty tail counts
    as all digits, so blank and very short lines are summaries too.
    """
    if line.startswith(WEEK_ROW_PREFIX):
        return True
    return all(ch in "0123456789" for ch in line[SUMMARY_LABEL_WIDTH:])


def is_event_line(line: str) -> bool:
    """Return True if a trimmed table line should be parsed as an Event."""
    return not is_summary_row(line)
