"""Marker phrases, the fixed column layout, and compiled patterns for pay stub tables.

The pay stub report embeds one or more fixed-width tables in freeform text.
Everything that ties the parser to the exact report layout lives here:
segmentation markers, the preamble size, column offsets, and the CSV header.
Used by classifiers.py, fields.py, parser.py, and formatting.py.
"""

import re

# ─── Table Boundary Markers ──────────────────────────────────────────────────

# A table header line ends with this phrase, e.g. "Employee 1234   Pay Details"
TABLE_HEADER_MARKER = "Pay Details"

# A table footer line ends with this phrase
TABLE_FOOTER_MARKER = "Note: Travel Pay is paid at the prevailing minimum wage."

# Title and column-header rows at the top of every table block
PREAMBLE_LINES = 4


# ─── Summary Row Detection ───────────────────────────────────────────────────

# Week separators / weekly totals, e.g. "Week 1 Totals   40.00"
WEEK_ROW_PREFIX = "Week"

# Summary rows carry a short label and nothing but digits after this offset
SUMMARY_LABEL_WIDTH = 5


# ─── Fixed-Width Column Layout ───────────────────────────────────────────────

# Spaces appended to every event line so truncated trailing columns slice empty
LINE_PADDING = 80

# (field, start, end) half-open character ranges; end=None runs to end of line
EVENT_COLUMNS: tuple[tuple[str, int, int | None], ...] = (
    ("name", 0, 41),
    ("date", 41, 54),
    ("adder", 54, 76),
    ("hours", 76, 89),
    ("msr", 89, 101),
    ("time_in", 101, 115),
    ("time_out", 115, 129),
    ("meals", 129, 139),
    ("travel_meet_time", 139, 154),
    ("travel_rtn_time", 154, None),
)


# ─── Field Patterns ──────────────────────────────────────────────────────────

# Unsigned integer as written in the report: optional "+", ASCII digits only
UNSIGNED_INT_RE = re.compile(r"^\+?[0-9]+$")

# Plain decimal number such as "8.00", "-1.5", ".25" or "1e3"
DECIMAL_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")

# Time parts are byte sized in the report (no hour/minute range check)
MAX_TIME_PART = 255

# Meal counts are byte sized as well
MAX_MEALS = 255


# ─── CSV Output ──────────────────────────────────────────────────────────────

CSV_HEADERS = (
    "Customer",
    "Date",
    "Adder",
    "Hours",
    "MSR",
    "Time In",
    "Time Out",
    "Meals",
    "Travel Meet Time",
    "Travel Return Time",
)

CSV_DELIMITER = ","
