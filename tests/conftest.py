"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from payinfo.patterns import EVENT_COLUMNS, TABLE_FOOTER_MARKER

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")

FOOTER = TABLE_FOOTER_MARKER

# Three header rows follow the "Pay Details" title to make up the 4-line preamble
PREAMBLE = [
    "Employee: J. Smith  (ID 0042)                                  Pay Details",
    "Customer                                 Date         Adder                 Hours        MSR         Time In",
    " " * 104 + "Time Out  Meals",
    "-" * 120,
]


def build_line(**fields: str) -> str:
    """Place each value at its column offset and strip the trailing padding."""
    width = max(start for _, start, _ in EVENT_COLUMNS) + 20
    chars = [" "] * width
    starts = {field: start for field, start, _ in EVENT_COLUMNS}
    for field, value in fields.items():
        start = starts[field]
        chars[start : start + len(value)] = value
    return "".join(chars).rstrip()


def build_table(rows: list[str], footer: bool = True) -> str:
    """Wrap event rows in a standard preamble and (optionally) the footer note."""
    lines = PREAMBLE + rows
    if footer:
        lines.append(FOOTER)
    return "\n".join(lines)


@pytest.fixture
def make_line():
    """Factory for fixed-width event rows: make_line(name=..., hours=...)."""
    return build_line


@pytest.fixture
def make_table():
    """Factory for a complete table block around the given rows."""
    return build_table


@pytest.fixture
def acme_line():
    """The single event row used by the end-to-end scenario."""
    return build_line(name="Acme Corp", date="01/02/2024", hours="8.00", time_in="9:00", time_out="17:00")


@pytest.fixture
def stub_text(acme_line):
    """A report with boilerplate around one table holding one event and one weekly total."""
    return "\n".join(
        [
            "ACME STAFFING SERVICES",
            "Pay period ending 01/06/2024",
            "",
            build_table([acme_line, "Week 1 Totals" + " " * 63 + "8.00"]),
            "",
            "Questions? Contact payroll.",
            "",
        ]
    )
