"""CSV rendering for extracted pay events.

Fields are joined with commas and never quoted.  A name or adder that contains
a comma will shift the remaining columns of its row.
"""

from payinfo.patterns import CSV_DELIMITER, CSV_HEADERS
from payinfo.schema import Event, EventTable, Time


def _format_float(value: float) -> str:
    return f"{value:.2f}"


def _format_optional_time(value: Time | None) -> str:
    return str(value) if value is not None else ""


def format_event(event: Event) -> str:
    """Render one event as a CSV row in CSV_HEADERS order."""
    fields = [
        event.name,
        event.date,
        event.adder or "",
        _format_float(event.hours),
        _format_float(event.msr),
        str(event.time_in),
        str(event.time_out),
        # Absent meals print as a zero count
        str(event.meals) if event.meals is not None else "0",
        _format_optional_time(event.travel_meet_time),
        _format_optional_time(event.travel_rtn_time),
    ]
    return CSV_DELIMITER.join(fields)


def to_csv(table: EventTable) -> str:
    """Render the header row plus one row per event, without a trailing newline."""
    rows = [CSV_DELIMITER.join(CSV_HEADERS)]
    rows.extend(format_event(event) for event in table.events)
    return "\n".join(rows)
