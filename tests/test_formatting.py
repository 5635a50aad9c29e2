"""Unit tests for CSV rendering."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from payinfo.formatting import format_event, to_csv
from payinfo.schema import Event, EventTable, Time

HEADER = "Customer,Date,Adder,Hours,MSR,Time In,Time Out,Meals,Travel Meet Time,Travel Return Time"


class TestFormatEvent:

    def test_minimal_event(self):
        event = Event(name="Acme Corp", date="01/02/2024")
        assert format_event(event) == "Acme Corp,01/02/2024,,0.00,0.00,00:00,00:00,0,,"

    def test_full_event(self):
        event = Event(
            name="Acme Corp",
            date="01/02/2024",
            adder="Holiday",
            hours=8.5,
            msr=2.25,
            time_in=Time(hour=7, minute=5),
            time_out=Time(hour=15, minute=45),
            meals=2,
            travel_meet_time=Time(hour=6, minute=30),
            travel_rtn_time=Time(hour=16, minute=0),
        )
        assert format_event(event) == "Acme Corp,01/02/2024,Holiday,8.50,2.25,07:05,15:45,2,06:30,16:00"

    def test_two_decimal_rounding(self):
        event = Event(name="A", date="d", hours=7.999)
        assert format_event(event).split(",")[3] == "8.00"

    def test_absent_meals_print_zero(self):
        assert format_event(Event(name="A", date="d")).split(",")[7] == "0"

    def test_commas_not_escaped(self):
        """Text is written verbatim, so an embedded comma adds a column."""
        row = format_event(Event(name="Smith, J", date="d"))
        assert row.startswith("Smith, J,d,")
        assert len(row.split(",")) == 11


class TestToCsv:

    def test_empty_table_is_header_only(self):
        assert to_csv(EventTable()) == HEADER

    def test_rows_follow_header_without_trailing_newline(self):
        table = EventTable(events=(Event(name="A", date="d1"), Event(name="B", date="d2")))
        csv_text = to_csv(table)
        lines = csv_text.split("\n")
        assert lines[0] == HEADER
        assert [line.split(",")[0] for line in lines[1:]] == ["A", "B"]
        assert not csv_text.endswith("\n")
