"""Pydantic models for pay events extracted from a pay stub report.

An ``EventTable`` owns its ``Event`` records, and each ``Event`` owns its
``Time`` values.  All models are frozen: they are built once by the parser
and only read afterwards by the CSV serializer.
"""

from pydantic import BaseModel, ConfigDict, Field

from payinfo.patterns import MAX_MEALS, MAX_TIME_PART


class Time(BaseModel):
    """Wall-clock time of day as printed in the report.

    Hours and minutes are not range checked, so "25:99" is kept as written.
    """

    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=MAX_TIME_PART)
    minute: int = Field(ge=0, le=MAX_TIME_PART)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


# Substituted for an unreadable Time In / Time Out column
MIDNIGHT = Time(hour=0, minute=0)


class Event(BaseModel):
    """One pay event (shift) row from a pay details table."""

    model_config = ConfigDict(frozen=True)

    name: str
    date: str
    adder: str | None = None
    hours: float = 0.0
    msr: float = 0.0
    time_in: Time = MIDNIGHT
    time_out: Time = MIDNIGHT
    meals: int | None = Field(default=None, ge=1, le=MAX_MEALS)
    travel_meet_time: Time | None = None
    travel_rtn_time: Time | None = None


class EventTable(BaseModel):
    """Every event from every table in a report, in order of appearance."""

    model_config = ConfigDict(frozen=True)

    events: tuple[Event, ...] = ()

    def __len__(self) -> int:
        return len(self.events)
