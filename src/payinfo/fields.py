"""Per-field converters for fixed-width event columns.

Every converter takes the raw column text, trims it, and returns a typed
value or its fallback.  None of them raise: a malformed column never makes
an event line unparsable.
"""

import math
import struct

from payinfo.patterns import DECIMAL_RE, MAX_MEALS, MAX_TIME_PART, UNSIGNED_INT_RE
from payinfo.schema import MIDNIGHT, Time


def _parse_unsigned(raw: str, maximum: int) -> int | None:
    """Parse an unsigned integer no larger than *maximum*, or return None."""
    if not UNSIGNED_INT_RE.match(raw):
        return None
    # Too many significant digits to fit; also keeps int() under its digit limit
    digits = raw.lstrip("+0") or "0"
    if len(digits) > len(str(maximum)):
        return None
    value = int(digits)
    return value if value <= maximum else None


def parse_text(raw: str) -> str:
    """Return the trimmed column text verbatim."""
    return raw.strip()


def parse_optional_text(raw: str) -> str | None:
    """Return the trimmed text, or None when the column is blank."""
    text = raw.strip()
    return text or None


def _to_single(value: float) -> float | None:
    """Round *value* to single precision, or return None if it overflows."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return None


def parse_decimal(raw: str, default: float = 0.0) -> float:
    """Parse a decimal number such as '8.00'; fall back to *default*.

    Hours and MSR are single-precision in the report, so '0.005' is stored as
    0.00499999988 and renders as 0.00.  Values beyond single-precision range
    fall back like any other unreadable column.
    """
    text = raw.strip()
    if not DECIMAL_RE.match(text):
        return default
    value = _to_single(float(text))
    if value is None or not math.isfinite(value):
        return default
    return value


def parse_time(raw: str) -> Time | None:
    """Parse 'H:MM' or 'HH:MM' into a Time, or return None for any other shape.

    The text is split on the first ':' only, so '1:2:3' fails on its minute
    part.  Out-of-range values like '25:99' are accepted as written.
    """
    hour_text, sep, minute_text = raw.strip().partition(":")
    if not sep:
        return None
    hour = _parse_unsigned(hour_text, MAX_TIME_PART)
    minute = _parse_unsigned(minute_text, MAX_TIME_PART)
    if hour is None or minute is None:
        return None
    return Time(hour=hour, minute=minute)


def parse_time_or_midnight(raw: str) -> Time:
    """Parse a required time column, substituting 00:00 when unreadable."""
    return parse_time(raw) or MIDNIGHT


def parse_meals(raw: str) -> int | None:
    """Parse a positive meal count.

    Blank, '0', and non-numeric columns all return None: a zero count and an
    unreadable one cannot be told apart after parsing.
    """
    meals = _parse_unsigned(raw.strip(), MAX_MEALS)
    return meals or None
