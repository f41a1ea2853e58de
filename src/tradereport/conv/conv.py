from __future__ import annotations

import datetime as dt
import re
from decimal import Decimal, InvalidOperation

from tradereport.errors import InvalidDateError

NUM_CLEAN_RE = re.compile(r"[,\s]")  # remove thousands separators, spaces

# Locale-independent stand-in for "%d %b %Y"
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_TRADE_DATE_RE = re.compile(r"^(\d{2}) ([A-Z][a-z]{2}) (\d{4})$")


def to_dec_strict(s: str | float | int | Decimal | None) -> Decimal:
    """Convert numeric text to Decimal.

    Raises ValueError on invalid/missing data.
    """
    if s is None:
        raise ValueError("Value is None")
    if isinstance(s, Decimal):
        return s
    if isinstance(s, (int, float)):
        return Decimal(str(s))

    s_stripped = s.strip()
    if not s_stripped:
        raise ValueError("Value is empty string")

    try:
        s_clean = NUM_CLEAN_RE.sub("", s_stripped)
        return Decimal(s_clean)
    except InvalidOperation as e:
        raise ValueError(f"Invalid decimal format: {s!r}") from e


def to_int_strict(s: str | int | None) -> int:
    """Convert a unit count to int; fractional or non-numeric values are rejected."""
    if isinstance(s, bool):
        raise ValueError(f"Invalid integer value: {s!r}")
    if isinstance(s, int):
        return s
    value = to_dec_strict(s)
    if value != value.to_integral_value():
        raise ValueError(f"Invalid integer value: {s!r}")
    return int(value)


def parse_trade_date(d: str | dt.date) -> dt.date:
    """Parse a 'dd MMM yyyy' date string such as '05 Jan 2016'.

    The match is strict: two-digit day, English three-letter month abbreviation
    in title case and a four-digit year. Dates pass through unchanged.
    """
    if isinstance(d, dt.date):
        return d
    m = _TRADE_DATE_RE.match(d.strip()) if isinstance(d, str) else None
    if m is None or m.group(2) not in _MONTHS:
        raise InvalidDateError(f"Invalid trade date {d!r}; expected 'dd MMM yyyy'")
    day, month, year = int(m.group(1)), _MONTHS.index(m.group(2)) + 1, int(m.group(3))
    try:
        return dt.date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"Invalid trade date {d!r}: {e}") from e


def format_trade_date(d: dt.date) -> str:
    """Render a date back into the 'dd MMM yyyy' form used on input."""
    return f"{d.day:02d} {_MONTHS[d.month - 1]} {d.year:04d}"
