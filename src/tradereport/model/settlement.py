from __future__ import annotations

import datetime as dt

# Currencies whose working week runs Sunday to Thursday
SPECIAL_CURRENCIES = frozenset({"AED", "SAR"})

_FRIDAY, _SATURDAY, _SUNDAY = 4, 5, 6


def is_special_currency(currency: str) -> bool:
    return currency.upper() in SPECIAL_CURRENCIES


def is_settlement_day(day: dt.date, currency: str) -> bool:
    """True if cash can move on ``day`` under the currency's working week."""
    weekend = (_FRIDAY, _SATURDAY) if is_special_currency(currency) else (_SATURDAY, _SUNDAY)
    return day.weekday() not in weekend


def adjust_settlement_date(instructed: dt.date, currency: str) -> dt.date:
    """Move an instructed settlement date forward to the next working day.

    AED and SAR settle Sunday to Thursday, every other currency Monday to
    Friday. Dates that already fall on a working day are returned unchanged,
    so shifts only ever move forward.
    """
    weekday = instructed.weekday()
    special = is_special_currency(currency)

    if weekday == _FRIDAY:
        return instructed + dt.timedelta(days=2) if special else instructed
    if weekday == _SATURDAY:
        return instructed + dt.timedelta(days=1 if special else 2)
    if weekday == _SUNDAY:
        return instructed if special else instructed + dt.timedelta(days=1)
    return instructed
