import datetime as dt
from decimal import Decimal

import pytest

from tradereport.conv import (
    format_trade_date,
    parse_trade_date,
    to_dec_strict,
    to_int_strict,
)
from tradereport.errors import InvalidDateError


def test_to_dec_strict_standard():
    assert to_dec_strict("100") == Decimal("100")
    assert to_dec_strict("100.5") == Decimal("100.5")
    assert to_dec_strict("1,000.00") == Decimal("1000.00")
    assert to_dec_strict(10) == Decimal("10")
    assert to_dec_strict(0.22) == Decimal("0.22")
    assert to_dec_strict(Decimal("5.5")) == Decimal("5.5")


def test_to_dec_strict_raises():
    with pytest.raises(ValueError, match="Value is None"):
        to_dec_strict(None)

    with pytest.raises(ValueError, match="Value is empty string"):
        to_dec_strict("  ")

    with pytest.raises(ValueError, match="Invalid decimal format"):
        to_dec_strict("abc")

    with pytest.raises(ValueError, match="Invalid decimal format"):
        to_dec_strict("$100.00")


def test_to_int_strict():
    assert to_int_strict(300) == 300
    assert to_int_strict("300") == 300
    assert to_int_strict(" 1,000 ") == 1000

    with pytest.raises(ValueError, match="Invalid integer value"):
        to_int_strict("1.5")
    with pytest.raises(ValueError, match="Invalid integer value"):
        to_int_strict(True)
    with pytest.raises(ValueError):
        to_int_strict(None)


def test_parse_trade_date():
    assert parse_trade_date("05 Jan 2016") == dt.date(2016, 1, 5)
    assert parse_trade_date("29 Feb 2016") == dt.date(2016, 2, 29)
    assert parse_trade_date(" 31 Dec 2023 ") == dt.date(2023, 12, 31)
    assert parse_trade_date(dt.date(2016, 1, 1)) == dt.date(2016, 1, 1)


@pytest.mark.parametrize(
    "text",
    [
        "2016-01-05",
        "5 Jan 2016",
        "05 JAN 2016",
        "05 January 2016",
        "05 Foo 2016",
        "30 Feb 2016",
        "",
    ],
)
def test_parse_trade_date_rejects_malformed(text):
    with pytest.raises(InvalidDateError, match="Invalid trade date"):
        parse_trade_date(text)


def test_invalid_date_is_a_value_error():
    with pytest.raises(ValueError):
        parse_trade_date("not a date")


def test_format_trade_date():
    assert format_trade_date(dt.date(2016, 1, 5)) == "05 Jan 2016"
    assert format_trade_date(dt.date(2023, 11, 30)) == "30 Nov 2023"
