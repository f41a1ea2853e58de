from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

MoneyLike = str | Decimal

_MONEY_Q = Decimal("0.01")


def quantize_money(value: Decimal, places: MoneyLike = _MONEY_Q) -> Decimal:
    """Quantize monetary values half-up, whatever the active decimal context."""
    quant = Decimal(places)
    return value.quantize(quant, rounding=ROUND_HALF_UP)


def format_usd(value: Decimal) -> str:
    """'$(1234.50)' as printed in the console report."""
    return f"$({quantize_money(value)})"
