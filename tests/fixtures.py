"""Test fixtures for trade instructions.

Production code builds TradeInstruction objects from raw text via
TradeInstruction.from_raw. Tests mostly care about one or two fields, so
``instruction`` fills the rest with neutral defaults.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from tradereport.model import Direction, TradeInstruction


def instruction(
    entity_name: str = "Entity1",
    direction: Direction = Direction.OUTGOING,
    *,
    agreed_fx: Decimal = Decimal("1"),
    currency: str = "USD",
    settlement_date: dt.date = dt.date(2016, 1, 5),
    units: int = 1,
    price_per_unit: Decimal = Decimal("100"),
) -> TradeInstruction:
    return TradeInstruction(
        entity_name=entity_name,
        direction=direction,
        agreed_fx=agreed_fx,
        currency=currency,
        instruction_date=dt.date(2016, 1, 1),
        instructed_settlement_date=settlement_date,
        units=units,
        price_per_unit=price_per_unit,
    )
