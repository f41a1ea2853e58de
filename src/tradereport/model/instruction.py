from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from tradereport.conv import parse_trade_date, to_dec_strict, to_int_strict
from tradereport.errors import InvalidArgumentError, MissingRequiredFieldError

from .settlement import adjust_settlement_date


class Direction(Enum):
    """Direction of the USD cash flow for the reporting entity.

    Buying assets sends USD out, selling brings USD in.
    """

    OUTGOING = "B"
    INCOMING = "S"


def parse_direction(code: str | None) -> Direction:
    """Map an instruction code to a Direction. Exact, case-sensitive match."""
    if code == Direction.OUTGOING.value:
        return Direction.OUTGOING
    if code == Direction.INCOMING.value:
        return Direction.INCOMING
    raise InvalidArgumentError(f"Instruction type provided is invalid: {code!r}")


def _require(value, field_name: str):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingRequiredFieldError(field_name)
    return value


@dataclass(frozen=True)
class TradeInstruction:
    entity_name: str
    direction: Direction
    agreed_fx: Decimal
    currency: str
    instruction_date: dt.date
    instructed_settlement_date: dt.date
    units: int
    price_per_unit: Decimal
    actual_settlement_date: dt.date = field(init=False)

    def __post_init__(self) -> None:
        _require(self.entity_name, "Entity name")
        if self.direction is None:
            raise MissingRequiredFieldError("Instruction type")
        _require(self.currency, "Currency")
        _require(self.instruction_date, "Instruction date")
        _require(self.instructed_settlement_date, "Settlement date")
        if not isinstance(self.direction, Direction):
            raise InvalidArgumentError(
                f"Instruction type provided is invalid: {self.direction!r}"
            )
        # frozen: set the derived date once, here
        object.__setattr__(
            self,
            "actual_settlement_date",
            adjust_settlement_date(self.instructed_settlement_date, self.currency),
        )

    @classmethod
    def from_raw(
        cls,
        entity_name: str | None,
        direction_code: str | None,
        agreed_fx: str | float | Decimal,
        currency: str | None,
        instruction_date: str | dt.date | None,
        instructed_settlement_date: str | dt.date | None,
        units: str | int,
        price_per_unit: str | float | Decimal,
    ) -> TradeInstruction:
        """Build an instruction from raw input fields.

        Dates are 'dd MMM yyyy' text (e.g. '05 Jan 2016'); numbers may be text
        or numeric. Required fields are checked before anything is parsed.
        """
        _require(entity_name, "Entity name")
        if direction_code is None:
            raise MissingRequiredFieldError("Instruction type")
        _require(currency, "Currency")
        _require(instruction_date, "Instruction date")
        _require(instructed_settlement_date, "Settlement date")
        return cls(
            entity_name=entity_name,
            direction=parse_direction(direction_code),
            agreed_fx=to_dec_strict(agreed_fx),
            currency=currency,
            instruction_date=parse_trade_date(instruction_date),
            instructed_settlement_date=parse_trade_date(instructed_settlement_date),
            units=to_int_strict(units),
            price_per_unit=to_dec_strict(price_per_unit),
        )

    @property
    def usd_amount(self) -> Decimal:
        """units x price per unit x agreed FX rate, unrounded."""
        return self.price_per_unit * self.units * self.agreed_fx
