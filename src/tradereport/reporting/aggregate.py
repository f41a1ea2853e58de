from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterable
from decimal import Decimal

from tradereport.errors import InvalidArgumentError
from tradereport.model import Direction, TradeInstruction

logger = logging.getLogger(__name__)


def _matching(
    records: Iterable[TradeInstruction] | None, direction: Direction
) -> list[TradeInstruction]:
    if records is None:
        raise InvalidArgumentError("Trade instructions should not be None.")
    return [r for r in records if r.direction is direction]


def sum_by_direction(
    records: Iterable[TradeInstruction] | None, direction: Direction
) -> dict[dt.date, Decimal]:
    """Total USD amount per actual settlement date for one direction.

    Dates appear in the order they are first seen in ``records``; dates with
    no matching trade are absent rather than zero.
    """
    totals: dict[dt.date, Decimal] = {}
    for r in _matching(records, direction):
        d = r.actual_settlement_date
        totals[d] = totals.get(d, Decimal("0")) + r.usd_amount
    logger.debug("%s settlements: %d date(s)", direction.name, len(totals))
    return totals


def rank_by_direction(
    records: Iterable[TradeInstruction] | None, direction: Direction
) -> list[tuple[str, Decimal]]:
    """Entities ordered by USD amount, highest first, one entry per trade.

    Equal amounts keep their input order. The same entity can appear more than
    once.
    """
    matching = _matching(records, direction)
    # sorted() is stable with reverse=True too
    ranked = sorted(matching, key=lambda r: r.usd_amount, reverse=True)
    logger.debug("%s ranking: %d trade(s)", direction.name, len(ranked))
    return [(r.entity_name, r.usd_amount) for r in ranked]
