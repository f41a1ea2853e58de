from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from tradereport.model import Direction, TradeInstruction

from .aggregate import rank_by_direction, sum_by_direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettlementReport:
    outgoing_settlements: dict[dt.date, Decimal]
    incoming_settlements: dict[dt.date, Decimal]
    outgoing_ranking: list[tuple[str, Decimal]]
    incoming_ranking: list[tuple[str, Decimal]]

    @classmethod
    def from_instructions(
        cls, instructions: Sequence[TradeInstruction]
    ) -> SettlementReport:
        report = cls(
            outgoing_settlements=sum_by_direction(instructions, Direction.OUTGOING),
            incoming_settlements=sum_by_direction(instructions, Direction.INCOMING),
            outgoing_ranking=rank_by_direction(instructions, Direction.OUTGOING),
            incoming_ranking=rank_by_direction(instructions, Direction.INCOMING),
        )
        logger.info(
            "Report built: %d outgoing date(s), %d incoming date(s), "
            "%d outgoing trade(s), %d incoming trade(s)",
            len(report.outgoing_settlements),
            len(report.incoming_settlements),
            len(report.outgoing_ranking),
            len(report.incoming_ranking),
        )
        return report

    @property
    def outgoing_total(self) -> Decimal:
        return sum(self.outgoing_settlements.values(), Decimal("0"))

    @property
    def incoming_total(self) -> Decimal:
        return sum(self.incoming_settlements.values(), Decimal("0"))
