from __future__ import annotations

import csv
import logging
from pathlib import Path

from .instruction import TradeInstruction

logger = logging.getLogger(__name__)

INSTRUCTION_COLS = [
    "entity",
    "direction",
    "agreed_fx",
    "currency",
    "instruction_date",
    "settlement_date",
    "units",
    "price_per_unit",
]


def _blank_to_none(value: str | None, *, strip: bool = True) -> str | None:
    if value is None:
        return None
    if strip:
        value = value.strip()
    return value or None


def load_instructions_csv(path: str | Path) -> list[TradeInstruction]:
    """Read trade instructions from a CSV file.

    Expected header (extra columns are ignored):
        entity,direction,agreed_fx,currency,instruction_date,settlement_date,units,price_per_unit

    Dates use the 'dd MMM yyyy' form, e.g. '05 Jan 2016'. Blank cells count as
    absent, so a row missing a required value fails the whole load. Cells are
    trimmed of surrounding whitespace except the direction code, which must be
    exactly "B" or "S".
    """
    instructions: list[TradeInstruction] = []
    with open(path, encoding="utf-8", newline="") as fp:
        reader = csv.DictReader(fp)
        fields = set(reader.fieldnames or [])
        missing = [c for c in INSTRUCTION_COLS if c not in fields]
        if missing:
            raise ValueError(f"Instruction file missing columns: {missing}")

        for row in reader:
            values = [
                _blank_to_none(row.get(c), strip=c != "direction")
                for c in INSTRUCTION_COLS
            ]
            try:
                instructions.append(TradeInstruction.from_raw(*values))
            except ValueError as e:
                logger.error("%s: line %d: %s", path, reader.line_num, e)
                raise

    logger.debug("Loaded %d instruction(s) from %s", len(instructions), path)
    return instructions
