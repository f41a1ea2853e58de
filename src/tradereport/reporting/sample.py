from __future__ import annotations

from tradereport.model import TradeInstruction

# entity, code, agreed fx, currency, instruction date, settlement date, units, price
SAMPLE_ROWS = [
    ("zoo", "B", "0.50", "SGP", "01 Jan 2016", "01 Jan 2016", 100, "100.5"),  # Friday
    ("foo", "B", "0.50", "SGP", "01 Jan 2016", "02 Jan 2016", 200, "100.5"),  # Sat -> Mon
    ("bar", "B", "0.50", "SGP", "01 Jan 2016", "03 Jan 2016", 300, "100.5"),  # Sun -> Mon
    ("moo", "B", "0.50", "SGP", "01 Jan 2016", "04 Jan 2016", 400, "100.5"),  # Monday
    ("doo", "B", "0.50", "SGP", "01 Jan 2016", "05 Jan 2016", 500, "100.5"),  # Tuesday
    ("bar", "S", "0.22", "AED", "05 Jan 2016", "07 Jan 2016", 100, "150.5"),  # Thursday
    ("foo", "S", "0.22", "AED", "05 Jan 2016", "08 Jan 2016", 200, "150.5"),  # Fri -> Sun
    ("zoo", "S", "0.22", "AED", "06 Jan 2016", "09 Jan 2016", 300, "150.5"),  # Sat -> Sun
    ("moo", "S", "0.22", "AED", "06 Jan 2016", "10 Jan 2016", 400, "150.5"),  # Sunday
    ("doo", "S", "0.22", "AED", "06 Jan 2016", "11 Jan 2016", 500, "150.5"),  # Monday
]


def sample_instructions() -> list[TradeInstruction]:
    """The fixed ten-instruction demo dataset."""
    return [TradeInstruction.from_raw(*row) for row in SAMPLE_ROWS]
