from .instruction import Direction, TradeInstruction, parse_direction
from .loader import load_instructions_csv
from .settlement import adjust_settlement_date, is_settlement_day

__all__ = [
    "Direction",
    "TradeInstruction",
    "parse_direction",
    "load_instructions_csv",
    "adjust_settlement_date",
    "is_settlement_day",
]
