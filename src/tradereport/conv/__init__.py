from .conv import format_trade_date, parse_trade_date, to_dec_strict, to_int_strict

__all__ = ["format_trade_date", "parse_trade_date", "to_dec_strict", "to_int_strict"]
