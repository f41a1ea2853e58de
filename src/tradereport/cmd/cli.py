"""
Report daily USD settlement totals and entity rankings for trade instructions.

Each instruction's settlement date is first moved to a working day for its
currency (Sunday-Thursday for AED/SAR, Monday-Friday otherwise). The report then
lists outgoing (buy) and incoming (sell) USD totals per settlement date and ranks
entities by USD amount for each direction.

Usage
-----
    # Built-in sample data, printed to stdout
    python -m tradereport.cmd.cli

    # One or more instruction files, plus an XLSX workbook
    python -m tradereport.cmd.cli \
        --output ./settlements.xlsx \
        /path/to/instructions_jan.csv /path/to/instructions_feb.csv

Instruction CSV schema:
    entity,direction,agreed_fx,currency,instruction_date,settlement_date,units,price_per_unit
    foo,B,0.50,SGP,01 Jan 2016,02 Jan 2016,200,100.5
"""

from __future__ import annotations

import argparse
import logging
from decimal import ROUND_HALF_UP, getcontext
from pathlib import Path

from tradereport.logging import configure_logging
from tradereport.model import load_instructions_csv
from tradereport.reporting import (
    ExcelReportSink,
    SettlementReport,
    TextReportSink,
    sample_instructions,
)

# Monetary precision and rounding
getcontext().prec = 28
getcontext().rounding = ROUND_HALF_UP


def process_files(args: argparse.Namespace) -> None:
    logger = logging.getLogger(__name__)

    if args.input:
        logger.info("Reading %d file(s): %s", len(args.input), ", ".join(args.input))
        instructions = []
        for p in args.input:
            instructions.extend(load_instructions_csv(p))
    else:
        logger.info("No input files given; using sample instructions")
        instructions = sample_instructions()

    logger.info("Loaded %d instruction(s)", len(instructions))

    report = SettlementReport.from_instructions(instructions)
    TextReportSink().write(report)

    if args.output:
        try:
            out_path = ExcelReportSink(out_path=Path(args.output)).write(report)
        except Exception as e:
            logger.exception("Failed to write workbook: %s", e)
            raise
        logger.info("Wrote workbook to %s", out_path)


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="USD settlement totals and entity rankings from trade instructions"
    )
    p.add_argument(
        "input",
        type=str,
        nargs="*",
        help="Instruction CSV paths. If omitted, the built-in sample data is used",
    )
    p.add_argument(
        "--output",
        type=str,
        default=None,
        help="Also write an XLSX workbook to this path (e.g., report.xlsx)",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity: -v (INFO), -vv (DEBUG)",
    )
    return p


def main(argv: list[str] | None = None) -> None:
    parser = build_argparser()
    args = parser.parse_args(argv)

    # Configure logging based on verbosity
    verbosity_map = {
        0: logging.WARNING,  # Default: quiet
        1: logging.INFO,  # -v: informational
        2: logging.DEBUG,  # -vv and above: debug
    }
    level = verbosity_map.get(min(args.verbose, 2), logging.WARNING)
    configure_logging(level=level)

    process_files(args)


if __name__ == "__main__":
    main()
