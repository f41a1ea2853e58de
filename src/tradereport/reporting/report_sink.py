from __future__ import annotations

import datetime as dt
import sys
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Protocol, TextIO

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from tradereport.conv import format_trade_date

from .money import format_usd
from .report_builder import SettlementReport


class ReportSink(Protocol):
    def write(self, report: SettlementReport) -> Path | None:  # path if a file was written
        ...


def _default_stream() -> TextIO:
    return sys.stdout


@dataclass
class TextReportSink:
    """Console layout: banner, one line per date or ranked entity, closing banner."""

    stream: TextIO = field(default_factory=_default_stream)

    def write(self, report: SettlementReport) -> None:
        sections = [
            self._settlement_lines("Outgoing", report.outgoing_settlements),
            self._settlement_lines("Incoming", report.incoming_settlements),
            self._ranking_lines("Outgoing", report.outgoing_ranking),
            self._ranking_lines("Incoming", report.incoming_ranking),
        ]
        out = "\n\n".join("\n".join(lines) for lines in sections)
        self.stream.write(out + "\n")

    @staticmethod
    def _settlement_lines(label: str, settlements: dict[dt.date, Decimal]) -> list[str]:
        lines = [f"### {label} USD Settlements for dates ###"]
        for d, amount in settlements.items():
            lines.append(f"{format_trade_date(d)} - {format_usd(amount)}")
        lines.append(f"### End of {label} USD Settlements ###")
        return lines

    @staticmethod
    def _ranking_lines(label: str, ranking: list[tuple[str, Decimal]]) -> list[str]:
        lines = [f"### Ranking of Entities based on {label} USD Settlements ###"]
        for rank, (entity, amount) in enumerate(ranking, start=1):
            lines.append(f"{rank}) {entity} {format_usd(amount)}")
        lines.append(f"### End of Ranking of {label} USD Settlements ###")
        return lines


_LABELS = {
    "sheet": {
        "summary": "Totals",
        "outgoing_settlements": "Outgoing Settlements",
        "incoming_settlements": "Incoming Settlements",
        "outgoing_ranking": "Outgoing Ranking",
        "incoming_ranking": "Incoming Ranking",
    },
    "summary": {
        "metric": "Metric",
        "amount": "Amount (USD)",
        "outgoing": "Total Outgoing (USD)",
        "incoming": "Total Incoming (USD)",
    },
    "settlements": {
        "date": "Settlement Date",
        "amount": "Amount (USD)",
    },
    "ranking": {
        "rank": "Rank",
        "entity": "Entity",
        "amount": "Amount (USD)",
    },
}

_DATE_FMT = "DD MMM YYYY"
_USD_FMT = "$#,##0.00"


@dataclass
class ExcelReportSink:
    out_path: Path

    def write(self, report: SettlementReport) -> Path:
        out_path = Path(self.out_path)
        wb = Workbook()

        # Remove the default sheet
        wb.remove(wb.active)

        labels = _LABELS

        ws = wb.create_sheet(title=labels["sheet"]["summary"])
        ws.append([labels["summary"]["metric"], labels["summary"]["amount"]])
        ws.append([labels["summary"]["outgoing"], float(report.outgoing_total)])
        ws.cell(row=ws.max_row, column=2).number_format = _USD_FMT
        ws.append([labels["summary"]["incoming"], float(report.incoming_total)])
        ws.cell(row=ws.max_row, column=2).number_format = _USD_FMT

        for key, settlements in (
            ("outgoing_settlements", report.outgoing_settlements),
            ("incoming_settlements", report.incoming_settlements),
        ):
            ws = wb.create_sheet(title=labels["sheet"][key])
            ws.append(
                [labels["settlements"]["date"], labels["settlements"]["amount"]]
            )
            for d, amount in settlements.items():
                ws.append([d, float(amount)])
                r = ws.max_row
                ws.cell(row=r, column=1).number_format = _DATE_FMT
                ws.cell(row=r, column=2).number_format = _USD_FMT

        for key, ranking in (
            ("outgoing_ranking", report.outgoing_ranking),
            ("incoming_ranking", report.incoming_ranking),
        ):
            ws = wb.create_sheet(title=labels["sheet"][key])
            ws.append(
                [
                    labels["ranking"]["rank"],
                    labels["ranking"]["entity"],
                    labels["ranking"]["amount"],
                ]
            )
            for rank, (entity, amount) in enumerate(ranking, start=1):
                ws.append([rank, entity, float(amount)])
                ws.cell(row=ws.max_row, column=3).number_format = _USD_FMT

        for _ws in wb.worksheets:
            self._autosize(_ws)

        out_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(out_path)
        return out_path

    @staticmethod
    def _autosize(sheet, max_width: int = 40, min_width: int = 10) -> None:
        for col in range(1, sheet.max_column + 1):
            max_len = 0
            for row in range(1, sheet.max_row + 1):
                v = sheet.cell(row=row, column=col).value
                if v is None:
                    continue
                # Approximate display width using string conversion
                s = format_trade_date(v) if isinstance(v, dt.date) else str(v)
                max_len = max(max_len, len(s))
            width = min(max_width, max(min_width, max_len + 2))
            sheet.column_dimensions[get_column_letter(col)].width = width
