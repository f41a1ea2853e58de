from .aggregate import rank_by_direction, sum_by_direction
from .report_builder import SettlementReport
from .report_sink import ExcelReportSink, ReportSink, TextReportSink
from .sample import sample_instructions

__all__ = [
    "rank_by_direction",
    "sum_by_direction",
    "SettlementReport",
    "ReportSink",
    "ExcelReportSink",
    "TextReportSink",
    "sample_instructions",
]
