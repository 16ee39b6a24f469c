from .formatting import format_currency, format_metric, format_payback, format_percent
from .report import build_chart, build_report

__all__ = [
    "format_currency",
    "format_metric",
    "format_payback",
    "format_percent",
    "build_chart",
    "build_report",
]
