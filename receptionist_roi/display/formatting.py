"""String formatting for calculator figures."""

from __future__ import annotations

import math
from typing import Optional

NOT_AVAILABLE = "N/A"


def _is_number(value: Optional[float]) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)


def format_currency(value: Optional[float], decimals: int = 2, symbol: str = "$") -> str:
    """-1234.5 -> '-$1,234.50'. Non-finite or missing values render 'N/A'."""
    if not _is_number(value):
        return NOT_AVAILABLE
    rounded = round(value, decimals)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.{decimals}f}"


def format_percent(value: Optional[float]) -> str:
    """Whole-number percentage: 174.3 -> '174%'."""
    if not _is_number(value):
        return NOT_AVAILABLE
    return f"{value:,.0f}%"


def format_count(value: Optional[float]) -> str:
    if not _is_number(value):
        return "0"
    return f"{value:,.0f}"


def format_payback(period_in_months: Optional[float]) -> str:
    """Render a payback period as whole years and whole months.

    0 -> 'Immediate', inf/None -> 'Never', 14.5 -> '1 year 2 months'.
    Zero components are omitted; a period under one month renders
    'Less than 1 month'.
    """
    if period_in_months is None or not math.isfinite(period_in_months):
        return "Never"
    if period_in_months == 0:
        return "Immediate"

    years = math.floor(period_in_months / 12)
    months = math.floor(period_in_months % 12)

    parts = []
    if years > 0:
        parts.append(f"{years} year{'s' if years > 1 else ''}")
    if months > 0:
        parts.append(f"{months} month{'s' if months > 1 else ''}")
    return " ".join(parts) or "Less than 1 month"


# unit -> formatter, for metrics registered in the KPI library
_UNIT_FORMATTERS = {
    "currency": format_currency,
    "percent": format_percent,
    "months": format_payback,
    "count": format_count,
    "minutes": format_count,
    "days": format_count,
}


def format_metric(unit: str, value: Optional[float]) -> str:
    formatter = _UNIT_FORMATTERS.get(unit, format_count)
    return formatter(value)
