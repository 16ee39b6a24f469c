"""Immutable result of one ROI calculation."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CalculationResult:
    """Every derived metric for one input set. Monthly unless prefixed yearly/annual.

    ``payback_period_months``, ``enhance_payback_period_months`` and
    ``annual_roi_percent`` may be ``math.inf``, meaning "Never" / "N/A".
    """

    days_per_month: int

    # Call analysis
    total_calls: float
    missed_calls: float
    sales_missed_calls: float
    total_minutes: float

    # AI service cost
    ai_setup_fee: float
    ai_base_cost: float
    ai_minute_cost: float
    ai_total_monthly_cost: float
    ai_setup_fee_monthly: float
    ai_total_cost_with_setup: float

    # Human cost
    human_monthly_cost: float
    human_annual_cost: float

    # Replace scenario
    value_per_call: float
    potential_revenue: float
    cost_savings: float
    net_benefit: float
    payback_period_months: float

    # Annual figures
    yearly_cost_savings: float
    yearly_potential_revenue: float
    yearly_net_benefit: float
    annual_roi_percent: float
    first_year_net_return: float
    first_year_revenue_vs_ai_cost: float

    # Enhance scenario
    enhance_monthly_net_gain: float
    enhance_payback_period_months: float

    def get(self, metric_id: str) -> Any:
        return getattr(self, metric_id)

    def to_dict(self) -> dict[str, Optional[float]]:
        """JSON-safe dict; non-finite values become None."""
        return {key: finite_or_none(value) for key, value in asdict(self).items()}


def finite_or_none(value: float) -> Optional[float]:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
