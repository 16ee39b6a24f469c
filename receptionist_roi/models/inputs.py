"""Immutable input set consumed by the ROI calculation engine."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from receptionist_roi.models.enums import AnalysisMode, DaysOpenMode, PricingTier

# field name -> (min, max), inclusive
NUMERIC_FIELD_RANGES: dict[str, tuple[float, float]] = {
    "business_hour_calls": (0, math.inf),
    "after_hour_calls": (0, math.inf),
    "missed_business_hour_calls": (0, math.inf),
    "avg_call_duration": (0, math.inf),
    "sales_call_percentage": (0, 100),
    "avg_lead_value": (0, math.inf),
    "conversion_rate": (0, 100),
    "human_hourly_wage": (0, math.inf),
    "human_hours_per_week": (0, math.inf),
    "human_overhead_percentage": (0, 200),
    "ai_setup_fee": (0, math.inf),
    "ai_monthly_cost": (0, math.inf),
    "ai_per_minute_cost": (0, math.inf),
}

# Fields overwritten when a pricing tier is selected.
TIER_FIELDS = ("ai_setup_fee", "ai_monthly_cost", "ai_per_minute_cost")

# Fields overwritten when an industry preset is selected.
INDUSTRY_FIELDS = (
    "days_open",
    "business_hour_calls",
    "after_hour_calls",
    "missed_business_hour_calls",
    "avg_call_duration",
    "avg_lead_value",
    "conversion_rate",
)


class CalculatorInputs(BaseModel):
    """Business inputs for one ROI calculation.

    Percentages are plain numbers (47 means 47%). Instances are frozen;
    edits produce a new instance via ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    # Call volume (per day)
    business_hour_calls: float = Field(ge=0, description="Average business-hour calls per day")
    after_hour_calls: float = Field(ge=0, description="Average after-hours calls per day")
    missed_business_hour_calls: float = Field(
        ge=0, description="Average missed business-hour calls per day"
    )
    avg_call_duration: float = Field(ge=0, description="Minutes per call")
    days_open: DaysOpenMode = DaysOpenMode.WEEKDAYS

    # Revenue factors
    sales_call_percentage: float = Field(ge=0, le=100)
    avg_lead_value: float = Field(ge=0)
    conversion_rate: float = Field(ge=0, le=100)

    # Human receptionist
    human_hourly_wage: float = Field(ge=0)
    human_hours_per_week: float = Field(ge=0)
    human_overhead_percentage: float = Field(ge=0, le=200)

    # AI service, seeded from the pricing tier and editable afterwards
    pricing_tier: PricingTier = PricingTier.PROFESSIONAL
    ai_setup_fee: float = Field(ge=0)
    ai_monthly_cost: float = Field(ge=0)
    ai_per_minute_cost: float = Field(ge=0)

    analysis_mode: AnalysisMode = AnalysisMode.REPLACE
