"""Pydantic models for pricing tier and industry preset validation."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from receptionist_roi.models.enums import DaysOpenMode, Industry, PricingTier


class PricingTierConfig(BaseModel):
    """Fixed cost constants for one AI service plan."""

    name: str
    setup_fee: float = Field(ge=0, description="One-time setup fee")
    monthly_cost: float = Field(ge=0, description="Monthly subscription")
    per_minute_cost: float = Field(ge=0, description="Usage cost per call minute")
    description: str = ""
    recommended: bool = False


class IndustryPreset(BaseModel):
    """Default call-profile and revenue inputs for an industry."""

    label: Optional[str] = Field(default=None, description="Display label override")
    days_open: DaysOpenMode
    business_hour_calls: float = Field(ge=0)
    after_hour_calls: float = Field(ge=0)
    missed_business_hour_calls: float = Field(ge=0)
    avg_call_duration: float = Field(ge=0)
    avg_lead_value: float = Field(ge=0)
    conversion_rate: float = Field(ge=0, le=100)

    @model_validator(mode="after")
    def missed_le_business_calls(self) -> IndustryPreset:
        if self.missed_business_hour_calls > self.business_hour_calls:
            raise ValueError(
                f"missed_business_hour_calls ({self.missed_business_hour_calls}) "
                f"cannot exceed business_hour_calls ({self.business_hour_calls})"
            )
        return self

    def input_values(self) -> dict:
        """Values to write into CalculatorInputs when the preset is applied."""
        return self.model_dump(exclude={"label"})


class PricingTierTable(BaseModel):
    tiers: dict[PricingTier, PricingTierConfig]

    @model_validator(mode="after")
    def all_tiers_present(self) -> PricingTierTable:
        missing = set(PricingTier) - set(self.tiers)
        if missing:
            raise ValueError(f"Missing pricing tiers: {sorted(t.value for t in missing)}")
        return self


class IndustryPresetTable(BaseModel):
    industries: dict[Industry, IndustryPreset]

    @model_validator(mode="after")
    def all_industries_present(self) -> IndustryPresetTable:
        missing = set(Industry) - set(self.industries)
        if missing:
            raise ValueError(f"Missing industry presets: {sorted(i.value for i in missing)}")
        return self


def industry_label(industry: Industry, preset: IndustryPreset) -> str:
    """'landscaping_and_lawn_care' -> 'Landscaping And Lawn Care' unless overridden."""
    if preset.label:
        return preset.label
    return industry.value.replace("_", " ").title()
