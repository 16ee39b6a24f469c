"""Shared test fixtures for the ROI calculator test suite."""

import pytest

from receptionist_roi.config.settings import Settings
from receptionist_roi.engine.calculator import CalculationEngine
from receptionist_roi.models.enums import DaysOpenMode, PricingTier
from receptionist_roi.models.inputs import CalculatorInputs


def make_inputs(**overrides) -> CalculatorInputs:
    """Plumbing preset + professional tier, with optional overrides."""
    values = dict(
        business_hour_calls=15,
        after_hour_calls=5,
        missed_business_hour_calls=3,
        avg_call_duration=10,
        days_open=DaysOpenMode.ALLDAYS,
        avg_lead_value=300,
        conversion_rate=13,
        sales_call_percentage=47,
        human_hourly_wage=18,
        human_hours_per_week=40,
        human_overhead_percentage=25,
        pricing_tier=PricingTier.PROFESSIONAL,
        ai_setup_fee=1500,
        ai_monthly_cost=500,
        ai_per_minute_cost=0.40,
    )
    values.update(overrides)
    return CalculatorInputs(**values)


@pytest.fixture
def engine():
    return CalculationEngine()


@pytest.fixture
def plumbing_inputs() -> CalculatorInputs:
    """The worked plumbing example: 15 business / 5 after-hours calls a day."""
    return make_inputs()


@pytest.fixture
def zero_inputs() -> CalculatorInputs:
    """Every numeric input at zero."""
    return make_inputs(
        business_hour_calls=0,
        after_hour_calls=0,
        missed_business_hour_calls=0,
        avg_call_duration=0,
        avg_lead_value=0,
        conversion_rate=0,
        sales_call_percentage=0,
        human_hourly_wage=0,
        human_hours_per_week=0,
        human_overhead_percentage=0,
        ai_setup_fee=0,
        ai_monthly_cost=0,
        ai_per_minute_cost=0,
    )


@pytest.fixture
def settings() -> Settings:
    """Settings with the stock defaults, independent of the environment."""
    return Settings(_env_file=None)
