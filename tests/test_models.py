"""Tests for CalculatorInputs range checks and immutability."""

import math

import pytest
from pydantic import ValidationError

from receptionist_roi.models.inputs import NUMERIC_FIELD_RANGES, CalculatorInputs
from tests.conftest import make_inputs


class TestCalculatorInputs:
    def test_defaults(self, plumbing_inputs):
        assert plumbing_inputs.analysis_mode.value == "replace"
        assert plumbing_inputs.pricing_tier.value == "professional"

    def test_frozen(self, plumbing_inputs):
        with pytest.raises(ValidationError):
            plumbing_inputs.business_hour_calls = 99

    @pytest.mark.parametrize("field_name", sorted(NUMERIC_FIELD_RANGES))
    def test_negative_values_rejected(self, field_name):
        with pytest.raises(ValidationError):
            make_inputs(**{field_name: -1})

    @pytest.mark.parametrize(
        "field_name", [name for name, (_, hi) in NUMERIC_FIELD_RANGES.items() if math.isfinite(hi)]
    )
    def test_upper_bounds_enforced(self, field_name):
        _, max_value = NUMERIC_FIELD_RANGES[field_name]
        make_inputs(**{field_name: max_value})
        with pytest.raises(ValidationError):
            make_inputs(**{field_name: max_value + 1})

    def test_infinity_rejected(self):
        with pytest.raises(ValidationError):
            make_inputs(avg_lead_value=math.inf)

    def test_unknown_days_open_rejected(self):
        with pytest.raises(ValidationError):
            make_inputs(days_open="fortnightly")
