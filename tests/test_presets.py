"""Tests for pricing tier and industry preset loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from receptionist_roi.models.enums import DaysOpenMode, Industry, PricingTier
from receptionist_roi.presets.loader import (
    get_industry_preset,
    get_industry_presets,
    get_pricing_tier,
    load_industry_presets,
    load_pricing_tiers,
)
from receptionist_roi.presets.schema import IndustryPreset, industry_label

DATA_DIR = (
    Path(__file__).parent.parent
    / "receptionist_roi"
    / "presets"
    / "data"
)


class TestPricingTiers:
    def test_load_bundled_table(self):
        tiers = load_pricing_tiers(DATA_DIR / "pricing_tiers.json")
        assert set(tiers) == set(PricingTier)

    def test_professional_constants(self):
        tier = get_pricing_tier(PricingTier.PROFESSIONAL)
        assert tier.setup_fee == 1500
        assert tier.monthly_cost == 500
        assert tier.per_minute_cost == pytest.approx(0.40)
        assert tier.recommended is True

    def test_basic_and_enterprise_constants(self):
        basic = get_pricing_tier(PricingTier.BASIC)
        enterprise = get_pricing_tier(PricingTier.ENTERPRISE)
        assert (basic.setup_fee, basic.monthly_cost, basic.per_minute_cost) == (745, 250, 0.45)
        assert (enterprise.setup_fee, enterprise.monthly_cost, enterprise.per_minute_cost) == (
            5000,
            2500,
            0.30,
        )

    def test_missing_tier_rejected(self, tmp_path):
        raw = json.loads((DATA_DIR / "pricing_tiers.json").read_text())
        del raw["enterprise"]
        path = tmp_path / "tiers.json"
        path.write_text(json.dumps(raw))
        with pytest.raises(ValidationError, match="Missing pricing tiers"):
            load_pricing_tiers(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_pricing_tiers(tmp_path / "nope.json")


class TestIndustryPresets:
    def test_load_bundled_table(self):
        presets = load_industry_presets(DATA_DIR / "industry_presets.json")
        assert set(presets) == set(Industry)

    def test_plumbing_preset(self):
        preset = get_industry_preset(Industry.PLUMBING)
        assert preset.days_open == DaysOpenMode.ALLDAYS
        assert preset.business_hour_calls == 15
        assert preset.after_hour_calls == 5
        assert preset.missed_business_hour_calls == 3
        assert preset.avg_call_duration == 10
        assert preset.avg_lead_value == 300
        assert preset.conversion_rate == 13

    def test_cached_table_is_reused(self):
        assert get_industry_presets() is get_industry_presets()

    def test_input_values_exclude_label(self):
        values = get_industry_preset(Industry.HVAC).input_values()
        assert "label" not in values
        assert values["avg_call_duration"] == 12.5

    def test_missed_calls_cannot_exceed_business_calls(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            IndustryPreset(
                days_open="weekdays",
                business_hour_calls=2,
                after_hour_calls=0,
                missed_business_hour_calls=5,
                avg_call_duration=10,
                avg_lead_value=100,
                conversion_rate=10,
            )

    def test_labels(self):
        presets = get_industry_presets()
        assert industry_label(Industry.HVAC, presets[Industry.HVAC]) == "HVAC"
        assert (
            industry_label(
                Industry.LANDSCAPING_AND_LAWN_CARE,
                presets[Industry.LANDSCAPING_AND_LAWN_CARE],
            )
            == "Landscaping And Lawn Care"
        )
