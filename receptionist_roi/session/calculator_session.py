"""CalculatorSession, the reactive shell around the calculation engine.

The session owns the "current inputs" reference. Every committed mutation
builds a new validated CalculatorInputs and recomputes the result in the
same synchronous call, so readers never see a stale or partial result.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from receptionist_roi.config.settings import Settings, get_settings
from receptionist_roi.engine.calculator import CalculationEngine
from receptionist_roi.engine.result import CalculationResult
from receptionist_roi.models.enums import AnalysisMode, DaysOpenMode, Industry, PricingTier
from receptionist_roi.models.inputs import (
    INDUSTRY_FIELDS,
    NUMERIC_FIELD_RANGES,
    TIER_FIELDS,
    CalculatorInputs,
)
from receptionist_roi.presets.loader import get_industry_preset, get_pricing_tier
from receptionist_roi.validation import (
    InvalidInput,
    NormalizedValue,
    has_errors,
    normalize_field,
)

logger = logging.getLogger(__name__)


def _display_raw(value: float) -> str:
    """15.0 -> '15', 12.5 -> '12.5'"""
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


class CalculatorSession:
    """One user's calculator state.

    Invalid edits keep their raw text and raise a per-field error flag but
    never reach the engine; the result keeps reflecting the last committed
    valid inputs until the field is fixed. Fields edited since the last
    preset was applied are tracked in ``dirty_fields``.
    """

    def __init__(
        self,
        industry: Optional[Industry] = None,
        tier: Optional[PricingTier] = None,
        settings: Optional[Settings] = None,
        engine: Optional[CalculationEngine] = None,
    ) -> None:
        settings = settings or get_settings()
        self._engine = engine or CalculationEngine()
        self.industry = industry or settings.default_industry
        tier = tier or settings.default_tier

        tier_config = get_pricing_tier(tier)
        self._inputs = CalculatorInputs(
            **get_industry_preset(self.industry).input_values(),
            sales_call_percentage=settings.default_sales_call_percentage,
            human_hourly_wage=settings.default_human_hourly_wage,
            human_hours_per_week=settings.default_human_hours_per_week,
            human_overhead_percentage=settings.default_human_overhead_percentage,
            pricing_tier=tier,
            ai_setup_fee=tier_config.setup_fee,
            ai_monthly_cost=tier_config.monthly_cost,
            ai_per_minute_cost=tier_config.per_minute_cost,
        )
        self._raw: dict[str, str] = {}
        self._errors: dict[str, bool] = {}
        self._reset_fields(NUMERIC_FIELD_RANGES)
        self.dirty_fields: set[str] = set()
        self.revision = 0
        self._result = self._engine.calculate(self._inputs)

    # --- Read-only views -------------------------------------------------

    @property
    def inputs(self) -> CalculatorInputs:
        return self._inputs

    @property
    def result(self) -> CalculationResult:
        """Engine output for the current committed inputs."""
        return self._result

    @property
    def pricing_tier(self) -> PricingTier:
        return self._inputs.pricing_tier

    @property
    def analysis_mode(self) -> AnalysisMode:
        return self._inputs.analysis_mode

    @property
    def errors(self) -> dict[str, bool]:
        return dict(self._errors)

    @property
    def raw_values(self) -> dict[str, str]:
        return dict(self._raw)

    @property
    def has_errors(self) -> bool:
        return has_errors(self._errors)

    def invalid_fields(self) -> list[str]:
        return sorted(name for name, flagged in self._errors.items() if flagged)

    def is_preset_value(self, field_name: str) -> bool:
        """True while a field still holds the value of the last applied preset."""
        return field_name not in self.dirty_fields

    # --- Mutations -------------------------------------------------------

    def update_field(self, field_name: str, raw: Any) -> NormalizedValue:
        """Apply a user edit to one numeric field.

        Raises InvalidInput for unknown field names. Invalid values are
        recorded and flagged, and the result is left untouched.
        """
        normalized = normalize_field(field_name, raw)
        self._raw[field_name] = normalized.raw
        self._errors[field_name] = not normalized.valid

        if not normalized.valid:
            logger.warning("Rejected %s=%r", field_name, normalized.raw)
            return normalized

        self.dirty_fields.add(field_name)
        self._commit({field_name: normalized.value})
        return normalized

    def select_tier(self, tier: PricingTier) -> None:
        """Overwrite the AI cost inputs with the tier constants."""
        config = get_pricing_tier(tier)
        self._commit({
            "pricing_tier": tier,
            "ai_setup_fee": config.setup_fee,
            "ai_monthly_cost": config.monthly_cost,
            "ai_per_minute_cost": config.per_minute_cost,
        })
        self._reset_fields(TIER_FIELDS)
        self.dirty_fields.difference_update(TIER_FIELDS)
        logger.info("Applied pricing tier %s", tier.value)

    def select_industry(self, industry: Industry) -> None:
        """Overwrite the call-profile and revenue inputs with the industry preset."""
        self._commit(get_industry_preset(industry).input_values())
        self.industry = industry
        self._reset_fields(INDUSTRY_FIELDS)
        self.dirty_fields.difference_update(INDUSTRY_FIELDS)
        logger.info("Applied industry preset %s", industry.value)

    def set_days_open(self, days_open: DaysOpenMode) -> None:
        self.dirty_fields.add("days_open")
        self._commit({"days_open": days_open})

    def set_analysis_mode(self, mode: AnalysisMode) -> None:
        self._commit({"analysis_mode": mode})

    def compute(self) -> CalculationResult:
        """The explicit calculate action, blocked while any field is invalid."""
        invalid = self.invalid_fields()
        if invalid:
            raise InvalidInput(invalid)
        return self._result

    # --- Serialization ---------------------------------------------------

    def snapshot(self) -> dict[str, Any]:
        return {
            "industry": self.industry.value,
            "pricing_tier": self.pricing_tier.value,
            "analysis_mode": self.analysis_mode.value,
            "revision": self.revision,
            "inputs": self._inputs.model_dump(mode="json"),
            "raw_values": self.raw_values,
            "errors": self.errors,
            "has_errors": self.has_errors,
            "dirty_fields": sorted(self.dirty_fields),
            "result": self._result.to_dict(),
        }

    # --- Internals -------------------------------------------------------

    def _commit(self, updates: dict[str, Any]) -> None:
        """Validate the new input set, swap it in and recompute in one step."""
        self._inputs = CalculatorInputs.model_validate(
            {**self._inputs.model_dump(), **updates}
        )
        self._result = self._engine.calculate(self._inputs)
        self.revision += 1

    def _reset_fields(self, field_names) -> None:
        """Sync raw text with the committed inputs and clear error flags."""
        for name in field_names:
            if name in NUMERIC_FIELD_RANGES:
                self._raw[name] = _display_raw(getattr(self._inputs, name))
                self._errors[name] = False
