"""Load and validate pricing tier and industry preset tables from JSON files."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from receptionist_roi.models.enums import Industry, PricingTier
from receptionist_roi.presets.schema import (
    IndustryPreset,
    IndustryPresetTable,
    PricingTierConfig,
    PricingTierTable,
)

# Default directory for preset data files
_DATA_DIR = Path(__file__).parent / "data"


def _read_json(file_path: Path) -> dict:
    if not file_path.exists():
        raise FileNotFoundError(f"Preset file not found: {file_path}")
    with open(file_path, "r") as f:
        return json.load(f)


def load_pricing_tiers(file_path: Path | None = None) -> dict[PricingTier, PricingTierConfig]:
    """Load and validate the pricing tier table.

    If no path is provided, loads the bundled table.
    """
    if file_path is None:
        file_path = _DATA_DIR / "pricing_tiers.json"
    table = PricingTierTable.model_validate({"tiers": _read_json(file_path)})
    return table.tiers


def load_industry_presets(file_path: Path | None = None) -> dict[Industry, IndustryPreset]:
    """Load and validate the industry preset table.

    If no path is provided, loads the bundled table.
    """
    if file_path is None:
        file_path = _DATA_DIR / "industry_presets.json"
    table = IndustryPresetTable.model_validate({"industries": _read_json(file_path)})
    return table.industries


@lru_cache(maxsize=1)
def get_pricing_tiers() -> dict[PricingTier, PricingTierConfig]:
    """Bundled pricing tiers, loaded once."""
    return load_pricing_tiers()


@lru_cache(maxsize=1)
def get_industry_presets() -> dict[Industry, IndustryPreset]:
    """Bundled industry presets, loaded once."""
    return load_industry_presets()


def get_pricing_tier(tier: PricingTier) -> PricingTierConfig:
    return get_pricing_tiers()[tier]


def get_industry_preset(industry: Industry) -> IndustryPreset:
    return get_industry_presets()[industry]
