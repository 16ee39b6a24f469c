from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from receptionist_roi.models.enums import AnalysisMode

# Global registry -- maps metric_id -> MetricDefinition, in registration order
_REGISTRY: dict[str, MetricDefinition] = {}

BOTH_MODES = (AnalysisMode.REPLACE, AnalysisMode.ENHANCE)


@dataclass(frozen=True)
class MetricDefinition:
    """A derived metric surfaced by the calculator."""

    id: str  # CalculationResult field name
    label: str
    description: str
    formula_fn: Callable[..., float]
    unit: str = "currency"  # currency | count | minutes | percent | months
    section: str = "impact"
    modes: tuple[AnalysisMode, ...] = BOTH_MODES


def register_metric(
    metric_id: str,
    label: str,
    description: str,
    unit: str = "currency",
    section: str = "impact",
    modes: tuple[AnalysisMode, ...] = BOTH_MODES,
) -> Callable:
    """Decorator registering a formula as the producer of a metric.

    Decorators can be stacked when one formula yields several metrics.
    """

    def decorator(fn: Callable[..., float]) -> Callable[..., float]:
        _REGISTRY[metric_id] = MetricDefinition(
            id=metric_id,
            label=label,
            description=description,
            formula_fn=fn,
            unit=unit,
            section=section,
            modes=modes,
        )
        return fn

    return decorator


def get_metric(metric_id: str) -> Optional[MetricDefinition]:
    """Look up a metric definition by ID."""
    return _REGISTRY.get(metric_id)


def get_all_metrics() -> dict[str, MetricDefinition]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)


def get_metrics_for_mode(mode: AnalysisMode) -> list[MetricDefinition]:
    """Metrics relevant to an analysis mode, in registration order."""
    return [m for m in _REGISTRY.values() if mode in m.modes]
