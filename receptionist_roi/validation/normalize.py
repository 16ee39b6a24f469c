"""Coercion of raw form values into range-checked numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from receptionist_roi.models.inputs import NUMERIC_FIELD_RANGES

RawValue = Union[str, int, float]


class InvalidInput(ValueError):
    """One or more fields failed numeric or range validation."""

    def __init__(self, fields: list[str], message: str | None = None) -> None:
        self.fields = sorted(fields)
        super().__init__(message or f"Invalid input for fields: {', '.join(self.fields)}")


@dataclass(frozen=True)
class NormalizedValue:
    """Outcome of normalizing one raw value.

    ``value`` is None when the raw value is not a finite number at all.
    """

    raw: str
    value: Optional[float]
    valid: bool


def normalize(
    raw: RawValue,
    min_value: float = 0,
    max_value: float = math.inf,
) -> NormalizedValue:
    """Parse ``raw`` and check it against the inclusive ``[min, max]`` range.

    Empty, non-numeric and non-finite values are invalid, as are numbers
    outside the range. Booleans are rejected even though they are ints.
    """
    if isinstance(raw, bool):
        return NormalizedValue(raw=str(raw), value=None, valid=False)

    text = raw.strip() if isinstance(raw, str) else str(raw)
    if not text:
        return NormalizedValue(raw=text, value=None, valid=False)

    try:
        number = float(text)
    except ValueError:
        return NormalizedValue(raw=text, value=None, valid=False)

    if not math.isfinite(number):
        return NormalizedValue(raw=text, value=None, valid=False)

    return NormalizedValue(
        raw=text,
        value=number,
        valid=min_value <= number <= max_value,
    )


def normalize_field(field_name: str, raw: RawValue) -> NormalizedValue:
    """Normalize a value against the range registered for a calculator field."""
    if field_name not in NUMERIC_FIELD_RANGES:
        raise InvalidInput([field_name], f"Unknown numeric field: {field_name}")
    min_value, max_value = NUMERIC_FIELD_RANGES[field_name]
    return normalize(raw, min_value, max_value)


def has_errors(errors: Mapping[str, bool]) -> bool:
    """Form-level flag: true when at least one field is invalid."""
    return any(errors.values())
