from .normalize import (
    InvalidInput,
    NormalizedValue,
    has_errors,
    normalize,
    normalize_field,
)

__all__ = [
    "InvalidInput",
    "NormalizedValue",
    "has_errors",
    "normalize",
    "normalize_field",
]
