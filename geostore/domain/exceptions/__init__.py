from .validation import (
    GeoPointValidationError,
    RangeValidationError,
    TypeValidationError,
)

__all__ = [
    "GeoPointValidationError",
    "RangeValidationError",
    "TypeValidationError",
]
