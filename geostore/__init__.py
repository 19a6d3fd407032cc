from geostore.domain.exceptions import (
    GeoPointValidationError,
    RangeValidationError,
    TypeValidationError,
)
from geostore.domain.models import GeoPoint

__all__ = [
    "GeoPoint",
    "GeoPointValidationError",
    "RangeValidationError",
    "TypeValidationError",
]
