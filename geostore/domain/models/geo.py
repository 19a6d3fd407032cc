from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from geostore.domain.validation import validate_number
from geostore.wire import GeoPointValue, IWireSerializable, LatLng

logger = logging.getLogger(__name__)

LATITUDE_MIN = -90.0
LATITUDE_MAX = 90.0
LONGITUDE_MIN = -180.0
LONGITUDE_MAX = 180.0


@dataclass(frozen=True, slots=True)
class GeoPoint(IWireSerializable):
    """An immutable latitude/longitude pair stored as a document field.

    Both coordinates are validated once, on construction:
    latitude in [-90, 90] and longitude in [-180, 180], bounds inclusive.
    Out-of-range values are rejected, never clamped or wrapped.
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        validate_number(
            "latitude", self.latitude, min_value=LATITUDE_MIN, max_value=LATITUDE_MAX
        )
        validate_number(
            "longitude",
            self.longitude,
            min_value=LONGITUDE_MIN,
            max_value=LONGITUDE_MAX,
        )
        object.__setattr__(self, "latitude", float(self.latitude))
        object.__setattr__(self, "longitude", float(self.longitude))

    def is_equal(self, other: object) -> bool:
        """True if `other` is a GeoPoint with exactly the same coordinates."""

        return self is other or (
            isinstance(other, GeoPoint)
            and self.latitude == other.latitude
            and self.longitude == other.longitude
        )

    def to_wire_value(self) -> GeoPointValue:
        return GeoPointValue(
            geo_point_value=LatLng(latitude=self.latitude, longitude=self.longitude)
        )

    @classmethod
    def from_wire_value(cls, lat_lng: LatLng | Mapping[str, Any]) -> GeoPoint:
        if not isinstance(lat_lng, LatLng):
            lat_lng = LatLng.model_validate(lat_lng)

        # Unset proto numeric fields read as zero.
        latitude = lat_lng.latitude
        longitude = lat_lng.longitude
        if latitude is None or longitude is None:
            logger.debug(
                "Defaulting absent LatLng fields to 0",
                extra={
                    "latitude_absent": latitude is None,
                    "longitude_absent": longitude is None,
                },
            )
        return cls(
            latitude if latitude is not None else 0.0,
            longitude if longitude is not None else 0.0,
        )
