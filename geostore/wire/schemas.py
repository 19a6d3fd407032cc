from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LatLng(BaseModel):
    """google.type.LatLng; an unset field reads as absent (None)."""

    # No coercion from bool or str, no unknown keys.
    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    latitude: float | None = None
    longitude: float | None = None


class GeoPointValue(BaseModel):
    """The `geoPointValue` arm of a protocol Value."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    geo_point_value: LatLng = Field(..., alias="geoPointValue")
