from .ports import IWireSerializable
from .schemas import GeoPointValue, LatLng

__all__ = [
    "GeoPointValue",
    "IWireSerializable",
    "LatLng",
]
