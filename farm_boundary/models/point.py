"""Geographic point and GeoJSON Polygon types.

``GeoPoint`` uses the conventional ``(lat, lng)`` argument order, while
GeoJSON coordinates are ``[lng, lat]``.  The conversion helpers here are
the only place that order is swapped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypedDict


class GeoJSONPolygon(TypedDict):
    """GeoJSON ``Polygon`` geometry with a single, closed outer ring."""

    type: Literal["Polygon"]
    coordinates: list[list[list[float]]]


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A WGS 84 point in decimal degrees.

    Attributes:
        lat: Latitude in degrees.
        lng: Longitude in degrees.
    """

    lat: float
    lng: float

    def to_coordinate(self) -> list[float]:
        """Return the GeoJSON ``[lng, lat]`` pair."""
        return [self.lng, self.lat]

    @classmethod
    def from_coordinate(cls, coord: list[float] | tuple[float, ...]) -> GeoPoint:
        """Build from a GeoJSON ``[lng, lat(, alt)]`` pair; altitude is ignored."""
        return cls(lat=float(coord[1]), lng=float(coord[0]))

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> GeoPoint:
        """Deserialise from a ``{"lat": ..., "lng": ...}`` mapping.

        Raises:
            KeyError: If ``lat`` or ``lng`` is missing.
            TypeError: If a value is not numeric.
        """
        lat = data["lat"]
        lng = data["lng"]
        if isinstance(lat, bool) or not isinstance(lat, int | float):
            msg = f"lat must be a number, got {type(lat).__name__}"
            raise TypeError(msg)
        if isinstance(lng, bool) or not isinstance(lng, int | float):
            msg = f"lng must be a number, got {type(lng).__name__}"
            raise TypeError(msg)
        return cls(lat=float(lat), lng=float(lng))
