"""Great-circle distance on a spherical earth."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from farm_boundary.core.constants import EARTH_RADIUS_M

if TYPE_CHECKING:
    from farm_boundary.models.point import GeoPoint


def haversine_distance_m(a: GeoPoint, b: GeoPoint, *, radius_m: float = EARTH_RADIUS_M) -> float:
    """Return the great-circle distance between two points in metres.

    Symmetric in its arguments and exactly ``0.0`` for identical points.
    Antipodal points return ``pi * radius_m``.
    """
    if a.lat == b.lat and a.lng == b.lng:
        return 0.0

    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    d_lat = lat2 - lat1
    d_lng = math.radians(b.lng) - math.radians(a.lng)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    # Rounding can push h a hair outside [0, 1] near antipodes
    h = min(1.0, max(0.0, h))
    return 2 * radius_m * math.atan2(math.sqrt(h), math.sqrt(1 - h))
