"""Area, perimeter, path length and centroid of drawn boundaries.

All measurements use a spherical earth (default radius 6,371 km).  That
is accurate enough for farm-scale parcels; it is not survey-grade.

Rounding conventions:
    - Area is reported in acres to 2 decimal places.
    - Perimeter defaults to whole feet (``rounded=True``).
    - Path length defaults to unrounded feet (``rounded=False``).
    Both length functions accept ``rounded`` to get the other form.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Literal, overload

from farm_boundary.core.constants import (
    ACRES_DECIMALS,
    EARTH_RADIUS_M,
    FEET_PER_METRE,
    MIN_PATH_POINTS,
    MIN_RING_POINTS,
    SQ_METRES_PER_ACRE,
)
from farm_boundary.geometry.distance import haversine_distance_m
from farm_boundary.models.point import GeoPoint

if TYPE_CHECKING:
    from collections.abc import Sequence

# ---------------------------------------------------------------------------
# Area
# ---------------------------------------------------------------------------


def calculate_area_m2(points: Sequence[GeoPoint], *, radius_m: float = EARTH_RADIUS_M) -> float:
    """Return the unsigned spherical area of a ring in square metres.

    The ring may be open or pre-closed; it is closed here if the first
    and last points differ.  Fewer than 3 points yields ``0.0``.
    """
    if len(points) < MIN_RING_POINTS:
        return 0.0

    ring = list(points)
    if ring[0] != ring[-1]:
        ring.append(ring[0])

    total = 0.0
    for p1, p2 in zip(ring, ring[1:]):
        lat1 = math.radians(p1.lat)
        lat2 = math.radians(p2.lat)
        d_lng = math.radians(p2.lng) - math.radians(p1.lng)
        total += d_lng * (2 + math.sin(lat1) + math.sin(lat2))

    return abs(total * radius_m * radius_m / 2)


def calculate_acres(points: Sequence[GeoPoint], *, radius_m: float = EARTH_RADIUS_M) -> float:
    """Return the enclosed area in acres, rounded to 2 decimal places.

    Winding order and starting vertex do not affect the result.
    """
    area_m2 = calculate_area_m2(points, radius_m=radius_m)
    return round(area_m2 / SQ_METRES_PER_ACRE, ACRES_DECIMALS)


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def polyline_length_m(
    points: Sequence[GeoPoint], *, closed: bool, radius_m: float = EARTH_RADIUS_M
) -> float:
    """Sum great-circle segment lengths in metres.

    With ``closed=True`` the edge from the last point back to the first
    is included.  Fewer than 2 points yields ``0.0``.
    """
    if len(points) < MIN_PATH_POINTS:
        return 0.0

    total = sum(
        haversine_distance_m(a, b, radius_m=radius_m) for a, b in zip(points, points[1:])
    )
    if closed:
        total += haversine_distance_m(points[-1], points[0], radius_m=radius_m)
    return total


@overload
def calculate_perimeter_feet(
    points: Sequence[GeoPoint], *, rounded: Literal[True] = ..., radius_m: float = ...
) -> int: ...
@overload
def calculate_perimeter_feet(
    points: Sequence[GeoPoint], *, rounded: Literal[False], radius_m: float = ...
) -> float: ...
def calculate_perimeter_feet(
    points: Sequence[GeoPoint], *, rounded: bool = True, radius_m: float = EARTH_RADIUS_M
) -> int | float:
    """Return the ring perimeter in feet, including the closing edge.

    Args:
        points: Ring vertices, open or pre-closed.
        rounded: Round to the nearest whole foot (returns ``int``).
        radius_m: Sphere radius in metres.
    """
    feet = polyline_length_m(points, closed=True, radius_m=radius_m) * FEET_PER_METRE
    return round(feet) if rounded else feet


@overload
def calculate_path_length_feet(
    points: Sequence[GeoPoint], *, rounded: Literal[False] = ..., radius_m: float = ...
) -> float: ...
@overload
def calculate_path_length_feet(
    points: Sequence[GeoPoint], *, rounded: Literal[True], radius_m: float = ...
) -> int: ...
def calculate_path_length_feet(
    points: Sequence[GeoPoint], *, rounded: bool = False, radius_m: float = EARTH_RADIUS_M
) -> int | float:
    """Return the length of an open path in feet (no closing edge).

    Args:
        points: Path vertices in order.
        rounded: Round to the nearest whole foot (returns ``int``).
        radius_m: Sphere radius in metres.
    """
    feet = polyline_length_m(points, closed=False, radius_m=radius_m) * FEET_PER_METRE
    return round(feet) if rounded else feet


# ---------------------------------------------------------------------------
# Centroid
# ---------------------------------------------------------------------------


def polygon_center(points: Sequence[GeoPoint]) -> GeoPoint:
    """Return the flat arithmetic mean of the ring's points.

    Only suitable for placing a map label or marker.  It is neither
    area-weighted nor geodesic.  Empty input returns ``GeoPoint(0, 0)``.
    """
    if not points:
        return GeoPoint(0.0, 0.0)

    lat_sum = sum(p.lat for p in points)
    lng_sum = sum(p.lng for p in points)
    return GeoPoint(lat_sum / len(points), lng_sum / len(points))
