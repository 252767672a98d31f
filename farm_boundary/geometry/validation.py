"""Ring validity diagnostics using shapely.

A boundary is expected to be a simple polygon, but a hand-drawn or
imported ring can self-intersect.  These checks only describe the
problem; measurement still proceeds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from farm_boundary.core.constants import MIN_RING_POINTS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from farm_boundary.models.point import GeoPoint


def describe_ring_validity(points: Sequence[GeoPoint]) -> str:
    """Return ``""`` for a valid simple ring, else a reason string.

    Uses shapely's ``explain_validity`` in planar lon/lat space, which is
    adequate for farm-scale rings away from the antimeridian.
    """
    from shapely.geometry import Polygon
    from shapely.validation import explain_validity

    distinct = {(p.lng, p.lat) for p in points}
    if len(distinct) < MIN_RING_POINTS:
        return f"Ring has fewer than {MIN_RING_POINTS} distinct points"

    poly = Polygon([(p.lng, p.lat) for p in points])
    if poly.is_valid:
        return ""
    return str(explain_validity(poly))
