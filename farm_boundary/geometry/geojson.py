"""Conversion between point rings and GeoJSON Polygon geometry.

GeoJSON stores ``[lng, lat]`` pairs and requires the ring to be closed
(first coordinate repeated at the end).  Point rings are kept open.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from farm_boundary.core.constants import MIN_RING_POINTS
from farm_boundary.core.exceptions import FormatError
from farm_boundary.models.point import GeoJSONPolygon, GeoPoint

if TYPE_CHECKING:
    from collections.abc import Sequence


def polygon_to_geojson(points: Sequence[GeoPoint]) -> GeoJSONPolygon:
    """Convert a ring to a closed, single-ring GeoJSON Polygon."""
    coordinates = [p.to_coordinate() for p in points]
    if coordinates and coordinates[0] != coordinates[-1]:
        coordinates.append(list(coordinates[0]))
    return {"type": "Polygon", "coordinates": [coordinates]}


def geojson_to_points(geojson: object) -> list[GeoPoint]:
    """Convert a GeoJSON Polygon's outer ring to an open list of points.

    The closing coordinate is dropped.  Holes are ignored.

    Raises:
        FormatError: If ``geojson`` is not a Polygon mapping, has no
            coordinates, contains a malformed coordinate, or yields fewer
            than 3 points.
    """
    if not isinstance(geojson, dict):
        msg = f"GeoJSON Polygon must be a mapping, got {type(geojson).__name__}"
        raise FormatError(msg)

    geom_type = geojson.get("type")
    if geom_type != "Polygon":
        msg = f"Expected GeoJSON type 'Polygon', got {geom_type!r}"
        raise FormatError(msg)

    rings = geojson.get("coordinates")
    if not isinstance(rings, list | tuple) or not rings:
        msg = "GeoJSON Polygon has no coordinates"
        raise FormatError(msg)

    outer = rings[0]
    if not isinstance(outer, list | tuple) or not outer:
        msg = "GeoJSON Polygon outer ring is empty"
        raise FormatError(msg)

    points = [_coordinate_to_point(c, idx) for idx, c in enumerate(outer)]
    if len(points) > 1 and points[0] == points[-1]:
        points = points[:-1]

    if len(points) < MIN_RING_POINTS:
        msg = (
            f"GeoJSON Polygon outer ring has {len(points)} point(s) after removing "
            f"the closing coordinate, need at least {MIN_RING_POINTS}"
        )
        raise FormatError(msg)
    return points


def _coordinate_to_point(coord: object, idx: int) -> GeoPoint:
    """Convert one ``[lng, lat(, alt)]`` element.  Raises ``FormatError``."""
    if not isinstance(coord, list | tuple) or len(coord) < 2:
        msg = f"Malformed coordinate at index {idx}: expected [lng, lat], got {coord!r}"
        raise FormatError(msg)
    lng, lat = coord[0], coord[1]
    if not _is_finite_number(lng) or not _is_finite_number(lat):
        msg = f"Malformed coordinate at index {idx}: non-numeric value (lng={lng!r}, lat={lat!r})"
        raise FormatError(msg)
    return GeoPoint.from_coordinate(coord)


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False
