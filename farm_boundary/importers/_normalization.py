"""Coordinate parsing and ring normalisation shared by the importers.

Responsibilities:
- Parse KML coordinate text to ``[lng, lat]`` pairs
- Validate WGS 84 bounds and distinct-point count
- Close the outer ring and build the GeoJSON Polygon
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from farm_boundary.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_RING_POINTS,
)
from farm_boundary.core.exceptions import ValidationError

if TYPE_CHECKING:
    from farm_boundary.models.point import GeoJSONPolygon

logger = logging.getLogger("farm_boundary.importers")


class BoundaryImportError(ValidationError):
    """A file was read but does not contain a usable boundary.

    Raised inside the importers and turned into a ``None`` result at the
    public API; never escapes ``parse_*`` callers.
    """

    default_stage = "import"
    default_code = "BOUNDARY_IMPORT_REJECTED"


# ---------------------------------------------------------------------------
# KML coordinate text parsing
# ---------------------------------------------------------------------------


def parse_coordinates_text(text: str) -> list[list[float]]:
    """Parse KML coordinate text (``lng,lat[,alt] ...``) to ``[lng, lat]`` pairs.

    Tokens that do not start with two finite numbers are skipped.
    """
    coords: list[list[float]] = []
    for token in text.split():
        parts = token.split(",")
        if len(parts) < 2:
            continue
        try:
            lng = float(parts[0])
            lat = float(parts[1])
        except ValueError:
            continue
        if math.isfinite(lng) and math.isfinite(lat):
            coords.append([lng, lat])
    return coords


# ---------------------------------------------------------------------------
# Ring normalisation
# ---------------------------------------------------------------------------


def build_polygon(coords: list[list[float]], source: str) -> GeoJSONPolygon:
    """Validate an outer ring and return it as a closed GeoJSON Polygon.

    Raises:
        BoundaryImportError: If the ring has fewer than 3 distinct points
            or a coordinate lies outside WGS 84 bounds.
    """
    if len(coords) < MIN_RING_POINTS:
        msg = f"Boundary in {source} has only {len(coords)} valid point(s), need at least 3"
        raise BoundaryImportError(msg)

    for lng, lat in coords:
        if not (MIN_LONGITUDE <= lng <= MAX_LONGITUDE):
            msg = (
                f"Longitude {lng} out of WGS 84 range [{MIN_LONGITUDE}, {MAX_LONGITUDE}] "
                f"in {source}"
            )
            raise BoundaryImportError(msg)
        if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
            msg = (
                f"Latitude {lat} out of WGS 84 range [{MIN_LATITUDE}, {MAX_LATITUDE}] in {source}"
            )
            raise BoundaryImportError(msg)

    if len({(lng, lat) for lng, lat in coords}) < MIN_RING_POINTS:
        msg = f"Boundary in {source} has fewer than 3 distinct points"
        raise BoundaryImportError(msg)

    ring = [[lng, lat] for lng, lat in coords]
    if ring[0] != ring[-1]:
        logger.warning("Auto-closing unclosed ring in %s", source)
        ring.append(list(ring[0]))

    return {"type": "Polygon", "coordinates": [ring]}


def coords_from_geojson_ring(raw_ring: object, source: str) -> list[list[float]]:
    """Convert a GeoJSON ring array to ``[lng, lat]`` float pairs.

    Raises:
        BoundaryImportError: If the ring or any coordinate is malformed.
    """
    if not isinstance(raw_ring, list):
        msg = f"Polygon ring in {source} is not a list"
        raise BoundaryImportError(msg)

    coords: list[list[float]] = []
    for idx, c in enumerate(raw_ring):
        if not isinstance(c, list) or len(c) < 2 or not all(_is_number(v) for v in c[:2]):
            msg = f"Malformed coordinate at index {idx} in {source}: {c!r}"
            raise BoundaryImportError(msg)
        try:
            lng, lat = float(c[0]), float(c[1])
        except OverflowError as exc:
            msg = f"Coordinate at index {idx} in {source} is too large"
            raise BoundaryImportError(msg) from exc
        if not (math.isfinite(lng) and math.isfinite(lat)):
            msg = f"Non-finite coordinate at index {idx} in {source}: {c!r}"
            raise BoundaryImportError(msg)
        coords.append([lng, lat])
    return coords


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)
