"""Boundary, path and zone measurement.

Turns a GeoJSON boundary, a freshly drawn ring, an imported file, a
drawn path or a drawn zone into the measured records the project layer
stores.

- Area in acres (2 dp), perimeter in whole feet, path length in raw feet
- Flat-average centroid for label placement
- Area reasonableness check against ``BoundaryConfig.area_warning_acres``
- Ring validity diagnostics (self-intersection) via shapely
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from farm_boundary.core.config import BoundaryConfig
from farm_boundary.core.constants import MIN_PATH_POINTS, MIN_RING_POINTS
from farm_boundary.core.exceptions import ValidationError
from farm_boundary.geometry.geojson import geojson_to_points, polygon_to_geojson
from farm_boundary.geometry.measure import (
    calculate_acres,
    calculate_path_length_feet,
    calculate_perimeter_feet,
    polygon_center,
)
from farm_boundary.geometry.validation import describe_ring_validity
from farm_boundary.importers import parse_boundary_file
from farm_boundary.models.boundary import Boundary, MapPath, MapZone, ZoneType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from farm_boundary.models.point import GeoJSONPolygon, GeoPoint

logger = logging.getLogger("farm_boundary.services.measure_boundary")

_DEFAULT_CONFIG = BoundaryConfig()


# ---------------------------------------------------------------------------
# Boundaries
# ---------------------------------------------------------------------------


def measure_boundary(geojson: GeoJSONPolygon, *, config: BoundaryConfig | None = None) -> Boundary:
    """Measure a GeoJSON boundary polygon.

    Args:
        geojson: Closed single-ring GeoJSON Polygon.
        config: Measurement configuration (defaults to ``BoundaryConfig()``).

    Returns:
        A ``Boundary`` with acres, perimeter, centroid and any warnings.

    Raises:
        FormatError: If ``geojson`` is not a well-formed Polygon.
    """
    config = config or _DEFAULT_CONFIG
    points = geojson_to_points(geojson)

    acres = calculate_acres(points, radius_m=config.earth_radius_m)
    perimeter_feet = calculate_perimeter_feet(points, radius_m=config.earth_radius_m)
    centroid = polygon_center(points)

    area_warning = ""
    if acres > config.area_warning_acres:
        area_warning = (
            f"Area {acres:.2f} acres exceeds threshold of {config.area_warning_acres:.0f} acres"
        )
        logger.warning(area_warning)

    geometry_warning = describe_ring_validity(points)
    if geometry_warning:
        logger.warning("Boundary ring is not a simple polygon: %s", geometry_warning)

    logger.info(
        "Boundary measured | vertices=%d | area=%.2f acres | perimeter=%d ft | "
        "centroid=(%.5f, %.5f)",
        len(points),
        acres,
        perimeter_feet,
        centroid.lat,
        centroid.lng,
    )

    return Boundary(
        geojson=polygon_to_geojson(points),
        acres=acres,
        perimeter_feet=perimeter_feet,
        centroid=centroid,
        area_warning=area_warning,
        geometry_warning=geometry_warning,
    )


def measure_drawn_boundary(
    points: Sequence[GeoPoint], *, config: BoundaryConfig | None = None
) -> Boundary:
    """Measure a ring drawn on the map.

    Raises:
        ValidationError: If fewer than 3 points were drawn.
    """
    _require_points(points, MIN_RING_POINTS, "boundary")
    return measure_boundary(polygon_to_geojson(points), config=config)


def import_boundary(path: Path | str, *, config: BoundaryConfig | None = None) -> Boundary | None:
    """Import and measure a KML or GeoJSON boundary file.

    Returns ``None`` if the file is too large or holds no usable
    boundary.

    Raises:
        OSError: If the file cannot be read.
    """
    config = config or _DEFAULT_CONFIG
    path = Path(path)

    size = path.stat().st_size
    if size > config.max_import_bytes:
        logger.warning(
            "Boundary file %s is %d bytes, limit is %d bytes",
            path.name,
            size,
            config.max_import_bytes,
        )
        return None

    geojson = parse_boundary_file(path)
    if geojson is None:
        return None
    return measure_boundary(geojson, config=config)


# ---------------------------------------------------------------------------
# Paths and zones
# ---------------------------------------------------------------------------


def measure_path(
    points: Sequence[GeoPoint], *, name: str = "", config: BoundaryConfig | None = None
) -> MapPath:
    """Measure an open path (fence line, trail).

    Raises:
        ValidationError: If fewer than 2 points were drawn.
    """
    config = config or _DEFAULT_CONFIG
    _require_points(points, MIN_PATH_POINTS, "path")

    length_feet = calculate_path_length_feet(points, radius_m=config.earth_radius_m)
    logger.info(
        "Path measured | name=%s | vertices=%d | length=%.1f ft", name, len(points), length_feet
    )
    return MapPath(points=list(points), length_feet=length_feet, name=name)


def measure_zone(
    points: Sequence[GeoPoint],
    *,
    zone_type: ZoneType = ZoneType.CUSTOM,
    name: str = "",
    config: BoundaryConfig | None = None,
) -> MapZone:
    """Measure a land-use zone drawn inside the boundary.

    Raises:
        ValidationError: If fewer than 3 points were drawn.
    """
    config = config or _DEFAULT_CONFIG
    _require_points(points, MIN_RING_POINTS, "zone")

    acres = calculate_acres(points, radius_m=config.earth_radius_m)
    logger.info(
        "Zone measured | name=%s | type=%s | area=%.2f acres", name, zone_type.value, acres
    )
    return MapZone(
        geojson=polygon_to_geojson(points), acres=acres, zone_type=zone_type, name=name
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require_points(points: Sequence[GeoPoint], minimum: int, kind: str) -> None:
    if len(points) < minimum:
        msg = f"A {kind} needs at least {minimum} points, got {len(points)}"
        raise ValidationError(msg, stage="measure")
