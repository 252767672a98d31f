"""GeoJSON boundary import.

Accepted top-level shapes:
- ``FeatureCollection`` — the first feature whose geometry is a Polygon
- ``Feature`` with Polygon geometry
- a bare ``Polygon`` geometry
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from farm_boundary.importers._normalization import (
    BoundaryImportError,
    build_polygon,
    coords_from_geojson_ring,
)

if TYPE_CHECKING:
    from farm_boundary.models.point import GeoJSONPolygon

logger = logging.getLogger("farm_boundary.importers")


def polygon_from_geojson(content: str | bytes, source: str) -> GeoJSONPolygon:
    """Extract the boundary Polygon from GeoJSON text.

    Raises:
        BoundaryImportError: If the text is not JSON, contains no
            Polygon, or the Polygon's outer ring is unusable.
    """
    try:
        data = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        msg = f"{source} is not valid JSON: {exc}"
        raise BoundaryImportError(msg) from exc

    geometry = _find_polygon_geometry(data)
    if geometry is None:
        msg = f"No Polygon geometry found in {source}"
        raise BoundaryImportError(msg)

    rings = geometry.get("coordinates")
    if not isinstance(rings, list) or not rings:
        msg = f"Polygon in {source} has no coordinates"
        raise BoundaryImportError(msg)
    if len(rings) > 1:
        logger.debug("Dropping %d inner ring(s) from %s", len(rings) - 1, source)

    coords = coords_from_geojson_ring(rings[0], source)
    return build_polygon(coords, source)


def _find_polygon_geometry(data: object) -> dict | None:
    if not isinstance(data, dict):
        return None

    kind = data.get("type")
    if kind == "FeatureCollection":
        features = data.get("features")
        if not isinstance(features, list):
            return None
        for feature in features:
            geometry = feature.get("geometry") if isinstance(feature, dict) else None
            if _is_polygon(geometry):
                return geometry
        return None

    if kind == "Feature":
        geometry = data.get("geometry")
        return geometry if _is_polygon(geometry) else None

    if kind == "Polygon" and data.get("coordinates"):
        return data

    return None


def _is_polygon(geometry: object) -> bool:
    return isinstance(geometry, dict) and geometry.get("type") == "Polygon"
