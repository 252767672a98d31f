"""Boundary file import — KML and GeoJSON.

A file that does not contain a usable boundary (wrong type, no polygon,
degenerate ring, out-of-range coordinate) is the expected "user picked a
bad file" case: the parsers log a warning and return ``None``.  Errors
reading the file itself (``OSError``) propagate.

The parsing pipeline is split into focused stages:
- **_normalization**: coordinate text parsing, bounds check, ring closing
- **_kml**: first ``<coordinates>`` element via lxml
- **_geojson**: FeatureCollection / Feature / Polygon shapes via json
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from farm_boundary.importers._geojson import polygon_from_geojson
from farm_boundary.importers._kml import polygon_from_kml
from farm_boundary.importers._normalization import (
    BoundaryImportError,
    build_polygon,
    parse_coordinates_text,
)

if TYPE_CHECKING:
    from farm_boundary.models.point import GeoJSONPolygon

logger = logging.getLogger("farm_boundary.importers")

KML_SUFFIX = ".kml"

__all__ = [
    "build_polygon",
    "parse_boundary_file",
    "parse_coordinates_text",
    "parse_geojson",
    "parse_geojson_content",
    "parse_kml",
    "parse_kml_content",
]


def parse_kml_content(content: str | bytes, *, source: str = "KML") -> GeoJSONPolygon | None:
    """Parse KML text to a closed GeoJSON Polygon, or ``None``.

    Args:
        content: KML document text or bytes.
        source: Name used in log messages.
    """
    try:
        return polygon_from_kml(content, source)
    except BoundaryImportError as exc:
        logger.warning("Could not import boundary from KML: %s", exc)
        return None


def parse_geojson_content(
    content: str | bytes, *, source: str = "GeoJSON"
) -> GeoJSONPolygon | None:
    """Parse GeoJSON text to a closed GeoJSON Polygon, or ``None``.

    Args:
        content: GeoJSON document text or bytes.
        source: Name used in log messages.
    """
    try:
        return polygon_from_geojson(content, source)
    except BoundaryImportError as exc:
        logger.warning("Could not import boundary from GeoJSON: %s", exc)
        return None


def parse_kml(path: Path | str) -> GeoJSONPolygon | None:
    """Read a KML file and parse its boundary.

    Raises:
        OSError: If the file cannot be read.
    """
    path = Path(path)
    return parse_kml_content(path.read_bytes(), source=path.name)


def parse_geojson(path: Path | str) -> GeoJSONPolygon | None:
    """Read a GeoJSON file and parse its boundary.

    Raises:
        OSError: If the file cannot be read.
    """
    path = Path(path)
    return parse_geojson_content(path.read_bytes(), source=path.name)


def parse_boundary_file(path: Path | str) -> GeoJSONPolygon | None:
    """Parse a boundary file, choosing the format from its suffix.

    ``.kml`` files are parsed as KML; anything else (``.geojson``,
    ``.json``) as GeoJSON.

    Raises:
        OSError: If the file cannot be read.
    """
    path = Path(path)
    logger.info("Importing boundary file: %s", path.name)
    if path.suffix.lower() == KML_SUFFIX:
        return parse_kml(path)
    return parse_geojson(path)
