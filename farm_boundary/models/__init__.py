"""Data models and schemas.

- GeoPoint: a WGS 84 latitude/longitude pair
- GeoJSONPolygon: the single-ring GeoJSON interchange structure
- Boundary, MapPath, MapZone: measured records handed to the project layer
"""

from farm_boundary.models.boundary import Boundary, MapPath, MapZone, ZoneType
from farm_boundary.models.point import GeoJSONPolygon, GeoPoint

__all__ = [
    "Boundary",
    "GeoJSONPolygon",
    "GeoPoint",
    "MapPath",
    "MapZone",
    "ZoneType",
]
