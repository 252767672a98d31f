"""Measured map records handed to the project layer.

A ``Boundary`` is the farm's outer polygon with its precomputed area and
perimeter.  ``MapPath`` (fence lines, trails) and ``MapZone`` (pasture,
orchard, ...) are the other measured annotations on a project map.

Serialised key names match the persisted project record
(``perimeterFeet``, ``lengthFeet``, ``zoneType``).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from farm_boundary.models.point import GeoJSONPolygon, GeoPoint


class ZoneType(enum.StrEnum):
    """Land-use category of a map zone."""

    PASTURE = "pasture"
    GARDEN = "garden"
    ORCHARD = "orchard"
    WOODS = "woods"
    WETLAND = "wetland"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class Boundary:
    """A farm boundary polygon with its measurements.

    Attributes:
        geojson: Closed single-ring GeoJSON Polygon.
        acres: Spherical area in acres, rounded to 2 decimal places.
        perimeter_feet: Perimeter in feet, rounded to the nearest foot.
        centroid: Flat-average label position (not a geodesic centre).
        area_warning: Non-empty if the area exceeds the reasonableness threshold.
        geometry_warning: Non-empty if the ring is not a simple polygon.
    """

    geojson: GeoJSONPolygon
    acres: float = 0.0
    perimeter_feet: int = 0
    centroid: GeoPoint = field(default_factory=lambda: GeoPoint(0.0, 0.0))
    area_warning: str = ""
    geometry_warning: str = ""

    def to_dict(self) -> dict[str, object]:
        """Serialise to the persisted boundary record."""
        return {
            "geojson": {
                "type": "Polygon",
                "coordinates": [[list(c) for c in ring] for ring in self.geojson["coordinates"]],
            },
            "acres": self.acres,
            "perimeterFeet": self.perimeter_feet,
            "centroid": self.centroid.to_dict(),
            "areaWarning": self.area_warning,
            "geometryWarning": self.geometry_warning,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Boundary:
        """Deserialise a persisted boundary record.

        Raises:
            TypeError: If field values have unexpected types.
        """
        geojson_raw = data.get("geojson")
        if not isinstance(geojson_raw, dict):
            msg = f"geojson must be a dict, got {type(geojson_raw).__name__}"
            raise TypeError(msg)

        centroid_raw = data.get("centroid", {"lat": 0.0, "lng": 0.0})
        if not isinstance(centroid_raw, dict):
            msg = f"centroid must be a dict, got {type(centroid_raw).__name__}"
            raise TypeError(msg)

        return cls(
            geojson=geojson_raw,  # type: ignore[arg-type]
            acres=float(data.get("acres", 0.0)),  # type: ignore[arg-type]
            perimeter_feet=int(data.get("perimeterFeet", 0)),  # type: ignore[arg-type]
            centroid=GeoPoint.from_dict(centroid_raw),
            area_warning=str(data.get("areaWarning", "")),
            geometry_warning=str(data.get("geometryWarning", "")),
        )


@dataclass(frozen=True, slots=True)
class MapPath:
    """An open line drawn on the map (fence, trail, water line).

    Attributes:
        points: Path vertices in drawing order.
        length_feet: Unrounded path length in feet.
        name: Optional display name.
    """

    points: list[GeoPoint] = field(default_factory=list)
    length_feet: float = 0.0
    name: str = ""

    def to_dict(self) -> dict[str, object]:
        """Serialise with ``[lat, lng]`` coordinates, as stored for map paths."""
        return {
            "name": self.name,
            "coordinates": [[p.lat, p.lng] for p in self.points],
            "lengthFeet": self.length_feet,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> MapPath:
        coords_raw = data.get("coordinates", [])
        if not isinstance(coords_raw, list):
            msg = f"coordinates must be a list, got {type(coords_raw).__name__}"
            raise TypeError(msg)
        points: list[GeoPoint] = []
        for idx, c in enumerate(coords_raw):
            if not isinstance(c, list | tuple) or len(c) < 2 or not all(
                isinstance(v, int | float) and not isinstance(v, bool) for v in c[:2]
            ):
                msg = f"coordinates[{idx}] must be a [lat, lng] pair, got {c!r}"
                raise TypeError(msg)
            points.append(GeoPoint(lat=float(c[0]), lng=float(c[1])))
        return cls(
            points=points,
            length_feet=float(data.get("lengthFeet", 0.0)),  # type: ignore[arg-type]
            name=str(data.get("name", "")),
        )


@dataclass(frozen=True, slots=True)
class MapZone:
    """A land-use zone drawn inside the boundary.

    Attributes:
        geojson: Closed single-ring GeoJSON Polygon.
        acres: Zone area in acres, rounded to 2 decimal places.
        zone_type: Land-use category.
        name: Optional display name.
    """

    geojson: GeoJSONPolygon
    acres: float = 0.0
    zone_type: ZoneType = ZoneType.CUSTOM
    name: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "geojson": {
                "type": "Polygon",
                "coordinates": [[list(c) for c in ring] for ring in self.geojson["coordinates"]],
            },
            "acres": self.acres,
            "zoneType": self.zone_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> MapZone:
        """Deserialise a persisted zone record.

        Raises:
            TypeError: If ``geojson`` is not a dict.
            ValueError: If ``zoneType`` is not a known zone type.
        """
        geojson_raw = data.get("geojson")
        if not isinstance(geojson_raw, dict):
            msg = f"geojson must be a dict, got {type(geojson_raw).__name__}"
            raise TypeError(msg)
        return cls(
            geojson=geojson_raw,  # type: ignore[arg-type]
            acres=float(data.get("acres", 0.0)),  # type: ignore[arg-type]
            zone_type=ZoneType(str(data.get("zoneType", ZoneType.CUSTOM.value))),
            name=str(data.get("name", "")),
        )
