"""Boundary geometry: distance, area, length, centroid and GeoJSON conversion."""

from farm_boundary.geometry.distance import haversine_distance_m
from farm_boundary.geometry.geojson import geojson_to_points, polygon_to_geojson
from farm_boundary.geometry.measure import (
    calculate_acres,
    calculate_area_m2,
    calculate_path_length_feet,
    calculate_perimeter_feet,
    polygon_center,
    polyline_length_m,
)
from farm_boundary.geometry.validation import describe_ring_validity

__all__ = [
    "calculate_acres",
    "calculate_area_m2",
    "calculate_path_length_feet",
    "calculate_perimeter_feet",
    "describe_ring_validity",
    "geojson_to_points",
    "haversine_distance_m",
    "polygon_center",
    "polygon_to_geojson",
    "polyline_length_m",
]
