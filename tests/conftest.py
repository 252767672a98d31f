"""Shared pytest fixtures for the farm boundary test suite."""

from pathlib import Path

import pytest

from farm_boundary.models.point import GeoPoint

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample boundary file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def homestead_kml(data_dir: Path) -> Path:
    """Path to a namespaced KML with a polygon Placemark and a Point Placemark."""
    return data_dir / "01_vermont_homestead.kml"


@pytest.fixture()
def homestead_feature_collection(data_dir: Path) -> Path:
    """Path to a FeatureCollection with a Point feature before the Polygon."""
    return data_dir / "02_homestead_features.geojson"


@pytest.fixture()
def pasture_feature(data_dir: Path) -> Path:
    """Path to a single Feature whose Polygon has an unclosed ring and a hole."""
    return data_dir / "03_pasture_feature.geojson"


@pytest.fixture()
def bare_polygon_json(data_dir: Path) -> Path:
    """Path to a bare Polygon geometry with integer coordinates."""
    return data_dir / "04_bare_polygon.json"


# ---------------------------------------------------------------------------
# Reference rings
# ---------------------------------------------------------------------------


@pytest.fixture()
def equator_square() -> list[GeoPoint]:
    """0.001 degree square at the equator (~111 m per side, ~3.05 acres)."""
    return [
        GeoPoint(0.0, 0.0),
        GeoPoint(0.0, 0.001),
        GeoPoint(0.001, 0.001),
        GeoPoint(0.001, 0.0),
    ]


@pytest.fixture()
def vermont_ring() -> list[GeoPoint]:
    """Open ring matching the sample KML/GeoJSON boundary (~2.20 acres)."""
    return [
        GeoPoint(44.0, -72.0),
        GeoPoint(44.001, -72.0),
        GeoPoint(44.001, -71.999),
        GeoPoint(44.0, -71.999),
    ]
