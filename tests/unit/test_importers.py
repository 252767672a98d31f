"""Tests for KML and GeoJSON boundary import.

Covers:
- Literal KML coordinates scenario (4 points + closing)
- Namespaced KML documents, first <coordinates> element wins
- FeatureCollection / Feature / bare Polygon shapes
- Soft failure (None + warning) for unusable files
- OSError propagation for unreadable files
- Suffix-based dispatch
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from farm_boundary.importers import (
    parse_boundary_file,
    parse_coordinates_text,
    parse_geojson,
    parse_geojson_content,
    parse_kml,
    parse_kml_content,
)

if TYPE_CHECKING:
    from pathlib import Path

VERMONT_RING = [[-72.0, 44.0], [-72.0, 44.001], [-71.999, 44.001], [-71.999, 44.0], [-72.0, 44.0]]


# ===========================================================================
# KML coordinate text
# ===========================================================================


class TestParseCoordinatesText:
    """Whitespace-separated ``lng,lat[,alt]`` tokens."""

    def test_altitude_dropped(self) -> None:
        assert parse_coordinates_text("-72.0,44.0,310 -72.0,44.001,312") == [
            [-72.0, 44.0],
            [-72.0, 44.001],
        ]

    def test_newlines_and_tabs(self) -> None:
        assert len(parse_coordinates_text("\n\t-72,44\n  -72,44.001\t-71.999,44.001\n")) == 3

    def test_invalid_tokens_discarded(self) -> None:
        text = "-72,44 bogus 12 abc,def nan,44 -72,inf -71.999,44.001"
        assert parse_coordinates_text(text) == [[-72.0, 44.0], [-71.999, 44.001]]

    def test_empty(self) -> None:
        assert parse_coordinates_text("   ") == []


# ===========================================================================
# KML
# ===========================================================================


class TestParseKmlContent:
    """KML text -> GeoJSON Polygon."""

    def test_literal_coordinates_scenario(self) -> None:
        kml = (
            "<coordinates>-72.0,44.0,0 -72.0,44.001,0 "
            "-71.999,44.001,0 -71.999,44.0,0</coordinates>"
        )
        polygon = parse_kml_content(kml)
        assert polygon is not None
        assert polygon["type"] == "Polygon"
        ring = polygon["coordinates"][0]
        assert len(ring) == 5
        assert ring[0] == [-72.0, 44.0]
        assert ring[-1] == [-72.0, 44.0]
        assert ring[2] == [-71.999, 44.001]

    def test_auto_close_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        kml = "<coordinates>-72,44 -72,44.001 -71.999,44.001</coordinates>"
        with caplog.at_level(logging.WARNING, logger="farm_boundary.importers"):
            polygon = parse_kml_content(kml)
        assert polygon is not None
        assert len(polygon["coordinates"][0]) == 4
        assert "Auto-closing" in caplog.text

    def test_bytes_input(self) -> None:
        kml = b"<kml><coordinates>-72,44 -72,44.001 -71.999,44.001</coordinates></kml>"
        assert parse_kml_content(kml) is not None

    def test_no_coordinates_element(self) -> None:
        assert parse_kml_content("<kml><Document><name>x</name></Document></kml>") is None

    def test_fewer_than_three_valid_points(self) -> None:
        kml = "<coordinates>-72,44 -72,44.001 junk 1x,2</coordinates>"
        assert parse_kml_content(kml) is None

    def test_not_xml(self) -> None:
        assert parse_kml_content("definitely not xml") is None

    def test_empty(self) -> None:
        assert parse_kml_content("") is None

    def test_entities_not_expanded(self) -> None:
        kml = (
            '<?xml version="1.0"?>'
            '<!DOCTYPE kml [<!ENTITY c "-72,44 -72,44.001 -71.999,44.001">]>'
            "<kml><coordinates>&c;</coordinates></kml>"
        )
        assert parse_kml_content(kml) is None

    def test_soft_failure_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="farm_boundary.importers"):
            assert parse_kml_content("<kml/>", source="farm.kml") is None
        assert "farm.kml" in caplog.text


class TestParseKmlFile:
    """KML files on disk."""

    def test_namespaced_document(self, homestead_kml: Path) -> None:
        polygon = parse_kml(homestead_kml)
        assert polygon == {"type": "Polygon", "coordinates": [VERMONT_RING]}

    def test_first_coordinates_element_wins(self, homestead_kml: Path) -> None:
        """The Point Placemark after the Polygon is ignored."""
        polygon = parse_kml(str(homestead_kml))
        assert polygon is not None
        assert [-71.9995, 44.0005] not in polygon["coordinates"][0]

    def test_malformed_not_xml(self, edge_cases_dir: Path) -> None:
        assert parse_kml(edge_cases_dir / "11_malformed_not_xml.kml") is None

    def test_no_coordinates(self, edge_cases_dir: Path) -> None:
        assert parse_kml(edge_cases_dir / "12_no_coordinates.kml") is None

    def test_two_valid_points(self, edge_cases_dir: Path) -> None:
        assert parse_kml(edge_cases_dir / "13_two_points.kml") is None

    def test_out_of_range_latitude(
        self, edge_cases_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="farm_boundary.importers"):
            assert parse_kml(edge_cases_dir / "15_invalid_coordinates.kml") is None
        assert "Latitude 95.0" in caplog.text

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            parse_kml(tmp_path / "missing.kml")


# ===========================================================================
# GeoJSON
# ===========================================================================


class TestParseGeoJSONContent:
    """GeoJSON text -> GeoJSON Polygon."""

    def test_feature_collection_skips_non_polygon(self) -> None:
        data = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "geometry": {"type": "LineString", "coordinates": [[0, 0]]}},
                {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": [VERMONT_RING]}},
            ],
        }
        polygon = parse_geojson_content(json.dumps(data))
        assert polygon == {"type": "Polygon", "coordinates": [VERMONT_RING]}

    def test_feature_collection_first_polygon_wins(self) -> None:
        other = [[0, 0], [0, 1], [1, 1], [0, 0]]
        data = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": [VERMONT_RING]}},
                {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": [other]}},
            ],
        }
        polygon = parse_geojson_content(json.dumps(data))
        assert polygon is not None
        assert polygon["coordinates"][0] == VERMONT_RING

    def test_feature_collection_without_polygon(self) -> None:
        data = {
            "type": "FeatureCollection",
            "features": [{"type": "Feature", "geometry": {"type": "Point", "coordinates": [0, 0]}}],
        }
        assert parse_geojson_content(json.dumps(data)) is None

    def test_empty_feature_collection(self) -> None:
        assert parse_geojson_content('{"type": "FeatureCollection", "features": []}') is None

    def test_single_feature(self) -> None:
        data = {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": [VERMONT_RING]}}
        assert parse_geojson_content(json.dumps(data)) is not None

    def test_feature_with_non_polygon_geometry(self) -> None:
        data = {"type": "Feature", "geometry": {"type": "Point", "coordinates": [0, 0]}}
        assert parse_geojson_content(json.dumps(data)) is None

    def test_bare_polygon(self) -> None:
        data = {"type": "Polygon", "coordinates": [VERMONT_RING]}
        assert parse_geojson_content(json.dumps(data)) == data

    @pytest.mark.parametrize(
        "content",
        [
            "not json",
            "[]",
            "42",
            '{"type": "MultiPolygon", "coordinates": []}',
            '{"type": "Polygon", "coordinates": []}',
            '{"type": "Polygon", "coordinates": [[[0, 0], [1, 1]]]}',
            '{"type": "Polygon", "coordinates": [[[0, 0], ["a", 1], [1, 1], [0, 0]]]}',
            '{"type": "Polygon", "coordinates": [[[0, 0], [200, 1], [1, 1], [0, 0]]]}',
            "[" * 100_000,
            '{"type": "Polygon", "coordinates": [[[0, 0], [1' + "0" * 400 + ', 1], [1, 1], [0, 0]]]}',
        ],
        ids=[
            "not-json",
            "array",
            "number",
            "multipolygon",
            "no-rings",
            "two-points",
            "string-ordinate",
            "out-of-range",
            "deeply-nested",
            "huge-integer-ordinate",
        ],
    )
    def test_unusable_content_returns_none(self, content: str) -> None:
        assert parse_geojson_content(content) is None


class TestParseGeoJSONFile:
    """GeoJSON files on disk."""

    def test_feature_collection_file(self, homestead_feature_collection: Path) -> None:
        polygon = parse_geojson(homestead_feature_collection)
        assert polygon == {"type": "Polygon", "coordinates": [VERMONT_RING]}

    def test_feature_unclosed_ring_with_hole(self, pasture_feature: Path) -> None:
        """The outer ring is closed and the hole is dropped."""
        polygon = parse_geojson(pasture_feature)
        assert polygon == {"type": "Polygon", "coordinates": [VERMONT_RING]}

    def test_bare_polygon_integer_coordinates(self, bare_polygon_json: Path) -> None:
        polygon = parse_geojson(bare_polygon_json)
        assert polygon is not None
        assert all(isinstance(v, float) for c in polygon["coordinates"][0] for v in c)

    def test_points_only(self, edge_cases_dir: Path) -> None:
        assert parse_geojson(edge_cases_dir / "14_points_only.geojson") is None

    def test_truncated_json(self, edge_cases_dir: Path) -> None:
        assert parse_geojson(edge_cases_dir / "16_not_json.geojson") is None

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            parse_geojson(tmp_path / "missing.geojson")


# ===========================================================================
# Dispatch
# ===========================================================================


class TestParseBoundaryFile:
    """Format chosen from the file suffix."""

    def test_kml_suffix(self, homestead_kml: Path) -> None:
        assert parse_boundary_file(homestead_kml) is not None

    def test_kml_suffix_case_insensitive(self, homestead_kml: Path, tmp_path: Path) -> None:
        upper = tmp_path / "BOUNDARY.KML"
        upper.write_bytes(homestead_kml.read_bytes())
        assert parse_boundary_file(upper) is not None

    @pytest.mark.parametrize("suffix", [".geojson", ".json", ".txt"])
    def test_other_suffixes_parse_as_geojson(
        self, homestead_feature_collection: Path, tmp_path: Path, suffix: str
    ) -> None:
        target = tmp_path / f"boundary{suffix}"
        target.write_bytes(homestead_feature_collection.read_bytes())
        assert parse_boundary_file(target) is not None

    def test_kml_content_with_geojson_suffix(self, homestead_kml: Path, tmp_path: Path) -> None:
        target = tmp_path / "boundary.geojson"
        target.write_bytes(homestead_kml.read_bytes())
        assert parse_boundary_file(target) is None
