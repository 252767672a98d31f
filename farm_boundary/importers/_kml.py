"""KML boundary import.

Only the first ``<coordinates>`` element in the document is used, in
any namespace.  Placemark names and ExtendedData are not read.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from farm_boundary.importers._normalization import (
    BoundaryImportError,
    build_polygon,
    parse_coordinates_text,
)

if TYPE_CHECKING:
    from farm_boundary.models.point import GeoJSONPolygon


def polygon_from_kml(content: str | bytes, source: str) -> GeoJSONPolygon:
    """Extract the first coordinate ring of a KML document.

    Raises:
        BoundaryImportError: If the content is not XML, has no
            ``<coordinates>`` element, or the ring is unusable.
    """
    from lxml import etree  # type: ignore[attr-defined]

    if isinstance(content, str):
        content = content.encode("utf-8")
    if not content.strip():
        msg = f"{source} is empty"
        raise BoundaryImportError(msg)

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"{source} is not valid XML: {exc}"
        raise BoundaryImportError(msg) from exc

    coords_elem = next(root.iter("{*}coordinates"), None)
    if coords_elem is None:
        msg = f"No <coordinates> element in {source}"
        raise BoundaryImportError(msg)

    coords = parse_coordinates_text(coords_elem.text or "")
    return build_polygon(coords, source)
