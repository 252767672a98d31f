"""Shared measurement constants — single source of truth.

Centralises the earth model, unit conversion factors and coordinate
bounds used by the geometry, importer and service modules.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Earth model
# ---------------------------------------------------------------------------

EARTH_RADIUS_M: float = 6_371_000.0
"""Mean earth radius in metres (spherical model, not survey-grade)."""

# ---------------------------------------------------------------------------
# Unit conversions
# ---------------------------------------------------------------------------

SQ_METRES_PER_ACRE: float = 4046.86
FEET_PER_METRE: float = 3.28084

ACRES_DECIMALS: int = 2
"""Acres are reported to two decimal places."""

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

# WGS 84 coordinate bounds
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

MIN_RING_POINTS = 3
"""Distinct points needed before closure for a polygon ring."""

MIN_PATH_POINTS = 2
