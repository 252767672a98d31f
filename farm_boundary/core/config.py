"""Measurement configuration loaded from environment variables.

The configuration is an explicit value passed to the service functions;
nothing in the package reads ambient global state.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric
    value is out of its valid range.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from farm_boundary.core.constants import EARTH_RADIUS_M
from farm_boundary.core.exceptions import BoundaryError

DEFAULT_MAX_IMPORT_BYTES = 10 * 1024 * 1024
DEFAULT_AREA_WARNING_ACRES = 5_000.0


class ConfigValidationError(BoundaryError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class BoundaryConfig:
    """Immutable measurement configuration.

    Attributes:
        earth_radius_m: Sphere radius used for distance and area, in metres.
        max_import_bytes: Largest boundary file accepted by ``import_boundary``.
        area_warning_acres: Area above which a boundary is flagged as
            implausibly large for a hobby farm.
    """

    earth_radius_m: float = EARTH_RADIUS_M
    max_import_bytes: int = DEFAULT_MAX_IMPORT_BYTES
    area_warning_acres: float = DEFAULT_AREA_WARNING_ACRES

    @classmethod
    def from_env(cls) -> BoundaryConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a numeric value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``BOUNDARY_MAX_IMPORT_BYTES=abc``).
        """
        config = cls(
            earth_radius_m=float(os.getenv("BOUNDARY_EARTH_RADIUS_M", str(EARTH_RADIUS_M))),
            max_import_bytes=int(
                os.getenv("BOUNDARY_MAX_IMPORT_BYTES", str(DEFAULT_MAX_IMPORT_BYTES))
            ),
            area_warning_acres=float(
                os.getenv("BOUNDARY_AREA_WARNING_ACRES", str(DEFAULT_AREA_WARNING_ACRES))
            ),
        )
        _validate(config)
        return config


def _validate(config: BoundaryConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.earth_radius_m <= 0:
        raise ConfigValidationError(
            "BOUNDARY_EARTH_RADIUS_M",
            config.earth_radius_m,
            "must be > 0 (metres)",
        )

    if config.max_import_bytes <= 0:
        raise ConfigValidationError(
            "BOUNDARY_MAX_IMPORT_BYTES",
            config.max_import_bytes,
            "must be > 0 (bytes)",
        )

    if config.area_warning_acres <= 0:
        raise ConfigValidationError(
            "BOUNDARY_AREA_WARNING_ACRES",
            config.area_warning_acres,
            "must be > 0 (acres)",
        )
