"""Boundary measurement exception taxonomy.

Every domain exception inherits from ``BoundaryError`` and carries
structured context fields for diagnostics.

Taxonomy categories
-------------------
- ``ValidationError`` — caller handed in data that violates a
  function's precondition (programmer error, not user input).
- ``FormatError``     — a GeoJSON structure is malformed.

User-facing file imports do not raise these: a file that is not a valid
boundary is reported by returning ``None``.  Only unexpected errors
(e.g. ``OSError`` while reading) propagate from the importers.
"""

from __future__ import annotations


class BoundaryError(Exception):
    """Base exception for all boundary-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Processing stage where the error occurred
            (e.g. ``"geojson"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"GEOJSON_FORMAT_INVALID"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(self, message: str = "", *, stage: str = "", code: str = "") -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


class ValidationError(BoundaryError):
    """Input violates a function's precondition."""

    default_code = "VALIDATION_FAILED"


class FormatError(ValidationError):
    """Raised when a GeoJSON Polygon is structurally malformed."""

    default_stage = "geojson"
    default_code = "GEOJSON_FORMAT_INVALID"
