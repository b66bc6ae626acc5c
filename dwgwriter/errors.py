"""
Error types raised while converting geometries into drawing entities.
"""

from typing import Optional


class ConversionError(ValueError):
    """Base class for all geometry-to-entity conversion failures."""


class UnsupportedConversion(ConversionError):
    """Raised when a target entity type has no conversion rule."""

    def __init__(self, type_name: str, geometry_type: str):
        self.type_name = type_name
        self.geometry_type = geometry_type
        super().__init__(
            f"Geometry conversion from {type_name} to {geometry_type} is not supported."
        )


class GeometryTypeMismatch(ConversionError, TypeError):
    """Raised when a conversion receives a geometry of the wrong shape."""

    def __init__(self, expected: str, geometry_type: str):
        self.expected = expected
        self.geometry_type = geometry_type
        super().__init__(f"Expected {expected} geometry, got {geometry_type}")


class EmptyGeometryError(ConversionError):
    """Raised when an empty geometry is passed to a conversion."""

    def __init__(self, geometry_type: str, detail: Optional[str] = None):
        self.geometry_type = geometry_type
        message = f"Cannot convert empty {geometry_type}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
