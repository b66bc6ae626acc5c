"""
Writes shapely geometries as drawing entities in the DWG export JSON layout.
Created entities are transient; commit them with ``DrawingBuilder``.
"""

from .drawing import DrawingBuilder
from .errors import (
    ConversionError,
    EmptyGeometryError,
    GeometryTypeMismatch,
    UnsupportedConversion,
)
from .geometry import DEFAULT_FACTORY, GeometryFactory, LineSegment, PrecisionModel, PrecisionType
from .target_types import TargetType
from .writer import DwgWriter

__all__ = [
    'DEFAULT_FACTORY',
    'ConversionError',
    'DrawingBuilder',
    'DwgWriter',
    'EmptyGeometryError',
    'GeometryFactory',
    'GeometryTypeMismatch',
    'LineSegment',
    'PrecisionModel',
    'PrecisionType',
    'TargetType',
    'UnsupportedConversion',
]
