"""
Geometry-side building blocks: precision policy, factory and segment type.
"""

from .coordinates import as_coordinate, equals_2d, geometry_type_name, has_z
from .factory import DEFAULT_FACTORY, GeometryFactory
from .precision import PrecisionModel, PrecisionType
from .segment import LineSegment

__all__ = [
    'DEFAULT_FACTORY',
    'GeometryFactory',
    'LineSegment',
    'PrecisionModel',
    'PrecisionType',
    'as_coordinate',
    'equals_2d',
    'geometry_type_name',
    'has_z',
]
