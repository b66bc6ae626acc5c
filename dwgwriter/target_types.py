"""
Closed vocabulary of target entity categories used by the writer dispatch.
"""

from enum import Enum
from typing import Any, Dict

from .errors import UnsupportedConversion
from .geometry.coordinates import geometry_type_name


class TargetType(str, Enum):
    """Entity categories a geometry can be converted into."""
    LINE_LIKE = "line_like"
    POINT_LIKE = "point_like"

    @classmethod
    def from_type_name(cls, type_name: str, geometry: Any = None) -> "TargetType":
        """Resolve a CAD class or DXF type name; unknown names are unsupported."""
        try:
            return TYPE_NAMES[type_name]
        except (KeyError, TypeError):
            raise UnsupportedConversion(type_name, geometry_type_name(geometry)) from None


# Runtime class names of the drawing database and their DXF entity names.
# Matching is exact.
TYPE_NAMES: Dict[str, TargetType] = {
    'AcDbLine': TargetType.LINE_LIKE,
    'AcDbPolyline': TargetType.LINE_LIKE,
    'AcDb2dPolyline': TargetType.LINE_LIKE,
    'AcDb3dPolyline': TargetType.LINE_LIKE,
    'AcDbMline': TargetType.LINE_LIKE,
    'LINE': TargetType.LINE_LIKE,
    'LWPOLYLINE': TargetType.LINE_LIKE,
    'POLYLINE': TargetType.LINE_LIKE,
    'MLINE': TargetType.LINE_LIKE,
    'AcDbBlockReference': TargetType.POINT_LIKE,
    'AcDbPoint': TargetType.POINT_LIKE,
    'INSERT': TargetType.POINT_LIKE,
    'POINT': TargetType.POINT_LIKE,
    'BLOCK': TargetType.POINT_LIKE,
}
