from .entities import (
    POLYLINE_TYPES,
    DBPoint,
    Entity,
    Line,
    LwPolyline,
    LwPolylineVertex,
    Point2d,
    Point3d,
    Polyline2d,
    Polyline3d,
)

__all__ = [
    'POLYLINE_TYPES',
    'DBPoint',
    'Entity',
    'Line',
    'LwPolyline',
    'LwPolylineVertex',
    'Point2d',
    'Point3d',
    'Polyline2d',
    'Polyline3d',
]
