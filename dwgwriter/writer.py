"""
Geometry to drawing entity writer.

Reads shapely geometries and builds their drawing entity representation using
the precision model of the configured geometry factory. Created entities are
not part of any drawing; it's up to the caller to commit them, e.g. through
``dwgwriter.drawing.DrawingBuilder``.
"""

import math
from typing import Any, List, Optional, Union

import structlog
from shapely.geometry import LinearRing, LineString, Point, Polygon

from .errors import EmptyGeometryError, GeometryTypeMismatch, UnsupportedConversion
from .geometry.coordinates import as_coordinate, equals_2d, geometry_type_name
from .geometry.factory import DEFAULT_FACTORY, GeometryFactory
from .geometry.precision import PrecisionModel
from .geometry.segment import LineSegment
from .models.entities import (
    DBPoint,
    Entity,
    Line,
    LwPolyline,
    Point2d,
    Point3d,
    Polyline2d,
    Polyline3d,
)
from .target_types import TargetType

logger = structlog.get_logger()

CoordinateLike = Union[Point, tuple, list]


class DwgWriter:
    """Converts geometries into transient drawing entities."""

    def __init__(self, factory: Optional[GeometryFactory] = None):
        self._factory = factory if factory is not None else DEFAULT_FACTORY

    @classmethod
    def from_settings(cls, settings) -> "DwgWriter":
        return cls(GeometryFactory.from_settings(settings))

    @property
    def factory(self) -> GeometryFactory:
        """Geometry factory supplied at construction, or the default one."""
        return self._factory

    @property
    def precision_model(self) -> PrecisionModel:
        """Precision model of the current factory.

        The default factory uses a floating model, meaning full double
        precision.
        """
        return self._factory.precision_model

    # ----- Points -----

    def to_point3d(self, geometry: CoordinateLike) -> Point3d:
        """Convert a coordinate or Point; a missing Z collapses to 0."""
        x, y, z = as_coordinate(geometry)
        pm = self.precision_model
        if not math.isnan(z):
            return Point3d(x=pm.make_precise(x), y=pm.make_precise(y), z=pm.make_precise(z))
        return Point3d(x=pm.make_precise(x), y=pm.make_precise(y), z=0.0)

    def to_point2d(self, geometry: CoordinateLike) -> Point2d:
        """Convert a coordinate or Point; Z is dropped."""
        x, y, _ = as_coordinate(geometry)
        pm = self.precision_model
        return Point2d(x=pm.make_precise(x), y=pm.make_precise(y))

    def to_point_entity(self, point: Point) -> DBPoint:
        """Returns a POINT entity located at the point geometry."""
        _require(point, Point, "Point")
        return DBPoint(position=self.to_point3d(point))

    # ----- Lightweight polylines -----

    def to_lightweight_polyline(self, geometry: LineString) -> LwPolyline:
        """Returns an LWPOLYLINE converted from a LineString or LinearRing.

        A LinearRing always yields a closed polyline and its vertices go
        through the precision model. A LineString is closed only if its first
        and last coordinates are equal, and its vertices are written from the
        raw X and Y ordinates without applying the precision model.
        """
        _require(geometry, LineString, "LineString")
        coords = _coordinates(geometry)

        polyline = LwPolyline()
        if isinstance(geometry, LinearRing):
            for i, coordinate in enumerate(coords):
                polyline.add_vertex_at(i, self.to_point2d(coordinate))
            polyline.is_closed = True
        else:
            for i, coordinate in enumerate(coords):
                polyline.add_vertex_at(i, Point2d(x=coordinate[0], y=coordinate[1]))
            polyline.is_closed = equals_2d(coords[0], coords[-1])
        return polyline

    def to_lightweight_polyline_set(self, polygon: Polygon) -> List[LwPolyline]:
        """Returns ``1..n`` LWPOLYLINEs for a polygon: the shell, then each hole."""
        _require(polygon, Polygon, "Polygon")
        if polygon.is_empty:
            raise EmptyGeometryError("Polygon")

        polylines = [self.to_lightweight_polyline(polygon.exterior)]
        for hole in polygon.interiors:
            polylines.append(self.to_lightweight_polyline(hole))
        return polylines

    # ----- Heavy polylines -----

    def to_heavy_polyline3d(self, geometry: LineString) -> Polyline3d:
        """Returns a simple 3D POLYLINE converted from a LineString or LinearRing."""
        _require(geometry, LineString, "LineString")
        coords = _coordinates(geometry)
        return Polyline3d(
            vertices=[self.to_point3d(coordinate) for coordinate in coords],
            is_closed=_is_closed(geometry, coords),
        )

    def to_legacy_polyline2d(self, geometry: LineString) -> Polyline2d:
        """Returns an old style 2D POLYLINE converted from a LineString or LinearRing."""
        _require(geometry, LineString, "LineString")
        coords = _coordinates(geometry)
        return Polyline2d(
            vertices=[self.to_point3d(coordinate) for coordinate in coords],
            is_closed=_is_closed(geometry, coords),
        )

    # ----- Lines -----

    def to_line_entity(self, segment: Union[LineSegment, LineString]) -> Line:
        """Returns a LINE between the two segment end points.

        A LineString with exactly two coordinates is read as a segment.
        """
        if isinstance(segment, LineString):
            segment = LineSegment.from_line_string(segment)
        _require(segment, LineSegment, "LineSegment")
        return Line(start=self.to_point3d(segment.p0), end=self.to_point3d(segment.p1))

    # ----- Dispatch -----

    def convert(self, target: TargetType, geometry: Any) -> Entity:
        """Convert a geometry into the entity category ``target``."""
        target = TargetType(target)
        logger.debug(
            "Converting geometry",
            target=target.value,
            geometry_type=geometry_type_name(geometry)
        )

        if target is TargetType.LINE_LIKE:
            return self.to_lightweight_polyline(geometry)
        return self.to_point_entity(geometry)

    def convert_by_type_name(self, type_name: str, geometry: Any) -> Entity:
        """Convert a geometry for a drawing entity class or DXF type name.

        Raises ``UnsupportedConversion`` if the name has no conversion rule.
        """
        try:
            target = TargetType.from_type_name(type_name, geometry)
        except UnsupportedConversion as e:
            logger.warning("Unsupported conversion", type_name=type_name, error=str(e))
            raise
        return self.convert(target, geometry)


def _require(geometry: Any, geometry_class: type, expected: str) -> None:
    if not isinstance(geometry, geometry_class):
        raise GeometryTypeMismatch(expected, geometry_type_name(geometry))


def _coordinates(geometry: LineString) -> list:
    coords = list(geometry.coords)
    if not coords:
        raise EmptyGeometryError(geometry_type_name(geometry))
    return coords


def _is_closed(geometry: LineString, coords: list) -> bool:
    if isinstance(geometry, LinearRing):
        return True
    return equals_2d(coords[0], coords[-1])
