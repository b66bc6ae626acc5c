"""
Geometry factory carrying the precision model and SRID used by a writer.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from shapely.geometry import LinearRing, LineString, Point, Polygon

from .precision import PrecisionModel
from .segment import LineSegment

if TYPE_CHECKING:
    from ..config import Settings


@dataclass(frozen=True)
class GeometryFactory:
    """Builds shapely geometries and holds the active precision model.

    Coordinates are stored as given; rounding is applied by the consumer
    through ``precision_model``.
    """

    precision_model: PrecisionModel = field(default_factory=PrecisionModel)
    srid: int = 0

    @classmethod
    def from_settings(cls, settings: "Settings") -> "GeometryFactory":
        return cls(precision_model=settings.precision_model(), srid=settings.srid)

    def create_point(self, x: float, y: float, z: Optional[float] = None) -> Point:
        if z is None:
            return Point(x, y)
        return Point(x, y, z)

    def create_line_string(self, coordinates: Iterable[Sequence[float]]) -> LineString:
        return LineString(list(coordinates))

    def create_linear_ring(self, coordinates: Iterable[Sequence[float]]) -> LinearRing:
        return LinearRing(list(coordinates))

    def create_polygon(self, shell: Iterable[Sequence[float]],
                       holes: Iterable[Iterable[Sequence[float]]] = ()) -> Polygon:
        return Polygon(list(shell), [list(hole) for hole in holes])

    def create_line_segment(self, p0: Sequence[float], p1: Sequence[float]) -> LineSegment:
        return LineSegment(p0, p1)


# Full double precision, no rounding
DEFAULT_FACTORY = GeometryFactory()
