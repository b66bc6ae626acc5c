"""
Line segment value type.

shapely has no segment geometry, so a segment is modelled as an immutable
pair of coordinates that can be read from or turned into a two point
LineString.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from shapely.geometry import LineString

from ..errors import GeometryTypeMismatch
from .coordinates import Coordinate, as_coordinate, geometry_type_name, has_z


@dataclass(frozen=True)
class LineSegment:
    """Straight segment between ``p0`` and ``p1``."""

    p0: Coordinate
    p1: Coordinate

    geom_type = "LineSegment"

    def __post_init__(self):
        object.__setattr__(self, "p0", as_coordinate(self.p0))
        object.__setattr__(self, "p1", as_coordinate(self.p1))

    @classmethod
    def from_line_string(cls, line_string: LineString) -> "LineSegment":
        """Read a segment from a LineString with exactly two coordinates."""
        if not isinstance(line_string, LineString):
            raise GeometryTypeMismatch("LineString", geometry_type_name(line_string))
        coords = list(line_string.coords)
        if len(coords) != 2:
            raise ValueError(f"A segment needs exactly 2 coordinates, got {len(coords)}")
        return cls(coords[0], coords[1])

    @property
    def coords(self) -> Tuple[Coordinate, Coordinate]:
        return self.p0, self.p1

    @property
    def length(self) -> float:
        """Planar length of the segment."""
        return math.hypot(self.p1[0] - self.p0[0], self.p1[1] - self.p0[1])

    def to_line_string(self) -> LineString:
        if has_z(self.p0) and has_z(self.p1):
            return LineString([self.p0, self.p1])
        return LineString([self.p0[:2], self.p1[:2]])
