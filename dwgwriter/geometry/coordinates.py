"""
Helpers for reading coordinates out of shapely geometries and plain tuples.
"""

import math
from typing import Any, Sequence, Tuple

from shapely.geometry import Point

from ..errors import EmptyGeometryError

Coordinate = Tuple[float, float, float]

NAN = float("nan")


def as_coordinate(value: Any) -> Coordinate:
    """Return ``(x, y, z)`` for a shapely Point or a 2/3 element sequence.

    A missing Z ordinate is reported as NaN.
    """
    if isinstance(value, Point):
        if value.is_empty:
            raise EmptyGeometryError("Point")
        value = value.coords[0]

    if len(value) < 2:
        raise ValueError(f"Coordinate needs at least two ordinates, got {len(value)}")

    x = float(value[0])
    y = float(value[1])
    z = float(value[2]) if len(value) > 2 else NAN
    return x, y, z


def has_z(coordinate: Sequence[float]) -> bool:
    """True if the coordinate carries a defined Z ordinate."""
    return len(coordinate) > 2 and not math.isnan(coordinate[2])


def equals_2d(first: Sequence[float], second: Sequence[float]) -> bool:
    """Exact comparison of X and Y; Z is ignored."""
    return first[0] == second[0] and first[1] == second[1]


def geometry_type_name(geometry: Any) -> str:
    """Declared type name of a geometry, falling back to the Python class."""
    return getattr(geometry, "geom_type", None) or type(geometry).__name__
