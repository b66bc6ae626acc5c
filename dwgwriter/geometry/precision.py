"""
Coordinate precision policies.

A precision model decides how raw floating point ordinates are snapped before
they are written into a drawing entity. Three kinds are supported:

- ``FLOATING``: full double precision, values pass through unchanged.
- ``FLOATING_SINGLE``: values are rounded to the nearest 32-bit float.
- ``FIXED``: values are snapped to a regular grid of ``1 / scale`` units.
"""

import math
from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np


class PrecisionType(str, Enum):
    """Kinds of precision model."""
    FLOATING = "floating"
    FLOATING_SINGLE = "floating_single"
    FIXED = "fixed"


class PrecisionModel:
    """Immutable rounding policy applied independently to each ordinate."""

    # Significant digits of the floating kinds
    FLOATING_DIGITS = 16
    FLOATING_SINGLE_DIGITS = 6

    __slots__ = ("_precision_type", "_scale", "_grid_size")

    def __init__(self, precision_type: PrecisionType = PrecisionType.FLOATING,
                 scale: Optional[float] = None, *, grid_size: Optional[float] = None):
        precision_type = PrecisionType(precision_type)

        if precision_type is PrecisionType.FIXED:
            if scale is None:
                raise ValueError("Fixed precision model requires a scale")
            scale = abs(float(scale))
            if scale == 0 or math.isnan(scale) or math.isinf(scale):
                raise ValueError(f"Invalid precision scale: {scale}")
            # An explicit grid is kept as given, not recomputed from 1/scale
            grid_size = float(grid_size) if grid_size is not None else 1.0 / scale
        else:
            scale = None
            grid_size = 0.0

        self._precision_type = precision_type
        self._scale = scale
        self._grid_size = grid_size

    @classmethod
    def floating(cls) -> "PrecisionModel":
        return cls(PrecisionType.FLOATING)

    @classmethod
    def floating_single(cls) -> "PrecisionModel":
        return cls(PrecisionType.FLOATING_SINGLE)

    @classmethod
    def fixed(cls, scale: float) -> "PrecisionModel":
        return cls(PrecisionType.FIXED, scale)

    @classmethod
    def from_decimals(cls, decimals: int) -> "PrecisionModel":
        """Fixed model keeping ``decimals`` digits after the decimal point."""
        return cls.fixed(10.0 ** decimals)

    @classmethod
    def from_grid_size(cls, grid_size: float) -> "PrecisionModel":
        """Fixed model snapping to multiples of ``grid_size``."""
        if grid_size <= 0:
            raise ValueError(f"Grid size must be positive, got {grid_size}")
        return cls(PrecisionType.FIXED, 1.0 / grid_size, grid_size=grid_size)

    @property
    def precision_type(self) -> PrecisionType:
        return self._precision_type

    @property
    def scale(self) -> Optional[float]:
        return self._scale

    @property
    def grid_size(self) -> float:
        """Grid spacing of a fixed model; 0 for the floating kinds."""
        return self._grid_size

    @property
    def is_floating(self) -> bool:
        return self._precision_type is not PrecisionType.FIXED

    @property
    def maximum_significant_digits(self) -> int:
        if self._precision_type is PrecisionType.FLOATING:
            return self.FLOATING_DIGITS
        if self._precision_type is PrecisionType.FLOATING_SINGLE:
            return self.FLOATING_SINGLE_DIGITS
        return 1 + int(math.ceil(math.log10(self._scale)))

    def make_precise(self, value: float) -> float:
        """Round a single ordinate according to this model."""
        value = float(value)
        if math.isnan(value) or math.isinf(value):
            return value

        if self._precision_type is PrecisionType.FLOATING:
            return value
        if self._precision_type is PrecisionType.FLOATING_SINGLE:
            return float(np.float32(value))

        # Round half up, matching the usual geometry library behaviour
        if self._grid_size > 1:
            return math.floor(value / self._grid_size + 0.5) * self._grid_size
        scaled = value * self._scale
        # Already coarser than the grid
        if math.isinf(scaled):
            return value
        return math.floor(scaled + 0.5) / self._scale

    def make_precise_coordinate(self, coordinate: Sequence[float]) -> Tuple[float, ...]:
        """Round every ordinate of a coordinate tuple."""
        return tuple(self.make_precise(value) for value in coordinate)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PrecisionModel):
            return NotImplemented
        return (self._precision_type is other._precision_type
                and self._scale == other._scale)

    def __hash__(self) -> int:
        return hash((self._precision_type, self._scale))

    def __repr__(self) -> str:
        if self._precision_type is PrecisionType.FIXED:
            return f"PrecisionModel(fixed, scale={self._scale})"
        return f"PrecisionModel({self._precision_type.value})"
