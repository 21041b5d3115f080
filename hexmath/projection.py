"""Flat-top projection between hex coordinates and Cartesian points.

``size`` is the distance from a hexagon's centre to any of its corners.
Forward and inverse matrices follow the usual flat-top orientation::

    x = size * (3/2 * q)
    y = size * (sqrt(3)/2 * q + sqrt(3) * r)

    q = (2/3 * x) / size
    r = (-1/3 * x + sqrt(3)/3 * y) / size
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .coords import AnyCube, AnyOffset, FloatCube, FloatOffset, Point, RoundingMode
from .errors import InvalidCellSizeError
from .rounding import round_axial

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .coords import Cube, Offset, PointLike

SQRT3 = math.sqrt(3.0)


def check_cell_size(size: float) -> float:
    """Return ``size`` as a float, rejecting zero, negative and non-finite values."""

    try:
        value = float(size)
    except (TypeError, ValueError):
        raise InvalidCellSizeError(size) from None
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidCellSizeError(size)
    return value


def _fractional_axial(point: PointLike, size: float) -> tuple[float, float]:
    size = check_cell_size(size)
    x, y = point
    q = (2.0 / 3.0 * x) / size
    r = (-1.0 / 3.0 * x + SQRT3 / 3.0 * y) / size
    return q, r


def cube_to_point(cube: AnyCube, size: float) -> Point:
    size = check_cell_size(size)
    q, r = cube.q, cube.r
    x = size * (3.0 / 2.0 * q)
    y = size * (SQRT3 / 2.0 * q + SQRT3 * r)
    return Point(x, y)


def point_to_float_cube(point: PointLike, size: float) -> FloatCube:
    q, r = _fractional_axial(point, size)
    return FloatCube.axial(q, r)


def point_to_cube(point: PointLike, size: float, mode: RoundingMode | str) -> Cube:
    """Return the integer cube under ``point`` using directional rounding."""

    q, r = _fractional_axial(point, size)
    return round_axial(q, r, mode)


def offset_to_point(offset: AnyOffset, size: float) -> Point:
    return cube_to_point(offset.to_cube(), size)


def point_to_float_offset(point: PointLike, size: float) -> FloatOffset:
    return point_to_float_cube(point, size).to_offset()


def point_to_offset(point: PointLike, size: float, mode: RoundingMode | str) -> Offset:
    return point_to_cube(point, size, mode).to_offset()


__all__ = [
    "SQRT3",
    "Point",
    "check_cell_size",
    "cube_to_point",
    "offset_to_point",
    "point_to_cube",
    "point_to_float_cube",
    "point_to_float_offset",
    "point_to_offset",
]
