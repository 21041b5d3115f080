"""Coordinate systems that bind a fixed cell size and forward to the projection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .coords import RoundingMode
from .projection import (
    check_cell_size,
    cube_to_point,
    offset_to_point,
    point_to_cube,
    point_to_float_cube,
    point_to_float_offset,
    point_to_offset,
)
from .rounding import coerce_rounding_mode

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import HexGridSettings
    from .coords import Cube, FloatCube, FloatOffset, Offset, Point, PointLike

logger = logging.getLogger(__name__)


class HexCoordinateSystem:
    """Integer hex grid with a fixed cell size.

    ``point_to_cube`` and ``point_to_offset`` narrow with the system's
    ``rounding_mode`` unless a mode is passed explicitly.
    """

    def __init__(
        self, size: float, *, rounding_mode: RoundingMode | str = RoundingMode.FLOOR
    ) -> None:
        self._size = check_cell_size(size)
        self._rounding_mode = coerce_rounding_mode(rounding_mode)
        logger.debug(
            "integer hex system: size=%s rounding=%s", self._size, self._rounding_mode.value
        )

    @classmethod
    def from_settings(cls, settings: HexGridSettings) -> HexCoordinateSystem:
        return cls(settings.cell_size, rounding_mode=settings.rounding_mode)

    @property
    def size(self) -> float:
        return self._size

    @property
    def rounding_mode(self) -> RoundingMode:
        return self._rounding_mode

    def cube_to_point(self, cube: Cube) -> Point:
        return cube_to_point(cube, self._size)

    def point_to_cube(self, point: PointLike, mode: RoundingMode | str | None = None) -> Cube:
        return point_to_cube(point, self._size, self._rounding_mode if mode is None else mode)

    def offset_to_point(self, offset: Offset) -> Point:
        return offset_to_point(offset, self._size)

    def point_to_offset(self, point: PointLike, mode: RoundingMode | str | None = None) -> Offset:
        return point_to_offset(point, self._size, self._rounding_mode if mode is None else mode)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self._size!r}, "
            f"rounding_mode={self._rounding_mode.value!r})"
        )


class FloatHexCoordinateSystem:
    """Continuous hex grid with a fixed cell size; no rounding involved."""

    def __init__(self, size: float) -> None:
        self._size = check_cell_size(size)
        logger.debug("float hex system: size=%s", self._size)

    @classmethod
    def from_settings(cls, settings: HexGridSettings) -> FloatHexCoordinateSystem:
        return cls(settings.cell_size)

    @property
    def size(self) -> float:
        return self._size

    def cube_to_point(self, cube: FloatCube) -> Point:
        return cube_to_point(cube, self._size)

    def point_to_cube(self, point: PointLike) -> FloatCube:
        return point_to_float_cube(point, self._size)

    def offset_to_point(self, offset: FloatOffset) -> Point:
        return offset_to_point(offset, self._size)

    def point_to_offset(self, point: PointLike) -> FloatOffset:
        return point_to_float_offset(point, self._size)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size!r})"


__all__ = ["FloatHexCoordinateSystem", "HexCoordinateSystem"]
