"""Narrowing of continuous hex coordinates to integer cells.

q and r are rounded independently in the requested direction and s is
derived from them afterwards, so the result always satisfies the cube
invariant. This is a directional approximation, not nearest-cell rounding:
a point near a cell corner can land on a neighbour of the cell that
actually contains it.

A component that already equals an integer within :data:`EPSILON` is
snapped to that integer first. Without the snap, ``1e-12`` below an integer
would floor to the cell beneath it even though the same value compares equal
to the integer cell.
"""

from __future__ import annotations

import logging
import math

from .coords import Cube, FloatCube, FloatOffset, Offset, RoundingMode
from .errors import UnsupportedRoundingModeError
from .tolerance import approx_equal

logger = logging.getLogger(__name__)


def coerce_rounding_mode(mode: RoundingMode | str) -> RoundingMode:
    """Return ``mode`` as a :class:`RoundingMode`, accepting its string values."""

    if isinstance(mode, RoundingMode):
        return mode
    if isinstance(mode, str):
        try:
            coerced = RoundingMode(mode.lower())
        except ValueError:
            raise UnsupportedRoundingModeError(mode) from None
        logger.debug("coerced rounding mode %r to %s", mode, coerced)
        return coerced
    raise UnsupportedRoundingModeError(mode)


def _snap(value: float) -> float:
    nearest = round(value)
    if value != nearest and approx_equal(value, nearest):
        logger.debug("snapped %r to %d before rounding", value, nearest)
        return float(nearest)
    return value


def round_component(value: float, mode: RoundingMode | str) -> int:
    """Round one float component toward +inf (CEIL) or -inf (FLOOR)."""

    mode = coerce_rounding_mode(mode)
    value = _snap(value)
    if mode is RoundingMode.CEIL:
        return math.ceil(value)
    if mode is RoundingMode.FLOOR:
        return math.floor(value)
    raise UnsupportedRoundingModeError(mode)  # pragma: no cover - exhaustive enum


def round_axial(q: float, r: float, mode: RoundingMode | str) -> Cube:
    """Round a fractional axial pair to an integer :class:`Cube`."""

    mode = coerce_rounding_mode(mode)
    return Cube.axial(round_component(q, mode), round_component(r, mode))


def round_cube(cube: FloatCube, mode: RoundingMode | str) -> Cube:
    # s is rebuilt from the rounded q and r, never rounded on its own.
    return round_axial(cube.q, cube.r, mode)


def round_offset(offset: FloatOffset, mode: RoundingMode | str) -> Offset:
    """Narrow a float offset by way of its cube form."""

    return round_cube(offset.to_cube(), mode).to_offset()


__all__ = [
    "coerce_rounding_mode",
    "round_axial",
    "round_component",
    "round_cube",
    "round_offset",
]
