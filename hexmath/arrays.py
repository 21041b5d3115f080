"""Vectorised conversions over ``(N, 2)`` numpy arrays.

Each function mirrors a scalar operation from :mod:`hexmath.projection`,
:mod:`hexmath.rounding` or :mod:`hexmath.conversions` and returns the same
values element-wise. Coordinates travel as axial ``(q, r)`` pairs; ``s`` is
always ``-q - r`` and is never stored.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .coords import RoundingMode
from .projection import SQRT3, check_cell_size
from .rounding import coerce_rounding_mode
from .tolerance import EPSILON


def _as_pairs(values: ArrayLike, dtype: type) -> NDArray:
    array = np.asarray(values)
    if np.issubdtype(dtype, np.integer) and not np.issubdtype(array.dtype, np.integer):
        # Casting would truncate 1.7 to 1 without complaint.
        raise TypeError(f"expected integer coordinates, got dtype {array.dtype}")
    array = array.astype(dtype, copy=False)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) array, got shape {array.shape}")
    return array


def axial_to_points(axial: ArrayLike, size: float) -> NDArray[np.float64]:
    """Project axial ``(q, r)`` rows to Cartesian ``(x, y)`` rows."""

    size = check_cell_size(size)
    qr = _as_pairs(axial, np.float64)
    q, r = qr[:, 0], qr[:, 1]
    x = size * (3.0 / 2.0 * q)
    y = size * (SQRT3 / 2.0 * q + SQRT3 * r)
    return np.column_stack((x, y))


def points_to_float_axial(points: ArrayLike, size: float) -> NDArray[np.float64]:
    """Invert :func:`axial_to_points` without rounding."""

    size = check_cell_size(size)
    xy = _as_pairs(points, np.float64)
    x, y = xy[:, 0], xy[:, 1]
    q = (2.0 / 3.0 * x) / size
    r = (-1.0 / 3.0 * x + SQRT3 / 3.0 * y) / size
    return np.column_stack((q, r))


def points_to_axial(
    points: ArrayLike, size: float, mode: RoundingMode | str
) -> NDArray[np.int64]:
    """Narrow Cartesian rows to integer axial cells with directional rounding."""

    mode = coerce_rounding_mode(mode)
    fractional = points_to_float_axial(points, size)
    nearest = np.rint(fractional)
    snapped = np.where(np.abs(fractional - nearest) <= EPSILON, nearest, fractional)
    if mode is RoundingMode.CEIL:
        rounded = np.ceil(snapped)
    else:
        rounded = np.floor(snapped)
    return rounded.astype(np.int64)


def axial_to_offset(axial: ArrayLike) -> NDArray[np.int64]:
    """Map integer axial rows to odd-q ``(col, row)`` rows."""

    qr = _as_pairs(axial, np.int64)
    q, r = qr[:, 0], qr[:, 1]
    return np.column_stack((q, r + (q - (q & 1)) // 2))


def offset_to_axial(offsets: ArrayLike) -> NDArray[np.int64]:
    """Map odd-q ``(col, row)`` rows back to axial ``(q, r)`` rows."""

    cr = _as_pairs(offsets, np.int64)
    col, row = cr[:, 0], cr[:, 1]
    return np.column_stack((col, row - (col - (col & 1)) // 2))


__all__ = [
    "axial_to_offset",
    "axial_to_points",
    "offset_to_axial",
    "points_to_axial",
    "points_to_float_axial",
]
