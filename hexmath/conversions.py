from __future__ import annotations

from .coords import Cube, FloatCube, FloatOffset, Offset


def _float_parity(value: float) -> float:
    # ``value % 2`` can come back as 2.0 for tiny negatives; the second pass
    # folds that back into [0, 2).
    return ((value % 2) + 2) % 2


def cube_to_offset(c: Cube) -> Offset:
    q, r = c.q, c.r
    col = q
    row = r + (q - (q & 1)) // 2
    return Offset(col, row)


def offset_to_cube(o: Offset) -> Cube:
    col, row = o.col, o.row
    q = col
    r = row - (col - (col & 1)) // 2
    return Cube(q, -q - r, r)


def float_cube_to_offset(c: FloatCube) -> FloatOffset:
    q, r = c.q, c.r
    col = q
    row = r + (q - _float_parity(q)) / 2
    return FloatOffset(col, row)


def float_offset_to_cube(o: FloatOffset) -> FloatCube:
    col, row = o.col, o.row
    q = col
    r = row - (col - _float_parity(col)) / 2
    return FloatCube(q, -q - r, r)


def cube_to_float(c: Cube) -> FloatCube:
    return FloatCube(float(c.q), float(c.s), float(c.r))


def offset_to_float(o: Offset) -> FloatOffset:
    return FloatOffset(float(o.col), float(o.row))


__all__ = [
    "cube_to_float",
    "cube_to_offset",
    "float_cube_to_offset",
    "float_offset_to_cube",
    "offset_to_cube",
    "offset_to_float",
]
