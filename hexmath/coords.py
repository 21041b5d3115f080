"""Flat-top hex coordinate value types.

Two families live side by side: :class:`Cube` and :class:`Offset` carry
integer components, :class:`FloatCube` and :class:`FloatOffset` carry
floats. Offsets use the odd-q layout (odd columns are shifted down).

Every conversion between families or kinds is an explicit method call.
Nothing converts implicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

from .errors import InvariantViolationError
from .tolerance import EPSILON, components_equal


class RoundingMode(str, Enum):
    """Directional policy used when narrowing float coordinates to integers."""

    CEIL = "ceil"
    FLOOR = "floor"


class Point(NamedTuple):
    """Cartesian point in world or pixel space."""

    x: float
    y: float


if TYPE_CHECKING:  # pragma: no cover - typing only
    from collections.abc import Sequence

    PointLike = Point | Sequence[float]


@dataclass(frozen=True, slots=True, eq=False)
class Cube:
    """Integer cube coordinate with ``q + s + r == 0``.

    Prefer :meth:`axial`; the three-argument constructor trusts the caller
    and only verifies the invariant while ``__debug__`` is set.
    """

    q: int
    s: int
    r: int

    def __post_init__(self) -> None:
        if __debug__ and self.q + self.s + self.r != 0:
            raise InvariantViolationError(
                f"cube components must sum to 0, got q={self.q} s={self.s} r={self.r}"
            )

    @classmethod
    def axial(cls, q: int, r: int) -> Cube:
        return cls(q, -q - r, r)

    @classmethod
    def from_offset(cls, offset: Offset) -> Cube:
        return offset.to_cube()

    @classmethod
    def from_float(cls, cube: FloatCube, mode: RoundingMode | str) -> Cube:
        from .rounding import round_cube

        return round_cube(cube, mode)

    @classmethod
    def from_cartesian(cls, point: PointLike, size: float, mode: RoundingMode | str) -> Cube:
        from .projection import point_to_cube

        return point_to_cube(point, size, mode)

    # The ``with_*`` builders replace one component and leave the other two
    # alone, so the caller must pass a value that keeps the sum at zero.
    def with_q(self, q: int) -> Cube:
        return replace(self, q=q)

    def with_s(self, s: int) -> Cube:
        return replace(self, s=s)

    def with_r(self, r: int) -> Cube:
        return replace(self, r=r)

    def copy(self) -> Cube:
        return replace(self)

    def to_offset(self) -> Offset:
        from .conversions import cube_to_offset

        return cube_to_offset(self)

    def to_cartesian(self, size: float) -> Point:
        from .projection import cube_to_point

        return cube_to_point(self, size)

    def to_float(self) -> FloatCube:
        from .conversions import cube_to_float

        return cube_to_float(self)

    def __iter__(self):
        return iter((self.q, self.s, self.r))

    def __eq__(self, other: object) -> bool:
        if not _same_kind(self, other):
            return NotImplemented
        return coords_equal(self, other)

    def __hash__(self) -> int:
        return hash((self.q, self.s, self.r))


@dataclass(frozen=True, slots=True, eq=False)
class FloatCube:
    """Continuous cube coordinate; ``q + s + r`` stays within :data:`EPSILON` of 0."""

    q: float
    s: float
    r: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "q", float(self.q))
        object.__setattr__(self, "s", float(self.s))
        object.__setattr__(self, "r", float(self.r))
        if __debug__ and abs(self.q + self.s + self.r) > EPSILON:
            raise InvariantViolationError(
                f"cube components must sum to 0 within {EPSILON}, "
                f"got q={self.q} s={self.s} r={self.r}"
            )

    @classmethod
    def axial(cls, q: float, r: float) -> FloatCube:
        return cls(q, -q - r, r)

    @classmethod
    def from_offset(cls, offset: FloatOffset) -> FloatCube:
        return offset.to_cube()

    @classmethod
    def from_int(cls, cube: Cube) -> FloatCube:
        return cube.to_float()

    @classmethod
    def from_cartesian(cls, point: PointLike, size: float) -> FloatCube:
        from .projection import point_to_float_cube

        return point_to_float_cube(point, size)

    def with_q(self, q: float) -> FloatCube:
        return replace(self, q=q)

    def with_s(self, s: float) -> FloatCube:
        return replace(self, s=s)

    def with_r(self, r: float) -> FloatCube:
        return replace(self, r=r)

    def copy(self) -> FloatCube:
        return replace(self)

    def to_offset(self) -> FloatOffset:
        from .conversions import float_cube_to_offset

        return float_cube_to_offset(self)

    def to_cartesian(self, size: float) -> Point:
        from .projection import cube_to_point

        return cube_to_point(self, size)

    def to_int(self, mode: RoundingMode | str) -> Cube:
        from .rounding import round_cube

        return round_cube(self, mode)

    def __iter__(self):
        return iter((self.q, self.s, self.r))

    def __eq__(self, other: object) -> bool:
        if not _same_kind(self, other):
            return NotImplemented
        return coords_equal(self, other)

    # Exact float twins of an integer cube share its hash; values that are
    # only equal within EPSILON may not.
    def __hash__(self) -> int:
        return hash((self.q, self.s, self.r))


@dataclass(frozen=True, slots=True, eq=False)
class Offset:
    """Integer odd-q offset coordinate."""

    col: int
    row: int

    @classmethod
    def from_cube(cls, cube: Cube) -> Offset:
        return cube.to_offset()

    @classmethod
    def from_float(cls, offset: FloatOffset, mode: RoundingMode | str) -> Offset:
        from .rounding import round_offset

        return round_offset(offset, mode)

    @classmethod
    def from_cartesian(cls, point: PointLike, size: float, mode: RoundingMode | str) -> Offset:
        from .projection import point_to_offset

        return point_to_offset(point, size, mode)

    def with_col(self, col: int) -> Offset:
        return replace(self, col=col)

    def with_row(self, row: int) -> Offset:
        return replace(self, row=row)

    def copy(self) -> Offset:
        return replace(self)

    def to_cube(self) -> Cube:
        from .conversions import offset_to_cube

        return offset_to_cube(self)

    def to_cartesian(self, size: float) -> Point:
        from .projection import offset_to_point

        return offset_to_point(self, size)

    def to_float(self) -> FloatOffset:
        from .conversions import offset_to_float

        return offset_to_float(self)

    def __iter__(self):
        return iter((self.col, self.row))

    def __eq__(self, other: object) -> bool:
        if not _same_kind(self, other):
            return NotImplemented
        return coords_equal(self, other)

    def __hash__(self) -> int:
        return hash((self.col, self.row))


@dataclass(frozen=True, slots=True, eq=False)
class FloatOffset:
    """Continuous odd-q offset coordinate."""

    col: float
    row: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "col", float(self.col))
        object.__setattr__(self, "row", float(self.row))

    @classmethod
    def from_cube(cls, cube: FloatCube) -> FloatOffset:
        return cube.to_offset()

    @classmethod
    def from_int(cls, offset: Offset) -> FloatOffset:
        return offset.to_float()

    @classmethod
    def from_cartesian(cls, point: PointLike, size: float) -> FloatOffset:
        from .projection import point_to_float_offset

        return point_to_float_offset(point, size)

    def with_col(self, col: float) -> FloatOffset:
        return replace(self, col=col)

    def with_row(self, row: float) -> FloatOffset:
        return replace(self, row=row)

    def copy(self) -> FloatOffset:
        return replace(self)

    def to_cube(self) -> FloatCube:
        from .conversions import float_offset_to_cube

        return float_offset_to_cube(self)

    def to_cartesian(self, size: float) -> Point:
        from .projection import offset_to_point

        return offset_to_point(self, size)

    def to_int(self, mode: RoundingMode | str) -> Offset:
        from .rounding import round_offset

        return round_offset(self, mode)

    def __iter__(self):
        return iter((self.col, self.row))

    def __eq__(self, other: object) -> bool:
        if not _same_kind(self, other):
            return NotImplemented
        return coords_equal(self, other)

    def __hash__(self) -> int:
        return hash((self.col, self.row))


AnyCube = Cube | FloatCube
AnyOffset = Offset | FloatOffset

_CUBE_TYPES = (Cube, FloatCube)
_OFFSET_TYPES = (Offset, FloatOffset)
_INT_TYPES = (Cube, Offset)


def _same_kind(left: object, right: object) -> bool:
    return (isinstance(left, _CUBE_TYPES) and isinstance(right, _CUBE_TYPES)) or (
        isinstance(left, _OFFSET_TYPES) and isinstance(right, _OFFSET_TYPES)
    )


def coords_equal(left: object, right: object) -> bool:
    """Compare two coordinates of the same kind, from either family.

    Integer pairs compare exactly. Any pairing that involves a float
    coordinate compares component-wise within :data:`EPSILON`. A cube never
    equals an offset, and neither equals a value of any other type. Every
    ``__eq__`` in this module delegates here once the kinds match.
    """

    if not _same_kind(left, right):
        return False
    exact = isinstance(left, _INT_TYPES) and isinstance(right, _INT_TYPES)
    return components_equal(tuple(left), tuple(right), exact=exact)


__all__ = [
    "AnyCube",
    "AnyOffset",
    "Cube",
    "FloatCube",
    "FloatOffset",
    "Offset",
    "Point",
    "RoundingMode",
    "coords_equal",
]
