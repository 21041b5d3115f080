"""Flat-top hex grid coordinate math: cube, odd-q offset and Cartesian space."""

from .config import HexGridSettings
from .conversions import (
    cube_to_float,
    cube_to_offset,
    float_cube_to_offset,
    float_offset_to_cube,
    offset_to_cube,
    offset_to_float,
)
from .coords import Cube, FloatCube, FloatOffset, Offset, Point, RoundingMode, coords_equal
from .errors import (
    HexMathError,
    InvalidCellSizeError,
    InvariantViolationError,
    UnsupportedRoundingModeError,
)
from .projection import (
    cube_to_point,
    offset_to_point,
    point_to_cube,
    point_to_float_cube,
    point_to_float_offset,
    point_to_offset,
)
from .rounding import coerce_rounding_mode, round_axial, round_cube, round_offset
from .system import FloatHexCoordinateSystem, HexCoordinateSystem
from .tolerance import EPSILON, approx_equal

__version__ = "0.3.0"

__all__ = [
    "EPSILON",
    "Cube",
    "FloatCube",
    "FloatHexCoordinateSystem",
    "FloatOffset",
    "HexCoordinateSystem",
    "HexGridSettings",
    "HexMathError",
    "InvalidCellSizeError",
    "InvariantViolationError",
    "Offset",
    "Point",
    "RoundingMode",
    "UnsupportedRoundingModeError",
    "__version__",
    "approx_equal",
    "coerce_rounding_mode",
    "coords_equal",
    "cube_to_float",
    "cube_to_offset",
    "cube_to_point",
    "float_cube_to_offset",
    "float_offset_to_cube",
    "offset_to_cube",
    "offset_to_float",
    "offset_to_point",
    "point_to_cube",
    "point_to_float_cube",
    "point_to_float_offset",
    "point_to_offset",
    "round_axial",
    "round_cube",
    "round_offset",
]
