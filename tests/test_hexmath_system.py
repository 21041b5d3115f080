import math

import pytest
from pydantic import ValidationError

from hexmath import (
    Cube,
    FloatCube,
    FloatHexCoordinateSystem,
    FloatOffset,
    HexCoordinateSystem,
    HexGridSettings,
    InvalidCellSizeError,
    Offset,
    RoundingMode,
)


def test_integer_system_forwards_with_bound_size():
    system = HexCoordinateSystem(10.0)
    c = Cube.axial(2, -1)
    assert system.cube_to_point(c) == c.to_cartesian(10.0)
    assert system.point_to_cube(system.cube_to_point(c)) == c
    o = Offset(3, 4)
    assert system.offset_to_point(o) == o.to_cartesian(10.0)
    assert system.point_to_offset(system.offset_to_point(o)) == o


def test_integer_system_default_and_explicit_mode():
    point = (7.0, 3.0)
    floor_system = HexCoordinateSystem(4.0)
    ceil_system = HexCoordinateSystem(4.0, rounding_mode="ceil")
    assert floor_system.rounding_mode is RoundingMode.FLOOR
    assert ceil_system.rounding_mode is RoundingMode.CEIL
    assert floor_system.point_to_cube(point) == Cube.from_cartesian(point, 4.0, "floor")
    assert floor_system.point_to_cube(point, RoundingMode.CEIL) == ceil_system.point_to_cube(point)
    assert floor_system.point_to_offset(point, "ceil") == ceil_system.point_to_offset(point)


def test_float_system_forwards_with_bound_size():
    system = FloatHexCoordinateSystem(3.0)
    c = FloatCube.axial(0.25, -1.75)
    assert system.point_to_cube(system.cube_to_point(c)) == c
    o = FloatOffset(1.5, 2.5)
    assert system.point_to_offset(system.offset_to_point(o)) == o


@pytest.mark.parametrize("size", [0.0, -2.0, math.inf])
def test_systems_reject_bad_size(size: float):
    with pytest.raises(InvalidCellSizeError):
        HexCoordinateSystem(size)
    with pytest.raises(InvalidCellSizeError):
        FloatHexCoordinateSystem(size)


def test_settings_build_systems():
    settings = HexGridSettings(cell_size=12.5, rounding_mode="ceil")
    integer = settings.integer_system()
    assert integer.size == 12.5
    assert integer.rounding_mode is RoundingMode.CEIL
    assert HexCoordinateSystem.from_settings(settings).rounding_mode is RoundingMode.CEIL
    assert settings.float_system().size == 12.5
    assert FloatHexCoordinateSystem.from_settings(settings).size == 12.5


def test_settings_defaults():
    settings = HexGridSettings()
    assert settings.cell_size == 1.0
    assert settings.rounding_mode is RoundingMode.FLOOR


@pytest.mark.parametrize(
    "payload",
    [
        {"cell_size": 0.0},
        {"cell_size": -1.0},
        {"cell_size": float("nan")},
        {"rounding_mode": "nearest"},
        {"orientation": "pointy"},
    ],
)
def test_settings_validation(payload: dict):
    with pytest.raises(ValidationError):
        HexGridSettings(**payload)


def test_settings_are_frozen():
    settings = HexGridSettings()
    with pytest.raises(ValidationError):
        settings.cell_size = 2.0  # type: ignore[misc]


def test_repr_mentions_configuration():
    assert repr(HexCoordinateSystem(2.0, rounding_mode="ceil")) == (
        "HexCoordinateSystem(size=2.0, rounding_mode='ceil')"
    )
    assert repr(FloatHexCoordinateSystem(2.0)) == "FloatHexCoordinateSystem(size=2.0)"
