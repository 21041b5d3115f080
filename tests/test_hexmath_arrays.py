import numpy as np
import pytest
from numpy.random import default_rng

from hexmath import Cube, FloatCube, InvalidCellSizeError, RoundingMode, UnsupportedRoundingModeError
from hexmath.arrays import (
    axial_to_offset,
    axial_to_points,
    offset_to_axial,
    points_to_axial,
    points_to_float_axial,
)


def _sample_axial(seed: int, count: int = 100) -> np.ndarray:
    return default_rng(seed).integers(-400, 400, size=(count, 2))


def test_axial_to_points_matches_scalar():
    axial = _sample_axial(41)
    points = axial_to_points(axial, 8.0)
    assert points.shape == (len(axial), 2)
    for (q, r), (x, y) in zip(axial.tolist(), points.tolist()):
        expected = Cube.axial(q, r).to_cartesian(8.0)
        assert (x, y) == expected


def test_points_to_float_axial_matches_scalar():
    points = default_rng(42).uniform(-500.0, 500.0, size=(100, 2))
    axial = points_to_float_axial(points, 6.0)
    for (x, y), (q, r) in zip(points.tolist(), axial.tolist()):
        expected = FloatCube.from_cartesian((x, y), 6.0)
        assert (q, r) == (expected.q, expected.r)


@pytest.mark.parametrize("mode", [RoundingMode.CEIL, RoundingMode.FLOOR])
def test_points_to_axial_matches_scalar(mode: RoundingMode):
    points = default_rng(43).uniform(-500.0, 500.0, size=(200, 2))
    cells = points_to_axial(points, 6.0, mode)
    assert cells.dtype == np.int64
    for (x, y), (q, r) in zip(points.tolist(), cells.tolist()):
        expected = Cube.from_cartesian((x, y), 6.0, mode)
        assert (q, r) == (expected.q, expected.r)


def test_points_to_axial_recovers_cell_centres():
    axial = _sample_axial(44)
    points = axial_to_points(axial, 2.5)
    np.testing.assert_array_equal(points_to_axial(points, 2.5, "floor"), axial)
    np.testing.assert_array_equal(points_to_axial(points, 2.5, "ceil"), axial)


def test_offset_mapping_matches_scalar_and_roundtrips():
    axial = _sample_axial(45)
    offsets = axial_to_offset(axial)
    for (q, r), (col, row) in zip(axial.tolist(), offsets.tolist()):
        o = Cube.axial(q, r).to_offset()
        assert (col, row) == (o.col, o.row)
    np.testing.assert_array_equal(offset_to_axial(offsets), axial)


def test_empty_input_keeps_shape():
    empty = np.empty((0, 2))
    assert axial_to_points(empty, 1.0).shape == (0, 2)
    assert points_to_axial(empty, 1.0, "ceil").shape == (0, 2)


@pytest.mark.parametrize("bad", [[1.0, 2.0], [[1.0, 2.0, 3.0]], np.zeros((2, 2, 2))])
def test_rejects_wrong_shape(bad):
    with pytest.raises(ValueError, match=r"\(N, 2\)"):
        axial_to_points(bad, 1.0)


def test_rejects_bad_mode_and_size():
    with pytest.raises(UnsupportedRoundingModeError):
        points_to_axial([[0.0, 0.0]], 1.0, "nearest")
    with pytest.raises(InvalidCellSizeError):
        points_to_float_axial([[0.0, 0.0]], 0.0)


@pytest.mark.parametrize("values", [[[1.7, 0.0]], [[2.0, 3.0]], np.array([[0.5, -1.5]])])
def test_offset_mapping_rejects_float_input(values):
    with pytest.raises(TypeError, match="integer coordinates"):
        axial_to_offset(values)
    with pytest.raises(TypeError, match="integer coordinates"):
        offset_to_axial(values)


def test_offset_mapping_accepts_integer_arrays_of_any_width():
    axial = np.array([[3, -5], [-1, 0]], dtype=np.int32)
    np.testing.assert_array_equal(axial_to_offset(axial), [[3, -4], [-1, -1]])
