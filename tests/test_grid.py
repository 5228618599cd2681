import numpy as np
import pytest

from crucible_lab.core.errors import InvalidInput, MalformedGridError
from crucible_lab.core.grid import CostGrid


def test_from_text_reads_digits_by_col_row():
    g = CostGrid.from_text("123\n456\n")
    assert g.shape == (3, 2)
    assert g.width == 3 and g.height == 2
    assert g.cost((0, 0)) == 1
    assert g.cost((2, 0)) == 3
    assert g.cost((0, 1)) == 4
    assert g.bottom_right == (2, 1)


def test_from_text_ignores_blank_lines_and_surrounding_whitespace():
    g = CostGrid.from_text("\n  12\n34  \n\n")
    assert g.rows == ((1, 2), (3, 4))


def test_reference_grid_is_13_by_13(reference):
    assert reference.shape == (13, 13)
    assert reference.cost((0, 0)) == 2
    assert reference.cost((12, 12)) == 3


@pytest.mark.parametrize("text", ["", "\n\n", "12\n3\n", "12a\n456", "1-2"])
def test_from_text_rejects_malformed(text):
    with pytest.raises(MalformedGridError):
        CostGrid.from_text(text)


@pytest.mark.parametrize("rows", [
    [],
    [[]],
    [[1, 2], [3]],
    [[1, -2]],
    [[1.5, 2]],
    [[True, 2]],
    [["1", "2"]],
    [1, 2],
    "12",
])
def test_constructor_rejects_malformed(rows):
    with pytest.raises(MalformedGridError):
        CostGrid(rows)


def test_malformed_grid_is_an_invalid_input():
    with pytest.raises(InvalidInput):
        CostGrid([[1], [2, 3]])
    with pytest.raises(ValueError):
        CostGrid([])


def test_numpy_input_is_copied_and_read_only():
    src = np.array([[1, 2], [3, 4]])
    g = CostGrid(src)
    src[0, 0] = 9
    assert g.cost((0, 0)) == 1
    with pytest.raises(ValueError):
        g.array[0, 0] = 7


@pytest.mark.parametrize("arr", [
    np.zeros((0, 3), dtype=int),
    np.array([1, 2, 3]),
    np.array([[1.0, 2.0]]),
    np.array([[True, False]]),
    np.array([[1, -1]]),
])
def test_numpy_input_validation(arr):
    with pytest.raises(MalformedGridError):
        CostGrid(arr)


def test_zero_cost_cells_are_allowed():
    g = CostGrid([[0, 0], [0, 0]])
    assert g.cost((1, 1)) == 0


def test_cost_out_of_bounds_raises():
    g = CostGrid([[1]])
    assert not g.in_bounds((1, 0))
    assert not g.in_bounds((0, -1))
    with pytest.raises(IndexError):
        g.cost((1, 0))


def test_cells_enumerates_row_major():
    g = CostGrid([[1, 2], [3, 4]])
    assert list(g.cells()) == [(0, 0), (1, 0), (0, 1), (1, 1)]


def test_equal_grids_compare_and_hash_equal():
    a = CostGrid.from_text("12\n34")
    b = CostGrid([[1, 2], [3, 4]])
    assert a == b
    assert hash(a) == hash(b)
    assert a != CostGrid([[1, 2], [3, 5]])
    assert str(a) == "12\n34"
