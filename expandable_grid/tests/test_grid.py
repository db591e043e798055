import numpy as np
import pytest

from expandable_grid.src.core.grid import Grid
from expandable_grid.src.core.errors import OutOfBoundsError


def test_new_grid_is_filled_with_default():
    grid = Grid(3, 2, default=5)
    assert grid.logical_bounds() == (0, 0, 3, 2)
    assert grid.to_list() == [[5, 5, 5], [5, 5, 5]]


def test_capacity_is_minimal_at_construction():
    grid = Grid(4, 3, default=0, origin=(-2, 7))
    assert grid.capacity_bounds() == grid.logical_bounds() == (-2, 7, 4, 3)
    assert grid.capacity_rect.area == 12
    assert len(grid._buffer) == 12


def test_set_then_get_round_trip():
    grid = Grid(3, 3, default=0, origin=(-1, -1))
    for y in range(-1, 2):
        for x in range(-1, 2):
            grid.set(x, y, x * 10 + y)
    for y in range(-1, 2):
        for x in range(-1, 2):
            assert grid.get(x, y) == x * 10 + y


def test_get_out_of_bounds_returns_default():
    grid = Grid(2, 2)
    assert grid.get(2, 0) is None
    assert grid.get(-1, 0, default="missing") == "missing"


def test_get_or_error_reports_out_of_bounds():
    grid = Grid(2, 2)
    with pytest.raises(OutOfBoundsError) as info:
        grid.get_or_error(0, 5)
    assert info.value.x == 0
    assert info.value.y == 5
    assert info.value.bounds == (0, 0, 2, 2)


def test_set_out_of_bounds_leaves_grid_unchanged():
    grid = Grid(2, 2, default=1)
    with pytest.raises(OutOfBoundsError):
        grid.set(3, 3, 9)
    assert grid.logical_bounds() == (0, 0, 2, 2)
    assert grid.capacity_bounds() == (0, 0, 2, 2)
    assert grid.to_list() == [[1, 1], [1, 1]]
    assert grid.reallocations == 0


def test_out_of_bounds_error_is_index_error():
    grid = Grid(1, 1)
    with pytest.raises(IndexError):
        grid[4, 4]


def test_item_access():
    grid = Grid(2, 2)
    grid[1, 0] = 3
    assert grid[1, 0] == 3
    assert (1, 0) in grid
    assert (2, 0) not in grid
    assert "nope" not in grid


def test_index_mapping_is_row_major_over_capacity():
    grid = Grid(3, 2, origin=(-1, 4))
    grid.set(1, 5, 42)
    # (y - origin_y) * width + (x - origin_x)
    assert grid._index_of(1, 5) == 1 * 3 + 2
    assert grid._buffer[5] == 42


def test_values_are_plain_python_scalars():
    grid = Grid(1, 1, default=0)
    grid.set(0, 0, 3)
    assert type(grid.get(0, 0)) is int
    flags = Grid(1, 1, default=False)
    assert flags.get(0, 0) is False


def test_object_dtype_for_non_numeric_default():
    grid = Grid(2, 1, default="unknown")
    assert grid.dtype == np.dtype(object)
    grid.set(1, 0, "a much longer label")
    assert grid.to_list() == [["unknown", "a much longer label"]]


def test_explicit_dtype():
    grid = Grid(2, 2, default=0, dtype=np.int8)
    assert grid.dtype == np.int8
    assert grid.as_array().dtype == np.int8


def test_empty_grid():
    grid = Grid()
    assert grid.logical_bounds() == (0, 0, 0, 0)
    assert len(grid) == 0
    assert grid.get(0, 0) is None
    assert grid.to_list() == []
    assert list(grid.cells()) == []


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Grid(-1, 2)


def test_cells_iterates_row_major_with_coordinates():
    grid = Grid.from_list([[1, 2], [3, 4]], origin=(-1, -1))
    assert list(grid.cells()) == [(-1, -1, 1), (0, -1, 2), (-1, 0, 3), (0, 0, 4)]


def test_from_list_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Grid.from_list([[1, 2], [3]])


def test_as_array_is_a_copy():
    grid = Grid.from_list([[1, 2], [3, 4]])
    arr = grid.as_array()
    arr[0, 0] = 99
    assert grid.get(0, 0) == 1
    np.testing.assert_array_equal(arr, [[99, 2], [3, 4]])


def test_copy_is_independent():
    grid = Grid.from_list([[1, 2]])
    clone = grid.copy()
    clone.set_expand(5, 5, 7)
    assert grid.logical_bounds() == (0, 0, 2, 1)
    assert clone.get(5, 5) == 7
    assert clone.get(1, 0) == 2


def test_equality_compares_bounds_and_values():
    a = Grid.from_list([[1, 2]])
    b = Grid.from_list([[1, 2]])
    c = Grid.from_list([[1, 2]], origin=(1, 0))
    assert a == b
    assert a != c
    b.set(0, 0, 5)
    assert a != b


def test_repr_mentions_bounds():
    grid = Grid(2, 3)
    assert "bounds=(0, 0, 2, 3)" in repr(grid)


def test_values_of_any_type_round_trip_on_default_grid():
    grid = Grid(2, 2)
    grid.set(0, 0, 2.5)
    grid.set(1, 0, "label")
    grid.set_expand(3, 3, (1, 2))
    assert grid.get(0, 0) == 2.5
    assert grid.get(1, 0) == "label"
    assert grid.get(3, 3) == (1, 2)
    assert grid.dtype == np.dtype(object)


def test_int_written_to_bool_default_grid_is_kept():
    grid = Grid(1, 1, default=False)
    grid.set(0, 0, 5)
    assert grid.get(0, 0) == 5
    assert type(grid.get(0, 0)) is int


def test_unconvertible_value_leaves_grid_unchanged():
    grid = Grid(2, 2, default=0, dtype=np.int64, growth_factor=2.0)
    with pytest.raises(ValueError):
        grid.set_expand(10, 10, "not a number")
    assert grid.logical_bounds() == (0, 0, 2, 2)
    assert grid.capacity_bounds() == (0, 0, 2, 2)
    assert grid.reallocations == 0
    with pytest.raises(ValueError):
        grid.set(0, 0, "not a number")
    assert grid.to_list() == [[0, 0], [0, 0]]
