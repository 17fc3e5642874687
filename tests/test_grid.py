import numpy as np
import pytest

from cave_pcg.model.grid import TileGrid


def test_new_grid_is_zero_and_well_formed():
    grid = TileGrid(width=20, height=10)
    assert grid.cells.shape == (10, 20)
    assert grid.cells.sum() == 0
    assert grid.is_well_formed()


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
def test_non_positive_dimensions_rejected(width, height):
    with pytest.raises(ValueError):
        TileGrid(width, height)


def test_random_grid_is_binary_and_seeded():
    a = TileGrid.random(20, 10, np.random.default_rng(3))
    b = TileGrid.random(20, 10, np.random.default_rng(3))
    assert a == b
    assert a.is_well_formed()
    assert 0 < a.cells.sum() < 200


def test_from_rows_roundtrip_and_validation():
    rows = [[0, 1, 0], [1, 1, 0]]
    grid = TileGrid.from_rows(rows)
    assert (grid.width, grid.height) == (3, 2)
    assert grid.to_rows() == rows

    with pytest.raises(ValueError):
        TileGrid.from_rows([[0, 1], [1]])
    with pytest.raises(ValueError):
        TileGrid.from_rows([[0, 2]])
    with pytest.raises(ValueError):
        TileGrid.from_rows([])


def test_in_bounds_uses_row_column_convention():
    grid = TileGrid(width=4, height=2)
    assert grid.in_bounds(1, 3)
    assert not grid.in_bounds(2, 0)
    assert not grid.in_bounds(0, 4)
    assert not grid.in_bounds(-1, 0)


def test_mark_ignores_out_of_bounds():
    grid = TileGrid(3, 3)
    grid.mark(1, 1)
    grid.mark(5, 5)
    grid.mark(-1, 0)
    assert grid.cells.sum() == 1
    assert grid.cells[1, 1] == 1


def test_stamp_rectangle_clipped_to_bounds():
    grid = TileGrid(width=4, height=3)
    covered = grid.stamp_rectangle(2, 2, 5, 5)
    assert covered == 2
    assert grid.cells.sum() == 2
    assert grid.cells[2, 2:].tolist() == [1, 1]
    assert grid.is_well_formed()


def test_copy_is_independent():
    grid = TileGrid(3, 3)
    clone = grid.copy()
    clone.mark(0, 0)
    assert grid.cells.sum() == 0
