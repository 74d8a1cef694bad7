from __future__ import annotations

import numpy as np
import pytest

from digirain.grid import BLANK, MAX_HEIGHT, MAX_WIDTH, RUN_LIMIT, Cell, Grid


def test_new_grid_is_blank_everywhere() -> None:
    grid = Grid()
    assert (grid.height, grid.width) == (MAX_HEIGHT, MAX_WIDTH)
    assert np.all(grid.glyphs == BLANK)
    assert not np.any(grid.bright)
    assert not np.any(grid.run)


def test_initialize_clears_mutated_cells() -> None:
    grid = Grid(4, 6)
    grid.set_cell(0, 0, Cell("a", True, 5))
    grid.set_cell(3, 5, Cell("Z", False, 1))
    grid.initialize()
    for row in range(grid.height):
        for col in range(grid.width):
            assert grid.get_cell(row, col) == Cell.blank()


def test_get_and_set_cell_round_trip_and_bounds() -> None:
    grid = Grid(3, 3)
    grid.set_cell(1, 2, Cell("%", True, 12))
    cell = grid.get_cell(1, 2)
    assert cell == Cell("%", True, 12)
    assert not grid.is_blank(1, 2)
    assert grid.is_blank(0, 0)

    with pytest.raises(IndexError):
        grid.get_cell(3, 0)
    with pytest.raises(IndexError):
        grid.set_cell(0, -1, Cell.blank())
    with pytest.raises(IndexError):
        grid.is_blank(0, 3)


def test_set_cell_rejects_invalid_cells() -> None:
    grid = Grid(2, 2)
    with pytest.raises(ValueError):
        grid.set_cell(0, 0, Cell("a", False, -1))
    with pytest.raises(ValueError):
        grid.set_cell(0, 0, Cell("ab", False, 0))


def test_grid_requires_positive_dimensions() -> None:
    with pytest.raises(ValueError):
        Grid(0, 10)
    with pytest.raises(ValueError):
        Grid(10, -1)


def test_visible_size_clamps_to_grid() -> None:
    grid = Grid(200, 300)
    assert grid.visible_size(500, 500) == (200, 300)
    assert grid.visible_size(24, 80) == (24, 80)
    assert grid.visible_size(0, -3) == (1, 1)


def test_set_cell_rejects_run_beyond_counter_range_without_writing() -> None:
    grid = Grid(2, 2)
    grid.set_cell(0, 0, Cell("b", False, 3))
    with pytest.raises(ValueError):
        grid.set_cell(0, 0, Cell("a", True, RUN_LIMIT + 1))
    with pytest.raises(ValueError):
        grid.set_cell(0, 0, Cell("a", True, 40000))
    assert grid.get_cell(0, 0) == Cell("b", False, 3)

    grid.set_cell(1, 1, Cell("c", False, RUN_LIMIT))
    assert grid.get_cell(1, 1).run == RUN_LIMIT
