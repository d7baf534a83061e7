# tests/test_uniqueness.py
import numpy as np
import pytest

from sudoku_game.grid import empty_grid
from sudoku_game.uniqueness import count_solutions


def test_solved_grid_has_one_solution(solution_grid):
    assert count_solutions(solution_grid) == 1


def test_known_puzzle_is_unique(puzzle_grid):
    assert count_solutions(puzzle_grid.copy()) == 1


def test_interchangeable_rows_are_capped_at_two(solution_grid):
    # Rows 0 and 1 share a band, so blanking both allows swapping them.
    grid = solution_grid.copy()
    grid[:18] = 0
    assert count_solutions(grid) == 2


def test_deadly_rectangle_is_capped_at_two():
    # Rows 0/3 and columns 0/1 of this grid hold 1 2 / 2 1, spanning two boxes.
    rows = [
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
        [4, 5, 6, 7, 8, 9, 1, 2, 3],
        [7, 8, 9, 1, 2, 3, 4, 5, 6],
        [2, 1, 4, 3, 6, 5, 8, 9, 7],
        [3, 6, 5, 8, 9, 7, 2, 1, 4],
        [8, 9, 7, 2, 1, 4, 3, 6, 5],
        [5, 3, 1, 6, 4, 2, 9, 7, 8],
        [6, 4, 2, 9, 7, 8, 5, 3, 1],
        [9, 7, 8, 5, 3, 1, 6, 4, 2],
    ]
    grid = np.array(rows, dtype=np.int8).ravel()
    for idx in (0, 1, 27, 28):
        grid[idx] = 0
    assert count_solutions(grid) == 2


def test_no_solution_counts_zero():
    grid = empty_grid()
    grid[:8] = np.arange(1, 9)
    grid[9 + 8] = 9
    assert count_solutions(grid) == 0


def test_cap_limits_enumeration():
    assert count_solutions(empty_grid(), cap=1) == 1
    assert count_solutions(empty_grid()) == 2
    assert count_solutions(empty_grid(), cap=3) == 3


def test_input_not_modified(puzzle_grid):
    before = puzzle_grid.copy()
    count_solutions(puzzle_grid)
    assert np.array_equal(puzzle_grid, before)


def test_cap_must_be_positive(puzzle_grid):
    with pytest.raises(ValueError):
        count_solutions(puzzle_grid, cap=0)


def test_clashing_full_grid_counts_zero(solution_grid):
    # Swapping two cells of a row keeps the row valid but breaks both columns.
    grid = solution_grid.copy()
    grid[0], grid[1] = grid[1], grid[0]
    assert count_solutions(grid) == 0


def test_clashing_givens_count_zero(puzzle_grid):
    puzzle_grid[2] = 5  # second 5 in row 0
    assert count_solutions(puzzle_grid) == 0


def test_accepts_nested_grid(puzzle_grid):
    assert count_solutions(puzzle_grid.reshape(9, 9).tolist()) == 1
