"""
Backtracking Sudoku solver with a pluggable candidate order.
"""

from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from .grid import DIGITS, SIZE, _fits, as_grid, find_empty_cell, validate_givens

CandidateOrder = Callable[[], Sequence[int]]

DEFAULT_MAX_STEPS = 200000


def ascending_order() -> Sequence[int]:
    return DIGITS


def shuffled_order(rng: Optional[np.random.Generator] = None) -> CandidateOrder:
    """Candidate order drawing a fresh permutation of 1..9 at every cell visited."""
    if rng is None:
        rng = np.random.default_rng()

    def order() -> Sequence[int]:
        return [int(v) for v in rng.permutation(DIGITS)]

    return order


def solve_board(cells: list, order: CandidateOrder, step_counter: list, max_steps: Optional[int]) -> bool:
    """In-place backtracking over a flat list of 81 ints. Returns True if solved."""
    if max_steps is not None and step_counter[0] > max_steps:
        return False

    empty = find_empty_cell(cells)
    if empty is None:
        return True

    r, c = empty
    idx = r * SIZE + c
    for val in order():
        if _fits(cells, r, c, val):
            cells[idx] = val
            step_counter[0] += 1
            if solve_board(cells, order, step_counter, max_steps):
                return True
            cells[idx] = 0

    return False


def solve(grid: np.ndarray, candidate_order: Optional[CandidateOrder] = None,
          max_steps: Optional[int] = None, step_counter: Optional[list] = None) -> bool:
    """
    Fill grid in place with a complete solution.

    Args:
        grid: flat int array of 81 cells, mutated on success
        candidate_order: callable giving the digits to try at each cell
            (default: ascending 1..9)
        max_steps: optional cap on placements tried; exceeding it reports failure
        step_counter: optional one-element list receiving the placement count

    Returns:
        True if the grid was completed, False if no completion exists
        (or the step limit was hit). On failure the grid is left unchanged.
    """
    if candidate_order is None:
        candidate_order = ascending_order
    if step_counter is None:
        step_counter = [0]

    cells = [int(v) for v in grid]
    solved = solve_board(cells, candidate_order, step_counter, max_steps)
    if solved:
        grid[:] = cells
    return solved


def solve_puzzle(board, max_steps: int = DEFAULT_MAX_STEPS) -> Tuple[Optional[np.ndarray], str]:
    """
    Return a solved copy of the board, or (None, reason) if unsolvable or invalid.
    Limits the search to max_steps expansions to avoid runaway loops.
    """
    working = as_grid(board)
    is_valid, reason = validate_givens(working)
    if not is_valid:
        return None, reason

    steps = [0]
    solved = solve(working, ascending_order, max_steps=max_steps, step_counter=steps)
    if solved:
        return working, f"Solved in {steps[0]} steps"
    if steps[0] >= max_steps:
        return None, f"Stopped after {steps[0]} steps (limit {max_steps})"
    return None, "No solution found"
