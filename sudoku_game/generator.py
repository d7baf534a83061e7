"""
Puzzle generation: build a full random solution, then carve clues out of
it while the remaining grid keeps exactly one solution.
"""

import threading
from typing import NamedTuple, Optional

import numpy as np

from .grid import CELLS, empty_grid
from .solver import shuffled_order, solve
from .uniqueness import count_solutions

MAX_TO_REMOVE = 50
FAILURE_BUDGET = 5

STOP_TARGET = "target reached"
STOP_BUDGET = "failure budget exhausted"
STOP_EXHAUSTED = "all cells tried"
STOP_CANCELLED = "cancelled"


class RemovalReport(NamedTuple):
    removed: int
    failed: int
    attempts: int
    stop_reason: str


class Puzzle(NamedTuple):
    initial: np.ndarray
    solution: np.ndarray
    report: Optional[RemovalReport] = None

    @property
    def clue_count(self) -> int:
        return int(np.count_nonzero(self.initial))


def _as_rng(rng=None, seed=None) -> np.random.Generator:
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def build_solution(rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Fill an empty grid with a randomized candidate order."""
    grid = empty_grid()
    if not solve(grid, shuffled_order(_as_rng(rng))):
        # An empty grid always has a completion.
        raise RuntimeError("Solver failed on an empty grid")
    return grid


def remove_clues(solution: np.ndarray, rng: Optional[np.random.Generator] = None,
                 max_to_remove: int = MAX_TO_REMOVE,
                 failure_budget: Optional[int] = FAILURE_BUDGET,
                 cancel_event: Optional[threading.Event] = None):
    """
    Zero cells of a solved grid in a random order, keeping only removals
    after which the grid still has exactly one solution.

    Args:
        solution: fully solved grid (not modified)
        rng: random source for the removal order
        max_to_remove: stop once this many cells have been emptied
        failure_budget: stop once this many removals were rejected;
            None disables the early exit
        cancel_event: optional event checked between attempts

    Returns:
        (puzzle grid, RemovalReport)
    """
    rng = _as_rng(rng)
    puzzle = solution.copy()
    order = rng.permutation(CELLS)

    removed = 0
    failed = 0
    attempts = 0
    stop_reason = STOP_EXHAUSTED

    for index in order:
        if removed >= max_to_remove:
            stop_reason = STOP_TARGET
            break
        if failure_budget is not None and failed >= failure_budget:
            stop_reason = STOP_BUDGET
            break
        if cancel_event is not None and cancel_event.is_set():
            stop_reason = STOP_CANCELLED
            break

        original_value = puzzle[index]
        if original_value == 0:
            continue

        attempts += 1
        puzzle[index] = 0
        if count_solutions(puzzle.copy()) != 1:
            puzzle[index] = original_value
            failed += 1
        else:
            removed += 1
    else:
        if removed >= max_to_remove:
            stop_reason = STOP_TARGET
        elif failure_budget is not None and failed >= failure_budget:
            stop_reason = STOP_BUDGET

    return puzzle, RemovalReport(removed, failed, attempts, stop_reason)


def generate(rng: Optional[np.random.Generator] = None, seed: Optional[int] = None,
             max_to_remove: int = MAX_TO_REMOVE,
             failure_budget: Optional[int] = FAILURE_BUDGET,
             cancel_event: Optional[threading.Event] = None) -> Puzzle:
    """
    Generate a puzzle with a unique solution.

    Pass either an rng or a seed to make the result reproducible.
    The returned initial grid has at most max_to_remove empty cells; fewer
    when the failure budget runs out first.
    """
    rng = _as_rng(rng, seed)
    solution = build_solution(rng)
    initial, report = remove_clues(solution, rng, max_to_remove=max_to_remove,
                                   failure_budget=failure_budget, cancel_event=cancel_event)
    solution.setflags(write=False)
    initial.setflags(write=False)
    return Puzzle(initial, solution, report)
