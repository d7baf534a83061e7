"""
Compare a player's working grid against the stored solution.
"""

from typing import FrozenSet, NamedTuple, Set, Tuple

import numpy as np

from .grid import BOX_UNITS, COL_UNITS, ROW_UNITS, CellPosition, as_grid, cell_position

UnitId = Tuple[str, int]

SOLVED = "solved"
INCORRECT = "incorrect"
INCOMPLETE = "incomplete"


class CheckResult(NamedTuple):
    complete: bool
    correct: bool
    conflict_cells: FrozenSet[CellPosition]


def evaluate(working, initial, solution) -> CheckResult:
    """
    Report completion, correctness and the cells that disagree with the solution.

    A conflict is a non-zero working value that differs from the solution.
    Clue cells are copied from the solution, so they never show up here.
    """
    working = as_grid(working)
    initial = as_grid(initial)
    solution = as_grid(solution)

    clues = initial != 0
    if np.any(solution[clues] != initial[clues]):
        raise ValueError("Solution does not agree with the puzzle's clues")

    wrong = np.flatnonzero((working != 0) & (working != solution))
    conflicts = frozenset(cell_position(int(i)) for i in wrong)
    complete = not np.any(working == 0)
    return CheckResult(complete, not conflicts, conflicts)


def outcome(result: CheckResult) -> str:
    if result.complete and result.correct:
        return SOLVED
    if result.complete:
        return INCORRECT
    return INCOMPLETE


def completed_units(working, solution) -> Set[UnitId]:
    """Rows, columns and boxes whose 9 cells are all filled and match the solution."""
    working = as_grid(working)
    solution = as_grid(solution)
    matches = (working != 0) & (working == solution)

    done = set()
    for kind, units in (("row", ROW_UNITS), ("col", COL_UNITS), ("box", BOX_UNITS)):
        for i, unit in enumerate(units):
            if matches[unit].all():
                done.add((kind, i))
    return done
