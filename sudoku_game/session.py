"""
Game session state: the puzzle for the current round, the player's working
grid and the pencil notes. Rendering and input handling live elsewhere.
"""

from typing import Dict, Optional, Set

import numpy as np

from .checker import CheckResult, completed_units, evaluate
from .generator import FAILURE_BUDGET, MAX_TO_REMOVE, Puzzle, generate
from .grid import DIGITS, SIZE, CellPosition, cell_index, is_placement_valid


class GameSession:
    """
    Owns the working grid for one player.

    The Puzzle's grids are read-only; the working grid starts as a copy of
    the puzzle's initial grid and is mutated by place/clear/reset.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 max_to_remove: int = MAX_TO_REMOVE,
                 failure_budget: Optional[int] = FAILURE_BUDGET):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_to_remove = max_to_remove
        self.failure_budget = failure_budget
        self.puzzle: Optional[Puzzle] = None
        self.working: Optional[np.ndarray] = None
        self.notes: Dict[CellPosition, Set[int]] = {}
        self.conflict_cells: Set[CellPosition] = set()

    def new_game(self) -> Puzzle:
        self.puzzle = generate(self.rng, max_to_remove=self.max_to_remove,
                               failure_budget=self.failure_budget)
        self.reset()
        return self.puzzle

    def load(self, puzzle: Puzzle):
        """Start a round from an existing puzzle instead of generating one."""
        self.puzzle = puzzle
        self.reset()

    def reset(self):
        self._require_game()
        self.working = self.puzzle.initial.copy()
        self.notes = {}
        self.conflict_cells = set()

    def is_clue(self, row: int, col: int) -> bool:
        self._require_game()
        return self.puzzle.initial[cell_index(row, col)] != 0

    def place(self, row: int, col: int, value: int) -> bool:
        """
        Write value into (row, col).

        The value is stored either way; the return value says whether it
        fits the rest of the working grid, and an unfit cell is recorded
        in conflict_cells. A value outside 1..9 raises ValueError and
        leaves the cell as it was.
        """
        self._require_editable(row, col)
        if value not in DIGITS:
            raise ValueError(f"Value must be a digit 1..9, got {value}")
        idx = cell_index(row, col)
        # Clear first so the cell does not conflict with its own old value.
        self.working[idx] = 0
        valid = is_placement_valid(self.working, row, col, value)
        self.working[idx] = value
        self.notes.pop((row, col), None)
        if valid:
            self.conflict_cells.discard((row, col))
        else:
            self.conflict_cells.add((row, col))
        return valid

    def clear(self, row: int, col: int):
        self._require_editable(row, col)
        self.working[cell_index(row, col)] = 0
        self.notes.pop((row, col), None)
        self.conflict_cells.discard((row, col))

    def toggle_note(self, row: int, col: int, digit: int) -> Set[int]:
        """Add or remove a pencil note; returns the notes now held by the cell."""
        self._require_editable(row, col)
        if digit not in DIGITS:
            raise ValueError(f"Note must be a digit 1..9, got {digit}")
        cell_notes = self.notes.setdefault((row, col), set())
        if digit in cell_notes:
            cell_notes.remove(digit)
        else:
            cell_notes.add(digit)
        if not cell_notes:
            del self.notes[(row, col)]
        return set(cell_notes)

    def check(self) -> CheckResult:
        self._require_game()
        result = evaluate(self.working, self.puzzle.initial, self.puzzle.solution)
        self.conflict_cells = set(result.conflict_cells)
        return result

    def completed_units(self):
        self._require_game()
        return completed_units(self.working, self.puzzle.solution)

    def _require_game(self):
        if self.puzzle is None:
            raise RuntimeError("No game in progress; call new_game() first")

    def _require_editable(self, row: int, col: int):
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise ValueError(f"Cell ({row},{col}) is outside the 9x9 grid")
        if self.is_clue(row, col):
            raise ValueError(f"Cell ({row+1},{col+1}) is a clue and cannot be edited")
