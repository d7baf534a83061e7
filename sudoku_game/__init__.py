"""
Sudoku Game - puzzle engine

This package contains modules for:
- Grid representation and the placement rule
- Backtracking solving and solution counting
- Puzzle generation with a unique solution
- Checking a player's grid and tracking a game session
"""

from .checker import CheckResult, completed_units, evaluate, outcome
from .generator import Puzzle, RemovalReport, generate
from .grid import as_grid, find_empty_cell, format_board, is_placement_valid, parse_grid
from .session import GameSession
from .solver import ascending_order, shuffled_order, solve, solve_puzzle
from .uniqueness import count_solutions

__version__ = "1.0.0"
