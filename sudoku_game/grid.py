"""
Grid representation and the placement rule shared by the solver, the
uniqueness counter and the player input path.

A grid is a flat numpy array of 81 cells in row-major order. 0 means empty.
"""

from typing import Iterable, List, Optional, Tuple

import numpy as np

SIZE = 9
BOX = 3
CELLS = SIZE * SIZE
DIGITS = tuple(range(1, SIZE + 1))

CellPosition = Tuple[int, int]

_INDEX = np.arange(CELLS).reshape(SIZE, SIZE)

ROW_UNITS = [_INDEX[r, :].ravel() for r in range(SIZE)]
COL_UNITS = [_INDEX[:, c].ravel() for c in range(SIZE)]
BOX_UNITS = [
    _INDEX[br * BOX:(br + 1) * BOX, bc * BOX:(bc + 1) * BOX].ravel()
    for br in range(BOX)
    for bc in range(BOX)
]


def empty_grid() -> np.ndarray:
    return np.zeros(CELLS, dtype=np.int8)


def cell_index(row: int, col: int) -> int:
    return row * SIZE + col


def cell_position(index: int) -> CellPosition:
    return index // SIZE, index % SIZE


def box_index(row: int, col: int) -> int:
    return (row // BOX) * BOX + (col // BOX)


def as_grid(values) -> np.ndarray:
    """
    Convert an externally supplied grid into the internal representation.

    Accepts any 81-length sequence or a 9x9 nested sequence / array.
    Fails fast with ValueError on wrong shape, non-integers or values
    outside 0..9.

    Returns:
        A new int8 array of shape (81,); the input is never aliased.
    """
    try:
        arr = np.array(values)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Grid could not be read as an array: {e}") from e

    if arr.size != CELLS or arr.ndim not in (1, 2) or (arr.ndim == 2 and arr.shape != (SIZE, SIZE)):
        raise ValueError(f"Grid must have 81 cells (or 9x9), got shape {arr.shape}")
    if arr.dtype.kind not in "iu":
        if arr.dtype.kind == "f" and np.all(np.mod(arr, 1) == 0):
            arr = arr.astype(np.int64)
        else:
            raise ValueError(f"Grid values must be integers, got dtype {arr.dtype}")

    flat = arr.ravel()
    bad = np.flatnonzero((flat < 0) | (flat > SIZE))
    if bad.size:
        r, c = cell_position(int(bad[0]))
        raise ValueError(f"Cell ({r+1},{c+1}) has value {flat[bad[0]]}, expected 0..9")

    return flat.astype(np.int8)


def parse_grid(text: str) -> np.ndarray:
    """Parse an 81-character puzzle string; '0' or '.' mark empty cells. Whitespace is ignored."""
    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) != CELLS:
        raise ValueError(f"Puzzle string must contain 81 cells, got {len(chars)}")
    values = []
    for i, ch in enumerate(chars):
        if ch == ".":
            values.append(0)
        elif ch.isdigit():
            values.append(int(ch))
        else:
            r, c = cell_position(i)
            raise ValueError(f"Unexpected character {ch!r} at cell ({r+1},{c+1})")
    return as_grid(values)


def grid_to_string(grid: np.ndarray) -> str:
    return "".join(str(int(v)) for v in grid)


def validate_givens(grid: np.ndarray) -> Tuple[bool, str]:
    """Check for duplicate givens; fails fast to avoid long searches."""
    for label, units in (("Row", ROW_UNITS), ("Column", COL_UNITS), ("3x3 block", BOX_UNITS)):
        for i, unit in enumerate(units):
            counts = np.bincount(grid[unit], minlength=SIZE + 1)[1:]
            dupes = np.flatnonzero(counts > 1)
            if dupes.size:
                return False, f"{label} {i+1} has duplicate given digit {dupes[0] + 1}"
    return True, ""


def is_placement_valid(grid, row: int, col: int, value: int) -> bool:
    """
    Return False if value already appears in the row, the column or the
    3x3 box of (row, col); True otherwise.

    The cell itself is not excluded: callers ask about an empty cell, or
    about the cell before the new value is written. grid may be flat or
    9x9; a malformed grid raises ValueError.
    """
    grid = as_grid(grid)
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"Cell ({row},{col}) is outside the 9x9 grid")
    if value not in DIGITS:
        raise ValueError(f"Value must be a digit 1..9, got {value}")
    return _fits(grid, row, col, value)


def _fits(grid, row: int, col: int, value: int) -> bool:
    # Unchecked form used inside the searches; works on lists and arrays.
    base = row * SIZE
    for i in range(SIZE):
        if grid[base + i] == value or grid[i * SIZE + col] == value:
            return False

    r0 = (row // BOX) * BOX
    c0 = (col // BOX) * BOX
    for r in range(r0, r0 + BOX):
        for c in range(c0, c0 + BOX):
            if grid[r * SIZE + c] == value:
                return False
    return True


def find_empty_cell(grid) -> Optional[CellPosition]:
    """First empty cell in row-major order, or None when the grid is full."""
    for i in range(CELLS):
        if grid[i] == 0:
            return cell_position(i)
    return None


def is_solved(grid: np.ndarray) -> bool:
    """True when every row, column and box holds each digit exactly once."""
    target = np.arange(1, SIZE + 1)
    for unit in ROW_UNITS + COL_UNITS + BOX_UNITS:
        if not np.array_equal(np.sort(grid[unit]), target):
            return False
    return True


def unit_cells(kind: str, number: int) -> List[CellPosition]:
    units = {"row": ROW_UNITS, "col": COL_UNITS, "box": BOX_UNITS}[kind]
    return [cell_position(int(i)) for i in units[number]]


def format_board(grid: Iterable[int]) -> str:
    """Render the 9x9 board as a human-friendly string."""
    board = np.asarray(grid).reshape(SIZE, SIZE)
    lines = []
    for r, row in enumerate(board):
        parts = []
        for c, val in enumerate(row):
            parts.append(str(val) if val != 0 else ".")
            if c in {2, 5}:
                parts.append("|")
        line = " ".join(parts)
        lines.append(line)
        if r in {2, 5}:
            lines.append("-" * len(line))
    return "\n".join(lines)
