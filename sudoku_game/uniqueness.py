"""
Solution counting with an early-stop cap.

The generator only needs to know whether a grid has zero, one, or more
than one completion, so the search stops as soon as `cap` completions
have been seen.
"""

from .grid import DIGITS, SIZE, _fits, as_grid, find_empty_cell, validate_givens

UNIQUENESS_CAP = 2


def count_solutions(grid, cap: int = UNIQUENESS_CAP) -> int:
    """
    Count completions of grid, up to cap.

    The search runs on a private list built from grid, so grid itself is
    never written to. A grid whose givens already clash has no completion
    and counts 0.

    Returns:
        0 (no solution), 1 (unique), ... up to cap (meaning "cap or more").
    """
    if cap < 1:
        raise ValueError(f"cap must be at least 1, got {cap}")

    checked = as_grid(grid)
    if not validate_givens(checked)[0]:
        return 0

    cells = [int(v) for v in checked]
    count = 0

    def find_and_count():
        nonlocal count
        empty = find_empty_cell(cells)
        if empty is None:
            count += 1
            return

        r, c = empty
        idx = r * SIZE + c
        for val in DIGITS:
            if _fits(cells, r, c, val):
                cells[idx] = val
                find_and_count()
                cells[idx] = 0
            if count >= cap:
                break

    find_and_count()
    return count
