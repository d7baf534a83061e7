# tests/test_session.py
import numpy as np
import pytest

from sudoku_game.generator import Puzzle
from sudoku_game.session import GameSession


@pytest.fixture
def session(puzzle_grid, solution_grid):
    game = GameSession()
    game.load(Puzzle(puzzle_grid, solution_grid))
    return game


def test_requires_game():
    game = GameSession()
    with pytest.raises(RuntimeError):
        game.check()


def test_working_grid_is_a_copy(session, puzzle_grid):
    session.place(0, 2, 4)
    assert puzzle_grid[2] == 0
    assert session.working[2] == 4


def test_place_valid_and_conflicting(session):
    assert session.place(0, 2, 4)
    assert (0, 2) not in session.conflict_cells

    # 5 is already in row 0
    assert not session.place(0, 3, 5)
    assert session.working[3] == 5
    assert (0, 3) in session.conflict_cells

    assert session.place(0, 3, 6)
    assert (0, 3) not in session.conflict_cells


def test_replacing_with_same_value_is_valid(session):
    assert session.place(0, 2, 4)
    assert session.place(0, 2, 4)


def test_clue_cells_are_not_editable(session):
    with pytest.raises(ValueError, match="clue"):
        session.place(0, 0, 1)
    with pytest.raises(ValueError):
        session.clear(0, 1)
    with pytest.raises(ValueError):
        session.toggle_note(0, 4, 2)


def test_clear_and_reset(session, puzzle_grid):
    session.place(0, 2, 4)
    session.clear(0, 2)
    assert session.working[2] == 0

    session.place(0, 2, 4)
    session.toggle_note(0, 3, 6)
    session.reset()
    assert np.array_equal(session.working, puzzle_grid)
    assert session.notes == {}


def test_pencil_notes(session):
    assert session.toggle_note(0, 2, 1) == {1}
    assert session.toggle_note(0, 2, 4) == {1, 4}
    assert session.toggle_note(0, 2, 1) == {4}
    assert session.toggle_note(0, 2, 4) == set()
    assert (0, 2) not in session.notes

    session.toggle_note(0, 2, 2)
    session.place(0, 2, 4)
    assert (0, 2) not in session.notes

    with pytest.raises(ValueError):
        session.toggle_note(0, 2, 0)


def test_check_and_completed_units(session, solution_grid):
    for idx in range(9):
        if session.working[idx] == 0:
            session.place(0, idx, int(solution_grid[idx]))
    assert ("row", 0) in session.completed_units()

    result = session.check()
    assert not result.complete
    assert result.correct


def test_check_refreshes_conflicts(session, solution_grid):
    wrong = int(solution_grid[2]) % 9 + 1
    session.place(0, 2, wrong)
    result = session.check()
    assert (0, 2) in result.conflict_cells
    assert session.conflict_cells == {(0, 2)}


def test_new_game_replaces_puzzle():
    game = GameSession(np.random.default_rng(99), max_to_remove=20)
    first = game.new_game()
    assert np.array_equal(game.working, first.initial)
    assert np.count_nonzero(first.initial == 0) <= 20

    second = game.new_game()
    assert game.puzzle is second
    assert not np.array_equal(first.solution, second.solution)


@pytest.mark.parametrize("bad", [0, 10, -1])
def test_rejected_value_keeps_previous_digit(session, bad):
    session.place(0, 2, 4)
    session.toggle_note(0, 3, 6)
    with pytest.raises(ValueError, match="digit"):
        session.place(0, 2, bad)
    assert session.working[2] == 4
    assert session.notes == {(0, 3): {6}}
