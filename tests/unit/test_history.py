from dataclasses import replace

import pytest

from sixfour.game.history import can_redo, can_undo, redo, undo
from sixfour.game.rules import apply_move
from sixfour.game.state import Move
from sixfour.utils import GameStatus, Player
from tests.helpers import play

OPENING = [(2, 2), (3, 3), (2, 3), (1, 4)]


def test_undo_on_new_game_is_noop(new_game):
    assert undo(new_game) is new_game
    assert not can_undo(new_game)


def test_redo_without_undone_is_noop(new_game):
    state = apply_move(new_game, 0, 0)
    assert redo(state) is state
    assert not can_redo(state)


def test_undo_clears_cell_and_restores_turn(new_game):
    state = play(new_game, OPENING)

    undone = undo(state)

    assert undone.board.cell(1, 4) == Player.EMPTY
    assert undone.current_player == Player.O
    assert undone.undone[-1].position == (1, 4)
    assert len(undone.history) == 3
    assert undone.status == GameStatus.IN_PROGRESS


def test_undo_first_move_returns_turn_to_starter():
    from sixfour.game.rules import create_game

    state = apply_move(create_game(Player.O), 0, 0)
    assert undo(state).current_player == Player.O


@pytest.mark.parametrize("count", [1, 2, 4])
def test_redo_undo_roundtrip(new_game, count):
    state = play(new_game, OPENING[:count])
    assert redo(undo(state)) == state


def test_redo_after_apply_matches_apply(new_game):
    applied = apply_move(new_game, 4, 1)
    assert redo(undo(applied)) == applied


def test_multiple_undo_then_redo_restores_state(new_game):
    state = play(new_game, OPENING)

    back = undo(undo(undo(state)))
    assert len(back.undone) == 3
    assert redo(redo(redo(back))) == state


def test_fresh_move_after_undo_discards_redo(new_game):
    state = undo(apply_move(new_game, 0, 0))
    branched = apply_move(state, 1, 1)

    assert branched.undone == ()
    assert redo(branched) is branched
    assert redo(branched) == branched


def test_undo_after_win_is_noop(new_game):
    state = play(new_game, [(0, 0), (5, 5), (0, 1), (5, 4), (0, 2), (5, 0), (0, 3)])

    assert state.status == GameStatus.WON
    assert undo(state) is state
    assert not can_undo(state)


def test_redo_runs_win_detection(new_game):
    state = play(new_game, [(0, 0), (5, 5), (0, 1), (5, 4), (0, 2), (5, 0)])
    state = replace(state, undone=(Move(Player.X, 0, 3, sequence=6),))

    redone = redo(state)

    assert redone.status == GameStatus.WON
    assert redone.winner == Player.X
    assert redone.winning_line == ((0, 0), (0, 1), (0, 2), (0, 3))
    assert redone.undone == ()


def test_undo_keeps_input_untouched(new_game):
    state = play(new_game, OPENING)
    snapshot = state.board.copy_grid()

    undo(state)

    assert (state.board.grid == snapshot).all()
    assert len(state.history) == 4
