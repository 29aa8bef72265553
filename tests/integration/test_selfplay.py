import random

import pytest

from sixfour.ai.base import AIConfig
from sixfour.ai.opponent import choose_move
from sixfour.game.history import can_redo, can_undo, redo, undo
from sixfour.game.rules import SixFourGame, apply_move, available_moves, create_game
from sixfour.game.winner import detect
from sixfour.utils import GameStatus, Player


def play_out(x_level, o_level, seed, depth=2):
    rng = random.Random(seed)
    config = AIConfig(search_depth=depth)
    state = create_game(Player.X)
    levels = {Player.X: x_level, Player.O: o_level}

    while not state.is_game_over():
        player = state.current_player
        row, col = choose_move(state.board, player, levels[player], config, rng)
        next_state = apply_move(state, row, col)
        assert next_state is not state
        state = next_state
    return state


@pytest.mark.parametrize("x_level, o_level", [
    ("medium", "hard"),
    ("hard", "easy"),
    ("easy", "medium"),
])
def test_game_between_tiers_finishes_consistently(x_level, o_level):
    state = play_out(x_level, o_level, seed=5)

    result = detect(state.board)
    assert state.status == result.status
    assert state.winner == result.winner
    assert state.board.move_count == len(state.history)
    if state.status == GameStatus.WON:
        assert state.history[-1].mover == state.winner
        assert state.history[-1].position in state.winning_line
    else:
        assert state.board.is_full()


def test_seeded_games_replay_identically():
    first = play_out("easy", "medium", seed=42)
    second = play_out("easy", "medium", seed=42)

    assert first == second


def test_undo_redo_random_walk():
    rng = random.Random(8)
    game = SixFourGame()
    seen = []

    for _ in range(200):
        action = rng.random()
        state = game.state
        if action < 0.5 and not state.is_game_over():
            moves = available_moves(state.board)
            game.make_move(*rng.choice(moves))
        elif action < 0.8:
            assert game.undo_move() == can_undo(state)
        else:
            assert game.redo_move() == can_redo(state)

        current = game.state
        result = detect(current.board)
        assert current.status == result.status
        assert current.board.move_count == len(current.history)
        seen.append(len(current.history) + len(current.undone))

        if current.is_game_over():
            game.reset()

    assert max(seen) > 0


def test_undo_everything_then_redo_everything():
    # Terminal states are frozen, so stop one move short of the end
    state = create_game(Player.X)
    for move in play_out("easy", "easy", seed=3).history[:-1]:
        state = apply_move(state, move.row, move.col)

    moves = len(state.history)
    rewound = state
    for _ in range(moves):
        rewound = undo(rewound)

    assert rewound.board.is_empty()
    assert rewound.current_player == Player.X

    replayed = rewound
    for _ in range(moves):
        replayed = redo(replayed)

    assert replayed == state
