import random

import pytest

from sixfour.ai.base import AIConfig
from sixfour.ai.opponent import STRATEGIES, choose_move
from sixfour.game.board import Board
from sixfour.utils import Difficulty, NoLegalMoveError, Player, UnknownDifficultyError

X_THREE = Board.from_positions(x=[(0, 0), (0, 1), (0, 2)], o=[(5, 5), (5, 4)])


@pytest.mark.parametrize("value, expected", [
    ("easy", Difficulty.EASY),
    ("Medium", Difficulty.MEDIUM),
    (" HARD ", Difficulty.HARD),
    (Difficulty.HARD, Difficulty.HARD),
])
def test_difficulty_parse(value, expected):
    assert Difficulty.parse(value) == expected


@pytest.mark.parametrize("value", ["expert", "", 3, None])
def test_unknown_difficulty_rejected(value):
    with pytest.raises(UnknownDifficultyError):
        choose_move(Board.empty(), Player.X, value)


def test_unknown_difficulty_is_value_error():
    with pytest.raises(ValueError):
        Difficulty.parse("impossible")


def test_every_tier_has_a_strategy():
    assert set(STRATEGIES) == set(Difficulty)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_full_board_raises(draw_board, difficulty):
    with pytest.raises(NoLegalMoveError):
        choose_move(draw_board, Player.X, difficulty)


@pytest.mark.parametrize("difficulty", ["easy", "medium", "hard"])
def test_returns_empty_cell_as_ints(difficulty, rng):
    board = Board.from_positions(x=[(2, 2), (3, 1)], o=[(3, 3), (2, 4)])

    row, col = choose_move(board, "X", difficulty, AIConfig(search_depth=2), rng)

    assert type(row) is int and type(col) is int
    assert board.is_empty_cell(row, col)


def test_accepts_raw_grid(rng):
    grid = X_THREE.copy_grid()

    assert choose_move(grid, Player.O, "medium", rng=rng) == (0, 3)
    assert (grid == X_THREE.grid).all()


@pytest.mark.parametrize("difficulty", ["medium", "hard"])
def test_stronger_tiers_block(difficulty, rng):
    assert choose_move(X_THREE, Player.O, difficulty, rng=rng) == (0, 3)


def test_easy_always_smart_plays_heuristic(rng):
    config = AIConfig(easy_smart_probability=1.0)

    assert choose_move(X_THREE, Player.O, "easy", config, rng) == (0, 3)


def test_easy_never_smart_plays_random_cells():
    config = AIConfig(easy_smart_probability=0.0)
    empties = set(X_THREE.empty_cells())

    moves = {choose_move(X_THREE, Player.O, "easy", config, random.Random(seed))
             for seed in range(30)}

    assert moves <= empties
    assert len(moves) > 1


def test_easy_is_reproducible_with_seed():
    board = Board.from_positions(x=[(2, 2)], o=[(3, 3)])

    first = [choose_move(board, Player.X, "easy", rng=random.Random(7)) for _ in range(3)]
    again = [choose_move(board, Player.X, "easy", rng=random.Random(7)) for _ in range(3)]

    assert first == again


def test_hard_is_deterministic():
    board = Board.from_positions(x=[(2, 2), (3, 1)], o=[(3, 3), (2, 4)])
    config = AIConfig(search_depth=2)

    first = choose_move(board, Player.O, "hard", config, random.Random(1))
    second = choose_move(board, Player.O, "hard", config, random.Random(99))

    assert first == second


def test_empty_player_rejected():
    with pytest.raises(ValueError):
        choose_move(Board.empty(), Player.EMPTY, "easy")


@pytest.mark.parametrize("kwargs", [
    {"search_depth": 0},
    {"easy_smart_probability": 1.5},
    {"easy_smart_probability": -0.1},
    {"max_candidates": 0},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        AIConfig(**kwargs)
