import random

from sixfour.ai.base import AIConfig
from sixfour.ai.heuristic import (count_winning_moves, find_central_move,
                                  find_double_threat, heuristic_move)
from sixfour.game.board import Board
from sixfour.utils import Player

CONFIG = AIConfig()


class LastChoice(random.Random):
    """Deterministic stand-in that always picks the last candidate."""

    def choice(self, seq):
        return seq[-1]


def test_takes_win_before_block(rng):
    board = Board.from_positions(
        x=[(0, 0), (0, 1), (0, 2)],
        o=[(1, 0), (1, 1), (1, 2)],
    )

    assert heuristic_move(board, Player.O, CONFIG, rng) == (1, 3)


def test_blocks_three_in_a_row(rng):
    board = Board.from_positions(x=[(0, 0), (0, 1), (0, 2)], o=[(5, 5), (5, 4)])

    assert heuristic_move(board, Player.O, CONFIG, rng) == (0, 3)


def test_block_with_two_open_ends_prefers_scan_order(rng):
    board = Board.from_positions(x=[(2, 1), (2, 2), (2, 3)], o=[(5, 5), (5, 0)])

    assert heuristic_move(board, Player.O, CONFIG, rng) == (2, 0)


def test_creates_double_threat(rng):
    board = Board.from_positions(x=[(5, 1), (5, 2)], o=[(0, 0), (0, 5)])

    move = heuristic_move(board, Player.X, CONFIG, rng)

    assert move == (5, 3)
    grid = board.place(*move, Player.X).copy_grid()
    assert count_winning_moves(grid, Player.X) == 2


def test_double_threat_none_without_material():
    grid = Board.from_positions(x=[(0, 0)], o=[(5, 5)]).copy_grid()
    assert find_double_threat(grid, Player.X) is None


def test_prefers_centre(rng):
    board = Board.from_positions(x=[(0, 0)], o=[(5, 5)])

    assert heuristic_move(board, Player.X, CONFIG, rng) == (2, 2)


def test_centre_tie_break_is_row_major(rng):
    board = Board.from_positions(x=[(0, 0)], o=[(2, 2)])

    assert heuristic_move(board, Player.X, CONFIG, rng) == (2, 3)


def test_falls_back_to_random_when_centre_taken():
    board = Board.from_positions(x=[(2, 2)], o=[(2, 3), (3, 2), (3, 3)])

    move = heuristic_move(board, Player.X, CONFIG, LastChoice())

    assert move == (5, 5)


def test_random_fallback_returns_empty_cell():
    board = Board.from_positions(x=[(2, 2)], o=[(2, 3), (3, 2), (3, 3)])

    for seed in range(10):
        move = heuristic_move(board, Player.X, CONFIG, random.Random(seed))
        assert board.is_empty_cell(*move)


def test_find_central_move_none_when_block_full():
    assert find_central_move([(0, 0), (5, 5), (1, 2)]) is None


def test_board_is_not_modified(rng):
    board = Board.from_positions(x=[(0, 0), (0, 1), (0, 2)], o=[(5, 5)])
    before = board.copy_grid()

    heuristic_move(board, Player.O, CONFIG, rng)

    assert (board.grid == before).all()
