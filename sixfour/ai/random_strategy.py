"""
random_strategy.py - Easy opponent

Plays a uniformly random free cell, except that with probability
``AIConfig.easy_smart_probability`` it plays the heuristic move instead. The
blend keeps the easy tier beatable without letting every obvious win or block
slip by.
"""

import random

from sixfour.ai.base import AIConfig, require_moves
from sixfour.ai.heuristic import heuristic_move
from sixfour.debug import debug
from sixfour.game.board import Board
from sixfour.utils import Player, Position


def random_move(board: Board, player: Player, config: AIConfig,
                rng: random.Random) -> Position:
    """
    Choose a move for the easy opponent.

    Args:
        board: Current board (not modified)
        player: Player to move
        config: Opponent configuration
        rng: Random source

    Returns:
        (row, col) of the chosen cell
    """
    moves = require_moves(board)

    if rng.random() < config.easy_smart_probability:
        debug.trace("Easy opponent defers to heuristic", "ai")
        return heuristic_move(board, player, config, rng)

    return rng.choice(moves)
