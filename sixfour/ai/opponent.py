"""
opponent.py - Difficulty dispatch for the computer opponent

The three tiers are plain functions with one signature; choose_move resolves
the difficulty and calls the matching one. Every call works on its own copy of
the board, so concurrent games never share search state.
"""

import random
from typing import Dict, Optional, Union

import numpy as np

from sixfour.ai.base import AIConfig, Strategy, require_moves
from sixfour.ai.heuristic import heuristic_move
from sixfour.ai.minimax import minimax_move
from sixfour.ai.random_strategy import random_move
from sixfour.debug import debug
from sixfour.game.board import Board
from sixfour.utils import Difficulty, Player, Position, UnknownDifficultyError

STRATEGIES: Dict[Difficulty, Strategy] = {
    Difficulty.EASY: random_move,
    Difficulty.MEDIUM: heuristic_move,
    Difficulty.HARD: minimax_move,
}


def choose_move(board: Union[Board, np.ndarray], player_to_move,
                difficulty: Union[Difficulty, str],
                config: Optional[AIConfig] = None,
                rng: Optional[random.Random] = None) -> Position:
    """
    Pick the opponent's move.

    Args:
        board: Current board (a Board or a raw grid; never modified)
        player_to_move: Player.X or Player.O (or "X"/"O")
        difficulty: Difficulty member or its string value
        config: Opponent configuration, defaults to AIConfig()
        rng: Random source for the easy and medium tiers

    Returns:
        (row, col) of an empty cell

    Raises:
        UnknownDifficultyError: difficulty does not name a tier
        NoLegalMoveError: the board has no empty cell
    """
    try:
        level = Difficulty.parse(difficulty)
    except UnknownDifficultyError:
        debug.error(f"Unknown difficulty selector {difficulty!r}", "ai")
        raise

    player = Player.parse(player_to_move)
    if player == Player.EMPTY:
        raise ValueError("player_to_move must be X or O")

    if not isinstance(board, Board):
        board = Board(board)

    require_moves(board)
    config = config or AIConfig()
    rng = rng or random.Random()

    row, col = STRATEGIES[level](board, player, config, rng)
    debug.debug(f"{level.name} opponent plays {player} at ({row}, {col})", "ai")
    return (int(row), int(col))
