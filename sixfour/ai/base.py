"""Shared configuration and helpers for the opponent strategies."""

import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from sixfour.debug import debug
from sixfour.game.board import Board
from sixfour.utils import NoLegalMoveError, Player, Position


@dataclass
class AIConfig:
    """Opponent tuning knobs."""
    search_depth: int = 4  # Plies searched by the hard opponent
    easy_smart_probability: float = 0.3  # Chance the easy opponent plays the heuristic move
    max_candidates: Optional[int] = None  # Cap on moves expanded per search node

    def __post_init__(self):
        if self.search_depth < 1:
            raise ValueError(f"search_depth must be >= 1, got {self.search_depth}")
        if not 0.0 <= self.easy_smart_probability <= 1.0:
            raise ValueError(
                f"easy_smart_probability must be in [0, 1], got {self.easy_smart_probability}")
        if self.max_candidates is not None and self.max_candidates < 1:
            raise ValueError(f"max_candidates must be >= 1, got {self.max_candidates}")


# Every strategy has this signature: (board, player_to_move, config, rng) -> (row, col)
Strategy = Callable[[Board, Player, AIConfig, random.Random], Position]


def require_moves(board: Board) -> List[Position]:
    """
    Get the empty cells, refusing a full board.

    Raises:
        NoLegalMoveError: if the board has no empty cell
    """
    moves = board.empty_cells()
    if not moves:
        debug.error("Opponent asked to move on a full board", "ai")
        raise NoLegalMoveError("No empty cell left; the game should already be over")
    return moves
