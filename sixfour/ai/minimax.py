"""
minimax.py - Minimax algorithm with alpha-beta pruning for sixfour

This module provides the hard opponent. Before searching it takes an immediate
win or blocks an immediate loss exactly like the heuristic opponent, so a
shallow depth or a candidate cap can never make it miss a one-move tactic.

The search works on a private writable copy of the board grid. Each node writes
one cell, recurses and clears the cell again on the way back, so no Board is
allocated per node and the caller's Board is never touched.

The static evaluation scores every 4-cell window on the board:
10**k for a window holding k of our pieces and none of the opponent's,
-10**k for the mirror case, and 0 for mixed or empty windows.
"""

import math
import random
from typing import List, Optional

import numpy as np

from sixfour.ai.base import AIConfig, require_moves
from sixfour.ai.heuristic import find_immediate_move
from sixfour.debug import DebugLevel, debug
from sixfour.game.board import Board
from sixfour.game.winner import LINE_COLS, LINE_ROWS, completes_line
from sixfour.utils import WIN_SCORE, Player, Position, empty_positions, order_by_center


def evaluate_position(grid: np.ndarray, player: Player) -> int:
    """
    Static evaluation of a position from player's point of view.

    Args:
        grid: The board grid
        player: The player we're evaluating for

    Returns:
        Sum of the window scores
    """
    windows = grid[LINE_ROWS, LINE_COLS]
    mine = np.count_nonzero(windows == player.value, axis=1)
    theirs = np.count_nonzero(windows == player.other().value, axis=1)

    ours_only = (mine > 0) & (theirs == 0)
    theirs_only = (theirs > 0) & (mine == 0)
    score = (np.power(10, mine, dtype=np.int64)[ours_only].sum()
             - np.power(10, theirs, dtype=np.int64)[theirs_only].sum())
    return int(score)


class MinimaxSearch:
    """
    Depth-limited minimax search with alpha-beta pruning.

    One instance searches for one player; ``nodes_evaluated`` is reset by every
    call to ``get_move`` and is useful for benchmarking move ordering.
    """

    def __init__(self, player: Player, depth: int = 4,
                 max_candidates: Optional[int] = None):
        """
        Initialize the search.

        Args:
            player: The player we're finding moves for
            depth: Maximum search depth in plies
            max_candidates: Optional cap on moves expanded per node
        """
        self.player = player
        self.opponent = player.other()
        self.depth = depth
        self.max_candidates = max_candidates
        self.nodes_evaluated = 0

    def _candidates(self, grid: np.ndarray) -> List[Position]:
        # Central cells sit on more windows and tend to cut off siblings sooner
        moves = order_by_center(empty_positions(grid))
        if self.max_candidates is not None:
            moves = moves[:self.max_candidates]
        return moves

    def get_move(self, grid: np.ndarray) -> Position:
        """
        Get the best move for self.player.

        Args:
            grid: Writable scratch grid; every cell written during the search
                is cleared again before this returns

        Returns:
            (row, col) of the best move; ties go to the earlier candidate
        """
        self.nodes_evaluated = 0
        moves = self._candidates(grid)

        best_score = -math.inf
        best_move = moves[0]
        alpha = -math.inf
        beta = math.inf
        tracing = debug.is_enabled_for(DebugLevel.TRACE, "ai")

        for row, col in moves:
            grid[row, col] = self.player.value
            try:
                if completes_line(grid, row, col):
                    score = WIN_SCORE + self.depth
                else:
                    # Next level is minimizing
                    score = self._minimax(grid, self.depth - 1, alpha, beta, False)
            finally:
                grid[row, col] = Player.EMPTY.value

            if tracing:
                debug.trace(f"Root move ({row}, {col}) scores {score}", "ai")

            if score > best_score:
                best_score = score
                best_move = (row, col)

            alpha = max(alpha, score)

        debug.debug(f"Best move {best_move} scores {best_score} "
                    f"after {self.nodes_evaluated} nodes", "ai")
        return best_move

    def _minimax(self, grid: np.ndarray, depth: int, alpha: float, beta: float,
                 is_maximizing: bool) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            grid: Scratch grid, restored before returning
            depth: Remaining search depth
            alpha: Alpha value for pruning (best score maximizer can guarantee)
            beta: Beta value for pruning (best score minimizer can guarantee)
            is_maximizing: True if self.player moves at this node

        Returns:
            The evaluation score for this position
        """
        self.nodes_evaluated += 1

        moves = self._candidates(grid)
        if not moves:
            return 0  # Full board without a line

        # Depth limit reached - use static evaluation
        if depth == 0:
            return evaluate_position(grid, self.player)

        mover = self.player if is_maximizing else self.opponent
        # A line completed here is worth more the sooner it happens
        terminal = WIN_SCORE + depth

        if is_maximizing:
            max_score = -math.inf

            for row, col in moves:
                grid[row, col] = mover.value
                if completes_line(grid, row, col):
                    score = terminal
                else:
                    score = self._minimax(grid, depth - 1, alpha, beta, False)
                grid[row, col] = Player.EMPTY.value

                max_score = max(max_score, score)
                alpha = max(alpha, score)

                # Beta cutoff
                if beta <= alpha:
                    break

            return max_score

        else:  # Minimizing
            min_score = math.inf

            for row, col in moves:
                grid[row, col] = mover.value
                if completes_line(grid, row, col):
                    score = -terminal
                else:
                    score = self._minimax(grid, depth - 1, alpha, beta, True)
                grid[row, col] = Player.EMPTY.value

                min_score = min(min_score, score)
                beta = min(beta, score)

                # Alpha cutoff
                if beta <= alpha:
                    break

            return min_score


def minimax_move(board: Board, player: Player, config: AIConfig,
                 rng: random.Random) -> Position:
    """
    Choose a move for the hard opponent.

    Args:
        board: Current board (not modified)
        player: Player to move
        config: Opponent configuration (search depth, candidate cap)
        rng: Unused; the hard opponent is deterministic

    Returns:
        (row, col) of the chosen cell
    """
    moves = require_moves(board)
    grid = board.copy_grid()

    move = find_immediate_move(grid, player, moves)
    if move is not None:
        return move

    if board.is_empty():
        return order_by_center(moves)[0]

    search = MinimaxSearch(player, depth=config.search_depth,
                           max_candidates=config.max_candidates)
    with debug.timer("minimax_search", "ai"):
        move = search.get_move(grid)
    debug.info(f"Minimax depth {config.search_depth} chose {move} "
               f"({search.nodes_evaluated} nodes)", "ai")
    return move
