"""
heuristic.py - Rule-based opponent (medium difficulty)

The rules are tried in order and the first one that yields a cell wins:

1. Complete our own line.
2. Block the opponent's immediate line.
3. Play a cell that leaves us two or more immediate winning cells
   (a double threat the opponent cannot block with one move).
4. Take the most central free cell of the middle 2x2 block.
5. Play a random free cell.

Every scan runs in row-major order, which is the tie-break whenever several
cells satisfy the same rule.
"""

import random
from typing import List, Optional

import numpy as np

from sixfour.ai.base import AIConfig, require_moves
from sixfour.debug import debug
from sixfour.game.board import Board
from sixfour.game.winner import is_winning_move
from sixfour.utils import Player, Position, center_distance, empty_positions, order_by_center

# Cells this close to the centre (Manhattan) count as central: the middle 2x2
CENTRAL_RADIUS = 1.0


def find_winning_move(grid: np.ndarray, player: Player,
                      moves: Optional[List[Position]] = None) -> Optional[Position]:
    """
    First empty cell where player completes a line.

    Args:
        grid: Writable scratch grid; restored before returning
        player: Player to place
        moves: Candidate cells, all empty cells by default

    Returns:
        The winning cell, or None
    """
    for row, col in (moves if moves is not None else empty_positions(grid)):
        if is_winning_move(grid, row, col, player):
            return (row, col)
    return None


def count_winning_moves(grid: np.ndarray, player: Player) -> int:
    """Number of empty cells where player would complete a line."""
    return sum(1 for row, col in empty_positions(grid)
               if is_winning_move(grid, row, col, player))


def find_double_threat(grid: np.ndarray, player: Player) -> Optional[Position]:
    """
    First empty cell after which player has at least two winning cells.

    Args:
        grid: Writable scratch grid; restored before returning
        player: Player to place

    Returns:
        The threat-creating cell, or None
    """
    for row, col in empty_positions(grid):
        grid[row, col] = player.value
        try:
            threats = count_winning_moves(grid, player)
        finally:
            grid[row, col] = Player.EMPTY.value
        if threats >= 2:
            debug.debug(f"Double threat for {player} at ({row}, {col}): {threats} lines", "ai")
            return (row, col)
    return None


def find_central_move(moves: List[Position]) -> Optional[Position]:
    """Most central of the free cells in the middle block, or None if all are taken."""
    central = [move for move in moves if center_distance(move) <= CENTRAL_RADIUS]
    if not central:
        return None
    return order_by_center(central)[0]


def find_immediate_move(grid: np.ndarray, player: Player,
                        moves: Optional[List[Position]] = None) -> Optional[Position]:
    """
    Win if possible, else block the opponent's immediate win.

    Shared by the heuristic and minimax opponents.
    """
    win = find_winning_move(grid, player, moves)
    if win is not None:
        debug.debug(f"{player} takes the win at {win}", "ai")
        return win

    block = find_winning_move(grid, player.other(), moves)
    if block is not None:
        debug.debug(f"{player} blocks {player.other()} at {block}", "ai")
    return block


def heuristic_move(board: Board, player: Player, config: AIConfig,
                   rng: random.Random) -> Position:
    """
    Choose a move with the ordered rule cascade.

    Args:
        board: Current board (not modified)
        player: Player to move
        config: Opponent configuration (unused by the rules themselves)
        rng: Random source for the final fallback

    Returns:
        (row, col) of the chosen cell
    """
    moves = require_moves(board)
    grid = board.copy_grid()

    move = find_immediate_move(grid, player, moves)
    if move is not None:
        return move

    move = find_double_threat(grid, player)
    if move is not None:
        return move

    move = find_central_move(moves)
    if move is not None:
        debug.trace(f"Central preference picks {move}", "ai")
        return move

    return rng.choice(moves)
