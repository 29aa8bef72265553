"""
utils.py - Constants, enumerations, exceptions and helpers for sixfour

This module provides the shared vocabulary of the engine: board dimensions,
cell values, game status, line directions, difficulty tiers and the
exception hierarchy raised for programmer errors.
"""

from enum import Enum, auto
from typing import List, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 6
CONNECT_N = 4  # Number of pieces in a row to win

# Geometric centre of the grid, between the four middle cells
CENTER = ((ROWS - 1) / 2, (COLS - 1) / 2)

# Terminal score used by the search; larger than any static evaluation
WIN_SCORE = 1_000_000

Position = Tuple[int, int]


class SixFourError(Exception):
    """Base class for errors raised by the sixfour engine."""


class UnknownDifficultyError(SixFourError, ValueError):
    """Raised when a difficulty selector outside Difficulty reaches the opponent."""


class NoLegalMoveError(SixFourError, RuntimeError):
    """Raised when the opponent is asked to move on a board with no empty cell."""


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    X = 1    # Player A
    O = 2    # Player B

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.X:
            return Player.O
        elif self == Player.O:
            return Player.X
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return "."
        return self.name

    @classmethod
    def parse(cls, value) -> 'Player':
        """Accept a Player, its symbol ("X"/"O") or its cell value (1/2)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown player symbol: {value!r}") from None
        return cls(int(value))


class GameStatus(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS


class Direction(Enum):
    """Line directions, in the order the win detector scans them."""
    HORIZONTAL = (0, 1)
    VERTICAL = (1, 0)
    DIAGONAL_DOWN = (1, 1)   # Top-left to bottom-right
    DIAGONAL_UP = (-1, 1)    # Bottom-left to top-right

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


class Difficulty(Enum):
    """Opponent difficulty tiers."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> 'Difficulty':
        """
        Resolve a difficulty selector.

        Args:
            value: A Difficulty member or its (case-insensitive) string value

        Returns:
            The matching Difficulty

        Raises:
            UnknownDifficultyError: if the selector does not name a tier
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownDifficultyError(f"Unknown difficulty: {value!r}")


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def center_distance(position: Position) -> float:
    """Manhattan distance from a cell to the centre of the grid."""
    row, col = position
    return abs(row - CENTER[0]) + abs(col - CENTER[1])


def order_by_center(positions: List[Position]) -> List[Position]:
    """Sort cells centre-first; the sort is stable so row-major order breaks ties."""
    return sorted(positions, key=center_distance)


def empty_positions(grid: np.ndarray) -> List[Position]:
    """
    List the empty cells of a grid in row-major order.

    Args:
        grid: A ROWS x COLS array of cell values

    Returns:
        List of (row, col) tuples
    """
    rows, cols = np.nonzero(grid == Player.EMPTY.value)
    return [(int(r), int(c)) for r, c in zip(rows, cols)]


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII text for logs and the developer CLI.

    Args:
        grid: The board grid

    Returns:
        ASCII representation of the board
    """
    symbols = {Player.EMPTY.value: ".", Player.X.value: "X", Player.O.value: "O"}
    result = ["  " + " ".join(str(c) for c in range(COLS))]
    for row in range(ROWS):
        cells = " ".join(symbols[int(grid[row, col])] for col in range(COLS))
        result.append(f"{row} {cells}")
    return "\n".join(result)
