"""
board.py - Immutable board representation for sixfour

This module implements the Board class: a fixed 6x6 grid of cell values. A Board
never changes after construction; placing a piece returns a new Board. The grid
is a read-only numpy array so accidental writes fail loudly instead of leaking
into undo/redo history.
"""

from typing import Iterable, List, Optional, Sequence

import numpy as np

from sixfour.debug import DebugLevel, debug
from sixfour.utils import (ROWS, COLS, Player, Position,
                           empty_positions, is_valid_position, render_board_ascii)


class Board:
    """
    Represents a sixfour game board.

    Boards compare and hash by cell values, so two boards reached by different
    move orders are equal.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional ROWS x COLS array of cell values; an empty board
                is created when omitted. The array is copied.
        """
        if grid is None:
            grid = np.zeros((ROWS, COLS), dtype=np.int8)
        else:
            grid = np.array(grid, dtype=np.int8)
            if grid.shape != (ROWS, COLS):
                raise ValueError(f"Board grid must be {ROWS}x{COLS}, got {grid.shape}")
            if not np.isin(grid, [p.value for p in Player]).all():
                raise ValueError("Board grid contains values outside 0, 1, 2")
        grid.flags.writeable = False
        self._grid = grid

    @classmethod
    def empty(cls) -> 'Board':
        """Create an empty board."""
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable]) -> 'Board':
        """
        Build a board from row data.

        Args:
            rows: ROWS sequences of COLS cells; each cell is a Player, a cell
                value (0/1/2) or a symbol ("X", "O", "." or " ")

        Returns:
            A new Board
        """
        values = [[_cell_value(cell) for cell in row] for row in rows]
        return cls(np.array(values, dtype=np.int8))

    @classmethod
    def from_positions(cls, x: Iterable[Position] = (), o: Iterable[Position] = ()) -> 'Board':
        """Build a board with the given X and O cells occupied."""
        grid = np.zeros((ROWS, COLS), dtype=np.int8)
        for row, col in x:
            grid[row, col] = Player.X.value
        for row, col in o:
            grid[row, col] = Player.O.value
        return cls(grid)

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the cell values."""
        return self._grid

    def copy_grid(self) -> np.ndarray:
        """
        Get a writable copy of the cell values.

        Returns:
            A fresh numpy array owned by the caller
        """
        return self._grid.copy()

    def cell(self, row: int, col: int) -> Player:
        """Get the value of one cell."""
        return Player(int(self._grid[row, col]))

    def is_empty_cell(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board and unoccupied."""
        return is_valid_position(row, col) and self._grid[row, col] == Player.EMPTY.value

    def place(self, row: int, col: int, player: Player) -> 'Board':
        """
        Return a new board with player's symbol written at (row, col).

        Args:
            row: Row index
            col: Column index
            player: Symbol to write (Player.EMPTY clears the cell)

        Returns:
            A new Board; this board is unchanged
        """
        if not is_valid_position(row, col):
            raise IndexError(f"Position ({row}, {col}) is off the board")
        if debug.is_enabled_for(DebugLevel.TRACE, "board"):
            debug.trace(f"Writing {player} at ({row}, {col})", "board")
        grid = self._grid.copy()
        grid[row, col] = player.value
        return Board(grid)

    def clear(self, row: int, col: int) -> 'Board':
        """Return a new board with (row, col) emptied."""
        return self.place(row, col, Player.EMPTY)

    def empty_cells(self) -> List[Position]:
        """Empty cells in row-major order."""
        return empty_positions(self._grid)

    def count(self, player: Player) -> int:
        """Number of cells holding the given value."""
        return int(np.count_nonzero(self._grid == player.value))

    @property
    def move_count(self) -> int:
        """Number of occupied cells."""
        return int(np.count_nonzero(self._grid))

    def is_full(self) -> bool:
        return not (self._grid == Player.EMPTY.value).any()

    def is_empty(self) -> bool:
        return not self._grid.any()

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self._grid)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __hash__(self) -> int:
        return hash(self._grid.tobytes())

    def __repr__(self) -> str:
        rows = ["".join(str(Player(int(v))) for v in row) for row in self._grid]
        return f"Board({'/'.join(rows)})"

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()


def _cell_value(cell) -> int:
    if isinstance(cell, Player):
        return cell.value
    if isinstance(cell, str):
        symbol = cell.strip().upper()
        if symbol in ("", "."):
            return Player.EMPTY.value
        return Player.parse(symbol).value
    return int(cell)
