"""
winner.py - Four-in-a-row and draw detection

This is the single win detector of the engine. The move engine, the history
manager, the opponent search and any network-side move validation all decide
wins through the functions in this module.

Two entry points are provided:

* ``detect`` scans the whole board. Cells are visited in row-major order and,
  for each occupied cell, the four directions are tried in the fixed order
  horizontal, vertical, diagonal-down, diagonal-up. The first complete line
  found is the result; when several lines exist the scan order is the
  tie-break.
* ``winning_line_through`` only inspects the lines through one cell. After a
  single placement it agrees with ``detect`` on whether the game is won, so
  ``GameState.advance`` only falls back to the full scan when it finds a line.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

from sixfour.debug import debug
from sixfour.game.board import Board
from sixfour.utils import (ROWS, COLS, CONNECT_N, Direction, GameStatus, Player,
                           Position, is_valid_position)

Line = Tuple[Position, ...]


@dataclass(frozen=True)
class WinResult:
    """Outcome of a board scan."""
    status: GameStatus
    winner: Optional[Player] = None
    winning_line: Line = ()
    direction: Optional[Direction] = None

    @property
    def is_win(self) -> bool:
        return self.status == GameStatus.WON

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW


IN_PROGRESS = WinResult(GameStatus.IN_PROGRESS)
DRAW = WinResult(GameStatus.DRAW)


def _as_grid(board: Union[Board, np.ndarray]) -> np.ndarray:
    return board.grid if isinstance(board, Board) else board


def line_from(row: int, col: int, direction: Direction) -> Optional[Line]:
    """
    Coordinates of the CONNECT_N cells starting at (row, col) along direction.

    Returns:
        The line, or None if it leaves the board
    """
    dr, dc = direction.delta
    end_row, end_col = row + (CONNECT_N - 1) * dr, col + (CONNECT_N - 1) * dc
    if not (is_valid_position(row, col) and is_valid_position(end_row, end_col)):
        return None
    return tuple((row + i * dr, col + i * dc) for i in range(CONNECT_N))


def _owned_by(grid: np.ndarray, line: Line, value: int) -> bool:
    return all(grid[r, c] == value for r, c in line)


def detect(board: Union[Board, np.ndarray]) -> WinResult:
    """
    Scan the whole board for a winner or a draw.

    Args:
        board: A Board or a ROWS x COLS grid of cell values

    Returns:
        WinResult with status WON (winner and 4-cell line), DRAW or IN_PROGRESS
    """
    grid = _as_grid(board)
    for row in range(ROWS):
        for col in range(COLS):
            value = int(grid[row, col])
            if value == Player.EMPTY.value:
                continue
            for direction in Direction:
                line = line_from(row, col, direction)
                if line is not None and _owned_by(grid, line, value):
                    debug.debug(f"{Player(value)} wins on {direction.name} line {line}", "winner")
                    return WinResult(GameStatus.WON, Player(value), line, direction)

    if not (grid == Player.EMPTY.value).any():
        debug.debug("Board full with no line, draw", "winner")
        return DRAW
    return IN_PROGRESS


def winning_line_through(board: Union[Board, np.ndarray], row: int, col: int) -> Optional[Line]:
    """
    Check only the lines that pass through (row, col).

    Args:
        board: A Board or grid
        row: Row of the cell just written
        col: Column of the cell just written

    Returns:
        The first complete line containing the cell (direction order, then
        earliest start along the direction), or None
    """
    grid = _as_grid(board)
    value = int(grid[row, col])
    if value == Player.EMPTY.value:
        return None

    for direction in Direction:
        dr, dc = direction.delta
        for back in range(CONNECT_N - 1, -1, -1):
            line = line_from(row - back * dr, col - back * dc, direction)
            if line is not None and _owned_by(grid, line, value):
                return line
    return None


def completes_line(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Fast boolean form of ``winning_line_through`` for the opponent search.

    Counts the run of equal cells through (row, col) in each direction.
    """
    value = grid[row, col]
    if value == Player.EMPTY.value:
        return False

    for direction in Direction:
        dr, dc = direction.delta
        count = 1

        # Check in the positive direction
        r, c = row + dr, col + dc
        while is_valid_position(r, c) and grid[r, c] == value:
            count += 1
            r += dr
            c += dc

        # Check in the negative direction
        r, c = row - dr, col - dc
        while is_valid_position(r, c) and grid[r, c] == value:
            count += 1
            r -= dr
            c -= dc

        if count >= CONNECT_N:
            return True

    return False


def is_winning_move(grid: np.ndarray, row: int, col: int, player: Player) -> bool:
    """
    Would writing player at the empty cell (row, col) complete a line?

    The grid is written and restored in place, so it must be a writable
    scratch array, never a Board's grid.
    """
    grid[row, col] = player.value
    try:
        return completes_line(grid, row, col)
    finally:
        grid[row, col] = Player.EMPTY.value


def get_winner(board: Union[Board, np.ndarray]) -> Optional[WinResult]:
    """
    Public winner query.

    Returns:
        The WinResult when the board is won or drawn, None while in progress
    """
    result = detect(board)
    if result.status == GameStatus.IN_PROGRESS:
        return None
    return result


def all_lines() -> List[Line]:
    """Every CONNECT_N window on the board, in detector scan order."""
    lines = []
    for row in range(ROWS):
        for col in range(COLS):
            for direction in Direction:
                line = line_from(row, col, direction)
                if line is not None:
                    lines.append(line)
    return lines


# Index arrays for vectorised window evaluation: LINE_ROWS[i], LINE_COLS[i]
# address the CONNECT_N cells of the i-th window.
_LINES = np.array(all_lines(), dtype=np.intp)
LINE_ROWS = _LINES[:, :, 0]
LINE_COLS = _LINES[:, :, 1]
