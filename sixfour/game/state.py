"""
state.py - Game state values threaded through the engine

A GameState bundles the board, the outcome and the two move stacks. States are
frozen dataclasses: every accepted move, undo or redo builds a new one, and
callers detect a rejected action by getting the very same object back.
"""

import time
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from sixfour.game.board import Board
from sixfour.game.winner import DRAW, IN_PROGRESS, Line, detect, winning_line_through
from sixfour.utils import GameStatus, Player, Position


@dataclass(frozen=True)
class Move:
    """One applied placement. ``timestamp`` is informational and ignored by equality."""
    mover: Player
    row: int
    col: int
    sequence: int
    timestamp: float = field(default_factory=time.time, compare=False)

    @property
    def position(self) -> Position:
        return (self.row, self.col)


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of one game.

    Attributes:
        board: Current cell values
        starting_player: Who moves first when history is empty
        status: IN_PROGRESS, WON or DRAW
        winner: Winning player when status is WON
        winning_line: The four winning cells when status is WON
        history: Applied moves, oldest first
        undone: Undone moves, most recently undone last
    """
    board: Board = field(default_factory=Board.empty)
    starting_player: Player = Player.X
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None
    winning_line: Line = ()
    history: Tuple[Move, ...] = ()
    undone: Tuple[Move, ...] = ()

    @property
    def current_player(self) -> Player:
        """
        Whose turn it is, derived from history.

        After a terminal move this is still the other player of the last
        mover, i.e. who would have gone next.
        """
        if self.history:
            return self.history[-1].mover.other()
        return self.starting_player

    @property
    def last_move(self) -> Optional[Move]:
        return self.history[-1] if self.history else None

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def advance(self, move: Move, undone: Tuple[Move, ...]) -> 'GameState':
        """
        Write move's cell, append it to history and settle the outcome.

        Only an in-progress state is advanced, so a new line can only pass
        through the written cell. The full scan runs only when one does, to
        report the same line ``detect`` would.

        Args:
            move: The move to record (new or redone)
            undone: The undone-move stack the new state should carry

        Returns:
            The resulting state
        """
        board = self.board.place(move.row, move.col, move.mover)
        if winning_line_through(board, move.row, move.col) is not None:
            result = detect(board)
        elif board.is_full():
            result = DRAW
        else:
            result = IN_PROGRESS
        return replace(
            self,
            board=board,
            status=result.status,
            winner=result.winner,
            winning_line=result.winning_line,
            history=self.history + (move,),
            undone=undone,
        )
