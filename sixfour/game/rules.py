"""
rules.py - Move validation, move application and game management for sixfour

This module provides:
1. The functional move engine (create_game, is_valid_move, apply_move)
2. SixFourGame, a stateful wrapper for callers that prefer to hold one game
   object and mutate it
"""

from typing import List, Optional, Tuple

from sixfour.debug import debug
from sixfour.game.board import Board
from sixfour.game.history import can_redo, can_undo, redo, undo
from sixfour.game.state import GameState, Move
from sixfour.game.winner import Line
from sixfour.utils import GameStatus, NoLegalMoveError, Player, Position, is_valid_position


def create_game(starting_player: Player = Player.X) -> GameState:
    """
    Create a new game with an empty board.

    Args:
        starting_player: Player.X or Player.O, or their symbols

    Returns:
        Initial IN_PROGRESS state
    """
    player = Player.parse(starting_player)
    if player == Player.EMPTY:
        raise ValueError("Starting player must be X or O")
    debug.debug(f"Creating game, {player} starts", "rules")
    return GameState(board=Board.empty(), starting_player=player)


def available_moves(board: Board) -> List[Position]:
    """
    Get the empty cells of a board.

    Returns:
        List of (row, col) tuples in row-major order
    """
    return board.empty_cells()


def is_valid_move(state: GameState, row: int, col: int,
                  player: Optional[Player] = None) -> bool:
    """
    Check if a move is legal in the given state.

    The checks run in order: game still in progress, position on the board,
    target cell empty. When ``player`` is given (a network peer claiming to
    move) it must also be that player's turn.

    Args:
        state: Current game state
        row: Row index
        col: Column index
        player: Optional mover to check against the derived turn

    Returns:
        True if the move is valid, False otherwise
    """
    if state.status.is_game_over():
        debug.debug(f"Invalid move: game is over (status: {state.status.name})", "rules")
        return False

    if not is_valid_position(row, col):
        debug.debug(f"Invalid move: ({row}, {col}) out of bounds", "rules")
        return False

    if not state.board.is_empty_cell(row, col):
        debug.debug(f"Invalid move: ({row}, {col}) is occupied", "rules")
        return False

    if player is not None and Player.parse(player) != state.current_player:
        debug.debug(f"Invalid move: not {player}'s turn", "rules")
        return False

    return True


def apply_move(state: GameState, row: int, col: int) -> GameState:
    """
    Place the current player's symbol at (row, col).

    Invalid moves are not errors: the input state is returned unchanged (the
    same object), so callers compare before/after to see if it was accepted.

    Args:
        state: Current game state
        row: Row index
        col: Column index

    Returns:
        The new state, or ``state`` itself if the move was rejected
    """
    if not is_valid_move(state, row, col):
        return state

    mover = state.current_player
    move = Move(mover=mover, row=row, col=col, sequence=len(state.history))
    new_state = state.advance(move, undone=())

    if new_state.status == GameStatus.WON:
        debug.info(f"{mover} wins with {list(new_state.winning_line)}", "rules")
    elif new_state.status == GameStatus.DRAW:
        debug.info("Game ends in a draw", "rules")
    else:
        debug.debug(f"{mover} played ({row}, {col}); {new_state.current_player} to move", "rules")

    return new_state


class SixFourGame:
    """
    High-level sixfour game manager.

    Holds one GameState and replaces it on every accepted action. Useful for
    interactive front ends and for the developer CLI.
    """

    def __init__(self, starting_player: Player = Player.X):
        """Initialize a new game."""
        self.starting_player = Player.parse(starting_player)
        self.state = create_game(self.starting_player)

    def reset(self, starting_player: Optional[Player] = None) -> None:
        """Reset the game to initial state, optionally switching who starts."""
        if starting_player is not None:
            self.starting_player = Player.parse(starting_player)
        debug.debug("Resetting game", "rules")
        self.state = create_game(self.starting_player)

    def _replace(self, new_state: GameState) -> bool:
        changed = new_state is not self.state
        self.state = new_state
        return changed

    def make_move(self, row: int, col: int) -> bool:
        """
        Make a move in the game.

        Returns:
            True if the move was accepted, False otherwise
        """
        return self._replace(apply_move(self.state, row, col))

    def undo_move(self) -> bool:
        """Undo the last move. Returns True if a move was undone."""
        return self._replace(undo(self.state))

    def redo_move(self) -> bool:
        """Redo the last undone move. Returns True if a move was redone."""
        return self._replace(redo(self.state))

    def can_undo(self) -> bool:
        return can_undo(self.state)

    def can_redo(self) -> bool:
        return can_redo(self.state)

    def ai_move(self, difficulty, config=None, rng=None) -> Tuple[int, int]:
        """
        Let the opponent play for the current player.

        Returns:
            The (row, col) that was played

        Raises:
            NoLegalMoveError: if the game is already over
        """
        from sixfour.ai.opponent import choose_move

        if self.state.is_game_over():
            debug.error(f"Opponent asked to move after the game ended "
                        f"(status: {self.state.status.name})", "rules")
            raise NoLegalMoveError("The game is over; reset before asking for a move")

        row, col = choose_move(self.state.board, self.state.current_player,
                               difficulty, config=config, rng=rng)
        self.make_move(row, col)
        return row, col

    def is_game_over(self) -> bool:
        return self.state.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if no winner yet or draw
        """
        return self.state.winner

    def get_winning_line(self) -> Line:
        return self.state.winning_line

    def get_current_player(self) -> Player:
        return self.state.current_player

    def get_valid_moves(self) -> List[Position]:
        """Get the legal cells, empty once the game is over."""
        if self.state.is_game_over():
            return []
        return available_moves(self.state.board)

    def render(self) -> str:
        """
        Render the game as a string.

        Returns:
            String representation of the board
        """
        return self.state.board.render()
