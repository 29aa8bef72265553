"""
history.py - Linear undo/redo over GameState values

Undo moves the last applied move onto the undone stack; redo moves it back and
re-runs win detection, since a redone move can complete a line again. Applying
a fresh move (see rules.apply_move) empties the undone stack, so history is a
line, never a tree.
"""

from dataclasses import replace

from sixfour.debug import debug
from sixfour.game.state import GameState
from sixfour.utils import GameStatus


def can_undo(state: GameState) -> bool:
    return bool(state.history) and not state.status.is_game_over()


def can_redo(state: GameState) -> bool:
    return bool(state.undone) and not state.status.is_game_over()


def undo(state: GameState) -> GameState:
    """
    Take back the most recent move.

    Args:
        state: Current game state

    Returns:
        The new state, or ``state`` itself when there is nothing to undo or
        the game has ended
    """
    if not can_undo(state):
        debug.debug("Nothing to undo", "history")
        return state

    move = state.history[-1]
    debug.debug(f"Undoing {move.mover} at ({move.row}, {move.col})", "history")

    # The turn goes back to move.mover through derivation from history.
    return replace(
        state,
        board=state.board.clear(move.row, move.col),
        status=GameStatus.IN_PROGRESS,
        winner=None,
        winning_line=(),
        history=state.history[:-1],
        undone=state.undone + (move,),
    )


def redo(state: GameState) -> GameState:
    """
    Replay the most recently undone move.

    Args:
        state: Current game state

    Returns:
        The new state, or ``state`` itself when nothing was undone or the game
        has ended
    """
    if not can_redo(state):
        debug.debug("Nothing to redo", "history")
        return state

    move = state.undone[-1]
    debug.debug(f"Redoing {move.mover} at ({move.row}, {move.col})", "history")
    return state.advance(move, undone=state.undone[:-1])
