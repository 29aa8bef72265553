"""
sixfour.game - Core game mechanics for sixfour

This package contains the board representation, win detection, move
application and undo/redo history.
"""

from sixfour.game.board import Board
from sixfour.game.state import GameState, Move
from sixfour.game.winner import WinResult, detect, get_winner
from sixfour.game.history import undo, redo
from sixfour.game.rules import (SixFourGame, apply_move, available_moves,
                                create_game, is_valid_move)

__all__ = ['Board', 'GameState', 'Move', 'WinResult', 'SixFourGame',
           'apply_move', 'available_moves', 'create_game', 'detect',
           'get_winner', 'is_valid_move', 'redo', 'undo']
