"""
sixfour - 4-in-a-row on a 6x6 grid

This package provides the game engine: an immutable board, win and draw
detection, move application with linear undo/redo, and a computer opponent
with easy, medium and hard difficulty tiers.
"""

# Version number
__version__ = '0.1.0'

from sixfour.utils import (Difficulty, GameStatus, NoLegalMoveError, Player,
                           SixFourError, UnknownDifficultyError)
from sixfour.game import (Board, GameState, Move, SixFourGame, WinResult,
                          apply_move, create_game, get_winner, is_valid_move,
                          redo, undo)
from sixfour.ai import AIConfig, choose_move

__all__ = ['AIConfig', 'Board', 'Difficulty', 'GameState', 'GameStatus', 'Move',
           'NoLegalMoveError', 'Player', 'SixFourError', 'SixFourGame',
           'UnknownDifficultyError', 'WinResult', 'apply_move', 'choose_move',
           'create_game', 'get_winner', 'is_valid_move', 'redo', 'undo']
