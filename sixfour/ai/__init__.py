"""
sixfour/ai/__init__.py - Computer opponent for sixfour

Easy plays randomly with an occasional heuristic move, medium follows an
ordered rule cascade, hard runs an alpha-beta minimax search.
"""

from sixfour.ai.base import AIConfig
from sixfour.ai.heuristic import heuristic_move
from sixfour.ai.minimax import MinimaxSearch, evaluate_position, minimax_move
from sixfour.ai.opponent import STRATEGIES, choose_move
from sixfour.ai.random_strategy import random_move

__all__ = ['AIConfig', 'MinimaxSearch', 'STRATEGIES', 'choose_move',
           'evaluate_position', 'heuristic_move', 'minimax_move', 'random_move']
