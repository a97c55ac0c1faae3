"""
connect4_rules.game - Core game mechanics for Connect Four

This package contains the board, the validated column reference and the
endgame checks.
"""

from connect4_rules.game.board import Board
from connect4_rules.game.column import Column
from connect4_rules.game.rules import evaluate_endgame

__all__ = ['Board', 'Column', 'evaluate_endgame']
