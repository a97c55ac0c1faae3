"""
connect4_rules - Rules engine for Connect Four

This package provides the board representation, gravity-based pawn
insertion and four-in-a-row endgame detection, plus a small console
driver for playing or replaying games.
"""

# Version number
__version__ = '0.1.0'
