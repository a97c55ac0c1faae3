"""
connect4_rules.interfaces - Console interfaces for Connect Four

This package contains the command-line driver that plays or replays games
on top of the rules engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
