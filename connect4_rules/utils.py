"""
utils.py - Constants, enumerations and helpers for the Connect Four rules engine

The board is stored as one flat sequence of cells indexed by
``column + row * COLUMNS`` with row 0 at the bottom. Cell values are signed
so that four cells of one colour sum to +CONNECT_N (Red) or -CONNECT_N (Yellow).
"""

from enum import Enum, IntEnum
from typing import Optional, Sequence, Tuple

from connect4_rules.errors import IndexOutOfRange

# Board geometry
COLUMNS = 7
ROWS = 6
CONNECT_N = 4  # Number of pieces in a line to win
BOARD_DIMENSION = COLUMNS * ROWS


class Pawn(IntEnum):
    """State of one cell; the integer value is what the win checks sum."""
    RED = 1
    YELLOW = -1
    EMPTY = 0

    def other(self) -> 'Pawn':
        """Get the opposing colour."""
        if self == Pawn.RED:
            return Pawn.YELLOW
        if self == Pawn.YELLOW:
            return Pawn.RED
        return Pawn.EMPTY

    def __str__(self):
        if self == Pawn.RED:
            return "X"
        if self == Pawn.YELLOW:
            return "O"
        return " "


class Endgame(Enum):
    """Outcome of a move."""
    NOT_WIN = "not_win"
    RED_WIN = "red_win"
    YELLOW_WIN = "yellow_win"

    def is_win(self) -> bool:
        return self != Endgame.NOT_WIN

    @property
    def winner(self) -> Optional[Pawn]:
        if self == Endgame.RED_WIN:
            return Pawn.RED
        if self == Endgame.YELLOW_WIN:
            return Pawn.YELLOW
        return None

    @classmethod
    def from_sum(cls, total: int) -> 'Endgame':
        """Map a window sum onto an outcome: +N is Red, -N is Yellow."""
        if total == CONNECT_N * Pawn.RED:
            return cls.RED_WIN
        if total == CONNECT_N * Pawn.YELLOW:
            return cls.YELLOW_WIN
        return cls.NOT_WIN


def is_valid_position(column: int, row: int) -> bool:
    """Check whether (column, row) lies on the board."""
    return 0 <= column < COLUMNS and 0 <= row < ROWS


def to_index(column: int, row: int) -> int:
    """
    Convert board coordinates to a flat cell index.

    Raises:
        IndexOutOfRange: if the coordinates are off the board
    """
    if not is_valid_position(column, row):
        raise IndexOutOfRange(column, row)
    return column + row * COLUMNS


def to_position(index: int) -> Tuple[int, int]:
    """Inverse of to_index: flat index to (column, row)."""
    return index % COLUMNS, index // COLUMNS


def render_board_ascii(cells: Sequence[int]) -> str:
    """
    Render a flat cell sequence as ASCII art, top row first.

    Args:
        cells: BOARD_DIMENSION cell values

    Returns:
        ASCII representation of the board
    """
    border = "|" + "-" * (COLUMNS * 2 - 1) + "|"
    lines = [border]

    for row in range(ROWS - 1, -1, -1):
        start = row * COLUMNS
        lines.append("|" + " ".join(str(Pawn(int(v))) for v in cells[start:start + COLUMNS]) + "|")

    lines.append(border)
    lines.append("|" + " ".join(str(c) for c in range(COLUMNS)) + "|")
    return "\n".join(lines)
