"""
errors.py - Exceptions raised by the Connect Four rules engine

All of them signal caller misuse. The board is never left partially
modified when one is raised.
"""


class Connect4Error(Exception):
    """Base class for every error raised by the engine."""

    pass


class IllegalColumnIndex(Connect4Error, ValueError):
    """Raised when a column reference is built from an off-board index."""

    def __init__(self, index, columns):
        self.index = index
        self.columns = columns
        super().__init__(f"Column index {index} out of range [0, {columns})")


class ColumnFull(Connect4Error, ValueError):
    """Raised when a pawn is dropped into a column with no empty cell left."""

    def __init__(self, column):
        self.column = column
        super().__init__(f"Column {column} is full")


class IndexOutOfRange(Connect4Error, IndexError):
    """Raised when a cell is read at coordinates that are off the board."""

    def __init__(self, column, row):
        self.column = column
        self.row = row
        super().__init__(f"Position (column={column}, row={row}) is off the board")
