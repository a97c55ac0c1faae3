"""
board.py - Board representation and gravity insertion for Connect Four

This module implements the Board class: a fixed flat array of cells,
the drop-a-pawn operation, and the queries the game loop and the console
driver need.
"""

import operator
from typing import List, Optional, Tuple

import numpy as np

from connect4_rules.debug import debug
from connect4_rules.errors import ColumnFull
from connect4_rules.game.column import Column
from connect4_rules.game.rules import evaluate_endgame, winning_line
from connect4_rules.utils import (COLUMNS, ROWS, BOARD_DIMENSION, Pawn, Endgame,
                                  to_index, to_position, render_board_ascii)


class Board:
    """
    Represents a Connect Four game board.

    Cells live in one array indexed by ``column + row * COLUMNS`` with row 0
    at the bottom. Pawns are only ever added, never moved or removed, and
    every column is filled contiguously from row 0 upward.
    """

    def __init__(self):
        """Initialize an empty board."""
        debug.debug("Initializing new Board", "board")
        self._cells = np.full(BOARD_DIMENSION, Pawn.EMPTY.value, dtype=np.int8)
        self._last_index: Optional[int] = None

    def full(self) -> bool:
        """True when no cell is empty."""
        return bool(np.all(self._cells != Pawn.EMPTY.value))

    def get_pawn_at_position(self, column: int, row: int) -> Pawn:
        """
        Read one cell.

        Args:
            column: Column index (an int or a Column)
            row: Row index, 0 is the bottom row

        Raises:
            IndexOutOfRange: if the coordinates are off the board
        """
        index = to_index(operator.index(column), operator.index(row))
        return Pawn(int(self._cells[index]))

    def add_pawn(self, color: Pawn, column: Column) -> Endgame:
        """
        Drop a pawn into a column and report the outcome of the move.

        Args:
            color: Pawn.RED or Pawn.YELLOW
            column: Target column; a plain int is validated into a Column

        Returns:
            The Endgame for the move just played

        Raises:
            ValueError: if color is not Red or Yellow
            IllegalColumnIndex: if a plain int column is off the board
            ColumnFull: if the column has no empty cell; the board is unchanged
        """
        color = Pawn(color)
        if color == Pawn.EMPTY:
            raise ValueError("Cannot add an empty pawn")
        if not isinstance(column, Column):
            column = Column(column)

        index = self._landing_index(column)
        self._cells[index] = color.value
        self._last_index = index
        debug.trace(f"Placed {color.name} at {to_position(index)}", "board")

        debug.start_timer("win_check")
        result = evaluate_endgame(self._cells, index)
        debug.end_timer("win_check", "board")

        if result.is_win():
            debug.info(f"{color.name} wins after move at {to_position(index)}", "board")
        return result

    def _landing_index(self, column: Column) -> int:
        """Walk up from row 0 to the first empty cell of the column."""
        index = column.index
        for _ in range(ROWS):
            if self._cells[index] == Pawn.EMPTY.value:
                return index
            index += COLUMNS

        debug.debug(f"Invalid move: column {column.index} is full", "board")
        raise ColumnFull(column.index)

    def column_height(self, column: int) -> int:
        """
        Number of pawns in a column.

        Raises:
            IllegalColumnIndex: if column is off the board
        """
        c = Column(column).index
        return int(np.count_nonzero(self._cells[c::COLUMNS]))

    def valid_columns(self) -> List[Column]:
        """Columns that can still take a pawn."""
        top = (ROWS - 1) * COLUMNS
        return [c for c in Column.all() if self._cells[top + c.index] == Pawn.EMPTY.value]

    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        """(column, row) of the last pawn placed, or None on an empty board."""
        if self._last_index is None:
            return None
        return to_position(self._last_index)

    def get_winning_line(self) -> List[Tuple[int, int]]:
        """
        Cells of the line completed by the last move.

        Returns:
            List of (column, row) positions, or an empty list if the last
            move did not win
        """
        if self._last_index is None:
            return []
        return winning_line(self._cells, self._last_index)

    def get_state(self) -> np.ndarray:
        """
        Get the cells as a (ROWS, COLUMNS) array, bottom row first.

        Returns:
            A copy; changing it does not affect the board
        """
        return self._cells.reshape(ROWS, COLUMNS).copy()

    def render(self) -> str:
        """Render the board as a string, top row first."""
        return render_board_ascii(self._cells)

    def __str__(self) -> str:
        return self.render()
