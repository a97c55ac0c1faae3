"""
rules.py - Endgame detection for Connect Four

Every check works on the flat cell array of a Board. A window is CONNECT_N
cells described by a start index and a stride; its sum is +CONNECT_N for a
Red line, -CONNECT_N for a Yellow line, and anything else otherwise.

Strides used:
    vertical        COLUMNS
    horizontal      1
    diagonal up     COLUMNS + 1  (bottom-left to top-right)
    diagonal down   COLUMNS - 1  (top-left to bottom-right)

Windows are generated from (column, row) start cells bounded on both axes,
so a stride never carries a window across the edge of a row.
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np

from connect4_rules.debug import debug
from connect4_rules.utils import (COLUMNS, ROWS, CONNECT_N, Endgame,
                                  to_position)

Window = Tuple[int, int]  # (start index, stride)

VERTICAL = COLUMNS
HORIZONTAL = 1
DIAGONAL_UP = COLUMNS + 1
DIAGONAL_DOWN = COLUMNS - 1


def window_sum(cells: np.ndarray, start: int, stride: int) -> int:
    """Sum CONNECT_N cells starting at ``start`` with the given stride."""
    return int(cells[start:start + CONNECT_N * stride:stride].sum())


def window_indices(start: int, stride: int) -> List[int]:
    return [start + k * stride for k in range(CONNECT_N)]


def column_windows(column: int) -> Iterator[Window]:
    """All vertical windows of a column, bottom band first."""
    for row in range(ROWS - CONNECT_N + 1):
        yield column + row * COLUMNS, VERTICAL


def row_windows(row: int) -> Iterator[Window]:
    """All horizontal windows lying fully inside a row."""
    for column in range(COLUMNS - CONNECT_N + 1):
        yield column + row * COLUMNS, HORIZONTAL


def diagonal_up_windows(index: int) -> Iterator[Window]:
    """Bottom-left to top-right windows that pass through ``index``."""
    column, row = to_position(index)
    for k in range(CONNECT_N):
        start_column, start_row = column - k, row - k
        if start_column < 0 or start_row < 0:
            break
        if start_column + CONNECT_N - 1 >= COLUMNS or start_row + CONNECT_N - 1 >= ROWS:
            continue
        yield start_column + start_row * COLUMNS, DIAGONAL_UP


def diagonal_down_windows() -> Iterator[Window]:
    """Every top-left to bottom-right window on the board.

    Each window is walked from its lower-right cell upward to the left.
    """
    for row in range(ROWS - CONNECT_N + 1):
        for column in range(CONNECT_N - 1, COLUMNS):
            yield column + row * COLUMNS, DIAGONAL_DOWN


def _first_win(cells: np.ndarray, windows: Iterator[Window]) -> Tuple[Endgame, Optional[Window]]:
    for start, stride in windows:
        result = Endgame.from_sum(window_sum(cells, start, stride))
        if result.is_win():
            return result, (start, stride)
    return Endgame.NOT_WIN, None


def check_column(cells: np.ndarray, column: int) -> Endgame:
    return _first_win(cells, column_windows(column))[0]


def check_row(cells: np.ndarray, row: int) -> Endgame:
    return _first_win(cells, row_windows(row))[0]


def check_diagonal_up(cells: np.ndarray, index: int) -> Endgame:
    return _first_win(cells, diagonal_up_windows(index))[0]


def check_diagonal_down(cells: np.ndarray) -> Endgame:
    return _first_win(cells, diagonal_down_windows())[0]


def _windows_for_move(index: int) -> Iterator[Iterator[Window]]:
    # Order: column, row, diagonal up, diagonal down
    column, row = to_position(index)
    yield column_windows(column)
    yield row_windows(row)
    yield diagonal_up_windows(index)
    yield diagonal_down_windows()


def find_win(cells: np.ndarray, index: int) -> Tuple[Endgame, Optional[Window]]:
    """
    Look for a completed line after the pawn at ``index`` was placed.

    The column, row and diagonal-up checks only see lines through ``index``.
    The diagonal-down check scans the whole board, so on a board where play
    went on after a win it can report that earlier diagonal-down line even
    though ``index`` is not part of it. Older lines in the other three
    orientations are not reported again.

    Args:
        cells: Flat cell array of the board
        index: Flat index of the cell just written

    Returns:
        The outcome and the winning window, or (NOT_WIN, None)
    """
    for windows in _windows_for_move(index):
        result, window = _first_win(cells, windows)
        if result.is_win():
            debug.debug(f"{result.name} on window start={window[0]} stride={window[1]}", "rules")
            return result, window
    return Endgame.NOT_WIN, None


def evaluate_endgame(cells: np.ndarray, index: int) -> Endgame:
    """Outcome of the move that wrote the cell at ``index``."""
    return find_win(cells, index)[0]


def winning_line(cells: np.ndarray, index: int) -> List[Tuple[int, int]]:
    """(column, row) cells of the line completed by the move at ``index``, if any."""
    _, window = find_win(cells, index)
    if window is None:
        return []
    return [to_position(i) for i in window_indices(*window)]
