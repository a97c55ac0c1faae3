"""Tests for constants, enums and coordinate helpers."""

import pytest

from connect4_rules.errors import IndexOutOfRange
from connect4_rules.utils import (BOARD_DIMENSION, COLUMNS, ROWS, Pawn,
                                  render_board_ascii, to_index, to_position)


def test_board_dimension():
    assert (COLUMNS, ROWS) == (7, 6)
    assert BOARD_DIMENSION == 42


def test_pawn_values_and_other():
    assert (Pawn.RED, Pawn.YELLOW, Pawn.EMPTY) == (1, -1, 0)
    assert Pawn.RED.other() == Pawn.YELLOW
    assert Pawn.YELLOW.other() == Pawn.RED
    assert Pawn.EMPTY.other() == Pawn.EMPTY
    assert [str(p) for p in Pawn] == ["X", "O", " "]


def test_index_mapping_is_row_major_bottom_first():
    assert to_index(0, 0) == 0
    assert to_index(6, 0) == 6
    assert to_index(0, 1) == COLUMNS
    assert to_index(6, 5) == BOARD_DIMENSION - 1
    for index in range(BOARD_DIMENSION):
        assert to_index(*to_position(index)) == index


@pytest.mark.parametrize("column,row", [(-1, 0), (7, 0), (0, 6), (3, -2)])
def test_to_index_rejects_off_board(column, row):
    with pytest.raises(IndexOutOfRange):
        to_index(column, row)


def test_render_empty_board():
    lines = render_board_ascii([0] * BOARD_DIMENSION).splitlines()
    assert lines[0] == lines[ROWS + 1] == "|-------------|"
    assert all(line == "|             |" for line in lines[1:ROWS + 1])
