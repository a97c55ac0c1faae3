"""Tests for the validated column reference."""

import pytest

from connect4_rules.errors import Connect4Error, IllegalColumnIndex
from connect4_rules.game.column import Column
from connect4_rules.utils import COLUMNS


@pytest.mark.parametrize("index", range(COLUMNS))
def test_valid_indices(index):
    column = Column(index)
    assert column.index == index
    assert int(column) == index
    assert [10, 11, 12, 13, 14, 15, 16][column] == 10 + index


@pytest.mark.parametrize("index", [-1, COLUMNS, COLUMNS + 10])
def test_out_of_range_indices_are_rejected(index):
    with pytest.raises(IllegalColumnIndex) as exc_info:
        Column(index)
    assert exc_info.value.index == index
    assert exc_info.value.columns == COLUMNS
    assert isinstance(exc_info.value, Connect4Error)
    assert isinstance(exc_info.value, ValueError)


def test_non_integer_index_is_rejected():
    with pytest.raises(TypeError):
        Column(1.5)
    with pytest.raises(TypeError):
        Column("3")


def test_column_is_immutable():
    column = Column(2)
    with pytest.raises(AttributeError):
        column._index = 5
    assert column.index == 2


def test_equality_and_hashing():
    assert Column(3) == Column(3)
    assert Column(3) != Column(4)
    assert len({Column(1), Column(1), Column(2)}) == 2
    assert repr(Column(6)) == "Column(6)"


def test_all_lists_every_column():
    assert [c.index for c in Column.all()] == list(range(COLUMNS))
