"""
column.py - Validated column reference

A Column can only be built from an index inside [0, COLUMNS), so code that
receives one never has to re-check the horizontal bounds.
"""

import operator
from typing import List

from connect4_rules.debug import debug
from connect4_rules.errors import IllegalColumnIndex
from connect4_rules.utils import COLUMNS


class Column:
    """Immutable, range-checked column index."""

    __slots__ = ("_index",)

    def __init__(self, index: int):
        """
        Args:
            index: Column number, 0-indexed from the left

        Raises:
            IllegalColumnIndex: if index is outside [0, COLUMNS)
            TypeError: if index is not an integer
        """
        index = operator.index(index)
        if not 0 <= index < COLUMNS:
            debug.debug(f"Rejected column index {index}", "column")
            raise IllegalColumnIndex(index, COLUMNS)
        object.__setattr__(self, "_index", index)

    def __setattr__(self, name, value):
        raise AttributeError("Column is immutable")

    @property
    def index(self) -> int:
        return self._index

    def __index__(self) -> int:
        return self._index

    def __int__(self) -> int:
        return self._index

    def __eq__(self, other):
        if isinstance(other, Column):
            return self._index == other._index
        return NotImplemented

    def __hash__(self):
        return hash((Column, self._index))

    def __repr__(self):
        return f"Column({self._index})"

    @classmethod
    def all(cls) -> List['Column']:
        """Every column of the board, left to right."""
        return [cls(i) for i in range(COLUMNS)]
