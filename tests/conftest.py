import pytest

from connect4_rules.debug import debug, DebugLevel
from connect4_rules.game.board import Board


@pytest.fixture(autouse=True)
def reset_debug():
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")


@pytest.fixture
def board():
    return Board()
