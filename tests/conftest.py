import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.game.rules import new_game


@pytest.fixture(autouse=True)
def reset_debug():
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")


@pytest.fixture
def engine():
    return new_game("A", "B")


@pytest.fixture
def play():
    """Apply a sequence of columns to an engine and return every result."""
    def _play(engine, columns):
        return [engine.apply_move(column) for column in columns]
    return _play
