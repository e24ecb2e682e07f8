import logging

import pytest

from connectfour.debug import DebugLevel, TRACE, debug


@pytest.fixture
def records(caplog):
    caplog.set_level(TRACE, logger="connectfour")
    # caplog.records is replaced between setup and call phases, so collect
    # into a list owned by this fixture instead.
    collected = []

    class _ListHandler(logging.Handler):
        def emit(self, record):
            collected.append(record)

    handler = _ListHandler(level=0)
    debug.logger.addHandler(handler)
    yield collected
    debug.logger.removeHandler(handler)


def test_level_filters_messages(records):
    debug.configure(level=DebugLevel.INFO)
    debug.debug("hidden", "game")
    debug.info("shown", "game")
    assert [r.getMessage() for r in records] == ["shown"]
    assert records[0].name == "connectfour.game"


def test_trace_level(records):
    debug.configure(level=DebugLevel.TRACE)
    debug.trace("fine detail", "board")
    assert records[-1].levelname == "TRACE"
    assert records[-1].levelno == TRACE


def test_component_filter(records):
    debug.configure(level=DebugLevel.DEBUG, components=["game"])
    debug.debug("from board", "board")
    debug.debug("from game", "game")
    assert [r.getMessage() for r in records] == ["from game"]


def test_disabled_and_none(records):
    debug.configure(level=DebugLevel.DEBUG, enabled=False)
    debug.error("nope")
    debug.configure(level=DebugLevel.NONE, enabled=True)
    debug.error("still nope")
    assert records == []


def test_set_from_string():
    assert debug.set_from_string("debug")
    assert debug.level == DebugLevel.DEBUG
    assert not debug.set_from_string("chatty")
    assert debug.level == DebugLevel.DEBUG


def test_timers():
    debug.start_timer("scan")
    elapsed = debug.end_timer("scan")
    assert elapsed is not None and elapsed >= 0
    assert debug.end_timer("scan") is None


def test_log_file(tmp_path):
    log_path = tmp_path / "engine.log"
    debug.configure(level=DebugLevel.INFO, log_file=str(log_path))
    debug.info("written to file", "game")
    debug.configure(log_file="")

    assert "written to file" in log_path.read_text()
    assert not any(isinstance(h, logging.FileHandler) for h in debug.logger.handlers)
