"""Tests for the logging manager."""

import logging

import pytest

from connectfour.debug import LOGGER_NAME, DebugLevel, DebugManager, debug


@pytest.fixture
def manager():
    previous = debug.level
    yield DebugManager(level=DebugLevel.INFO)
    # Managers share the package logger; put the singleton's level back
    debug.configure(level=previous)


class TestDebugManager:
    def test_component_tag(self, manager, caplog):
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            manager.info("hello", "board")
        assert "[board] hello" in caplog.messages

    def test_level_filter(self, manager, caplog):
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            manager.debug("too detailed", "board")
            manager.warning("shown", "board")
        assert caplog.messages == ["[board] shown"]

    def test_component_filter(self, manager, caplog):
        manager.configure(components=["rules"])
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            manager.info("skipped", "board")
            manager.info("kept", "rules")
        assert caplog.messages == ["[rules] kept"]

    def test_none_level_silences_everything(self, manager, caplog):
        manager.set_from_string("none")
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            manager.error("quiet")
        assert caplog.messages == []

    def test_set_from_string(self, manager):
        manager.set_from_string("Trace")
        assert manager.level == DebugLevel.TRACE

    def test_unknown_level_keeps_current(self, manager):
        manager.set_from_string("loud")
        assert manager.level == DebugLevel.INFO

    def test_timer(self, manager):
        manager.start_timer("work")
        assert manager.end_timer("work") >= 0
        assert manager.end_timer("work") is None

    def test_log_file(self, manager, tmp_path):
        path = tmp_path / "game.log"
        manager.configure(log_file=str(path))
        manager.warning("written", "session")
        manager.configure(log_file="")
        assert "[session] written" in path.read_text()
