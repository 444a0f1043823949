"""Unit tests for DebugLog."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from k4a.utils.debug_log import DebugLog

LOGGER_NAME = "k4a.tests.debuglog"
LINE_PATTERN = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}\] ")


class TestDebugLog:
    def test_disabled_creates_nothing(self, tmp_path: Path) -> None:
        path = tmp_path / "logs" / "debug.log"
        with DebugLog(enabled=False, path=path, logger_name=LOGGER_NAME) as debug_log:
            assert not debug_log.is_open
            logging.getLogger(LOGGER_NAME).debug("ignored")
        assert not path.exists()

    def test_writes_session_markers_and_messages(self, tmp_path: Path) -> None:
        path = tmp_path / "logs" / "debug.log"
        debug_log = DebugLog(enabled=True, path=path, logger_name=LOGGER_NAME)
        debug_log.open()
        assert debug_log.is_open
        logging.getLogger(f"{LOGGER_NAME}.child").debug("Cache hit for topics")
        debug_log.close()

        lines = path.read_text().splitlines()
        assert "=== k4a debug session started ===" in lines[0]
        assert "=== k4a debug session ended ===" in lines[-1]
        assert any("Cache hit for topics" in line for line in lines)
        assert all(LINE_PATTERN.match(line) for line in lines)

    def test_close_detaches_handler(self, tmp_path: Path) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        handlers_before = list(logger.handlers)
        level_before = logger.level
        with DebugLog(enabled=True, path=tmp_path / "debug.log", logger_name=LOGGER_NAME):
            assert len(logger.handlers) == len(handlers_before) + 1
        assert logger.handlers == handlers_before
        assert logger.level == level_before

    def test_appends_across_sessions(self, tmp_path: Path) -> None:
        path = tmp_path / "debug.log"
        for _ in range(2):
            with DebugLog(enabled=True, path=path, logger_name=LOGGER_NAME):
                pass
        assert path.read_text().count("session started") == 2

    def test_open_twice_is_noop(self, tmp_path: Path) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        debug_log = DebugLog(enabled=True, path=tmp_path / "debug.log", logger_name=LOGGER_NAME)
        debug_log.open()
        count = len(logger.handlers)
        debug_log.open()
        assert len(logger.handlers) == count
        debug_log.close()
