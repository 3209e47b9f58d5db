"""
Unit tests for gridmaze.utils.maze_logging.
"""

import logging
import os

import pytest

import numpy as np

from gridmaze.utils.maze_logging import (
    LoggedOperation,
    MazeFormatter,
    MazeLogger,
    configure_development_logging,
    configure_logging,
    configure_production_logging,
    get_logger,
    log_generation_summary,
    log_path_summary,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default configuration after each test."""
    yield
    configure_logging()


@pytest.fixture
def captured(caplog):
    """Attach caplog to a logger that does not propagate."""
    logger = get_logger("gridmaze.tests.logging")
    logger.addHandler(caplog.handler)
    yield logger
    logger.removeHandler(caplog.handler)


class TestLoggerRegistry:
    def test_same_name_same_logger(self):
        assert get_logger("gridmaze.a") is get_logger("gridmaze.a")

    def test_default_name_is_calling_module(self):
        assert get_logger().name == __name__

    def test_default_level_is_warning(self):
        logger = get_logger("gridmaze.tests.default_level")
        assert logger.level == logging.WARNING

    def test_single_console_handler(self):
        logger = get_logger("gridmaze.tests.handlers")
        configure_logging(level="INFO")
        configure_logging(level="DEBUG")

        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_configure_updates_existing_loggers(self):
        logger = get_logger("gridmaze.tests.reconfigure")

        configure_logging(level="DEBUG")
        assert logger.level == logging.DEBUG

        configure_logging(level=logging.ERROR)
        assert logger.level == logging.ERROR

    def test_singleton(self):
        assert MazeLogger() is MazeLogger()


class TestConfigurations:
    def test_development_logging(self):
        configure_development_logging()
        assert get_logger("gridmaze.tests.dev").level == logging.DEBUG

    def test_production_logging_writes_file(self, tmp_path):
        log_file = tmp_path / "logs" / "maze.log"

        returned = configure_production_logging(log_file)
        logger = get_logger("gridmaze.tests.production")
        logger.warning("written to file")
        logger.info("filtered out")
        for handler in logger.handlers:
            handler.flush()

        assert returned == str(log_file)
        text = log_file.read_text()
        assert "written to file" in text
        assert "filtered out" not in text

    def test_log_to_file(self, tmp_path):
        log_file = tmp_path / "debug.log"
        configure_logging(level="DEBUG", log_to_file=True, log_file_path=log_file, use_colors=False)

        logger = get_logger("gridmaze.tests.file")

        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)


class TestFormatter:
    def _record(self, level=logging.WARNING):
        return logging.LogRecord("gridmaze.x", level, __file__, 10, "hello", None, None)

    def test_plain(self):
        text = MazeFormatter(use_colors=False).format(self._record())

        assert "hello" in text
        assert "WARNING" in text
        assert "\x1b[" not in text

    @pytest.mark.skipif("NO_COLOR" in os.environ, reason="colorlog honours NO_COLOR")
    def test_colors(self):
        text = MazeFormatter(use_colors=True).format(self._record())
        assert "\x1b[" in text

    def test_location(self):
        text = MazeFormatter(include_location=True).format(self._record())
        assert "test_logging.py:10" in text


class TestStructuredHelpers:
    def test_generation_summary(self, captured, caplog):
        captured.setLevel(logging.DEBUG)
        caplog.set_level(logging.DEBUG)
        grid = np.array([[1, 1, 1], [0, 0, 1], [1, 1, 1]], dtype=np.uint8)

        log_generation_summary(captured, "Kruskal", 3, 3, 42, grid)

        assert "Kruskal: 3x3 seed=42 - 7/9 floor cells (77.8%)" in caplog.text

    def test_path_summary(self, captured, caplog):
        captured.setLevel(logging.DEBUG)
        caplog.set_level(logging.DEBUG)

        log_path_summary(captured, (0, 0), (4, 4), 9, {"algorithm": "bfs"})
        log_path_summary(captured, (0, 0), (4, 4), 0)

        assert "Path (0, 0) -> (4, 4): 9 cells - algorithm: bfs" in caplog.text
        assert "not reachable" in caplog.text


class TestLoggedOperation:
    def test_duration(self, captured, caplog):
        captured.setLevel(logging.INFO)

        with LoggedOperation(captured, "carving") as operation:
            pass

        assert operation.duration is not None
        assert operation.duration >= 0.0
        assert "Starting carving" in caplog.text
        assert "Completed carving" in caplog.text

    def test_failure_is_logged_and_raised(self, captured, caplog):
        with pytest.raises(RuntimeError), LoggedOperation(captured, "carving"):
            raise RuntimeError("boom")

        assert "Failed carving" in caplog.text
