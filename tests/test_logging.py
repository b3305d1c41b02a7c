"""
Module: test_logging.py

Author: Michael Economou
Date: 2026-03-02

Tests the logging setup:
- Cached loggers are reused per name
- Activity logs (info) and error logs go to separate files
- Name-filtered handlers only see their own logger
- Dev-only records are hidden from the console
"""

import logging

import pytest

from listboard.app.services.list_view_model import ListViewModel
from listboard.utils.logging.init_logging import init_logging
from listboard.utils.logging.logger_factory import LoggerFactory, get_cached_logger
from listboard.utils.logging.logger_file_helper import add_file_handler
from listboard.utils.logging.logger_helper import DevOnlyFilter, safe_text


@pytest.fixture
def clean_root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def _read(path):
    for handler in logging.getLogger().handlers:
        handler.flush()
    return path.read_text(encoding="utf-8") if path.exists() else ""


class TestLoggerFactory:
    """Test cached logger creation."""

    def test_same_name_returns_same_logger(self):
        """Test the cache hands out one logger per name."""
        first = get_cached_logger("listboard.tests.cache")
        second = LoggerFactory.get_logger("listboard.tests.cache")

        assert first is second

    def test_logger_propagates(self):
        """Test cached loggers rely on root handlers."""
        logger = get_cached_logger("listboard.tests.propagate")

        assert logger.propagate is True
        assert logger.handlers == []


class TestInitLogging:
    """Test file handler wiring."""

    def test_activity_and_error_files(self, tmp_path, clean_root_logger):
        """Test info goes to activity only, errors go to both files."""
        init_logging("listboard", log_dir=str(tmp_path))
        logger = get_cached_logger("listboard.tests.files")

        logger.info("[TEST] activity line")
        logger.error("[TEST] error line")

        activity = _read(tmp_path / "listboard_activity.log")
        errors = _read(tmp_path / "listboard_errors.log")
        assert "[TEST] activity line" in activity
        assert "[TEST] error line" in activity
        assert "[TEST] error line" in errors
        assert "[TEST] activity line" not in errors

    def test_statistics_file_gets_only_statistics(self, tmp_path, clean_root_logger):
        """Test the statistics log holds popup lines and nothing else."""
        init_logging("listboard", log_dir=str(tmp_path))
        view_model = ListViewModel()

        get_cached_logger("listboard.tests.other").info("[TEST] unrelated line")
        view_model.show_statistics()

        statistics = _read(tmp_path / "listboard_statistics.log")
        assert "Statistics generated: List 1 (4 items)" in statistics
        assert "[TEST] unrelated line" not in statistics
        assert "Statistics generated" in _read(tmp_path / "listboard_activity.log")

    def test_filter_by_name(self, tmp_path):
        """Test a name-filtered handler ignores child loggers."""
        stats_logger = logging.getLogger("statistics")
        old_propagate = stats_logger.propagate
        old_level = stats_logger.level
        stats_logger.propagate = False
        handler = add_file_handler(
            stats_logger, str(tmp_path / "stats.log"), level=logging.INFO, filter_by_name="statistics"
        )
        try:
            stats_logger.setLevel(logging.INFO)
            stats_logger.info("kept")
            logging.getLogger("statistics.child").info("dropped")
            handler.flush()
        finally:
            stats_logger.removeHandler(handler)
            handler.close()
            stats_logger.propagate = old_propagate
            stats_logger.setLevel(old_level)

        content = (tmp_path / "stats.log").read_text(encoding="utf-8")
        assert "kept" in content
        assert "dropped" not in content


class TestLoggerHelpers:
    """Test filters and text helpers."""

    def test_dev_only_filter(self):
        """Test dev-only records are dropped unless enabled."""
        record = logging.LogRecord("x", logging.DEBUG, __file__, 1, "msg", None, None)
        record.dev_only = True

        assert DevOnlyFilter(show_dev_only=False).filter(record) is False
        assert DevOnlyFilter(show_dev_only=True).filter(record) is True

    def test_plain_record_passes_dev_only_filter(self):
        """Test normal records are not affected."""
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        assert DevOnlyFilter(show_dev_only=False).filter(record) is True

    def test_safe_text(self):
        """Test problematic characters are replaced."""
        assert safe_text("List 1 → 4 items…") == "List 1 -> 4 items..."
