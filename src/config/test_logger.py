"""
Unit tests for logger_module.py.

Tests cover:
- The silent default of the woosmap logger
- initialize_logger handlers, levels and idempotency
- set_log_file redirection
- Convenience logging methods
"""

import logging
from unittest.mock import patch

import pytest

from . import logger_module
from .logger_module import (
    LOGGER_NAME,
    get_logger,
    initialize_logger,
    log_debug,
    log_error,
    log_info,
    log_warning,
    set_log_file,
)


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the woosmap logger to its import-time state around each test."""
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level

    yield logger

    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
    logger_module._logger_initialized = False


def flush(logger):
    for handler in logger.handlers:
        handler.flush()


class TestDefaults:
    """Test the logger before any initialization."""

    def test_named_logger(self):
        assert get_logger() is logging.getLogger("woosmap")

    def test_silent_by_default(self):
        handler_types = [type(h) for h in get_logger().handlers]
        assert logging.NullHandler in handler_types

    def test_convenience_methods_before_initialization(self):
        # Must not raise nor complain about missing handlers
        log_warning("Warning without initialization")


class TestInitializeLogger:
    """Test cases for initialize_logger function."""

    def test_console_only(self, reset_logger):
        initialize_logger()

        assert reset_logger.level == logging.INFO
        assert len(reset_logger.handlers) == 1
        assert type(reset_logger.handlers[0]) is logging.StreamHandler

    def test_with_file(self, reset_logger, tmp_path):
        log_file = tmp_path / "logs" / "woosmap.log"

        initialize_logger(log_level="DEBUG", log_file=str(log_file))

        assert reset_logger.level == logging.DEBUG
        assert len(reset_logger.handlers) == 2
        assert log_file.exists()

        file_handler = next(h for h in reset_logger.handlers if isinstance(h, logging.FileHandler))
        assert file_handler.level == logging.DEBUG

    def test_invalid_level_defaults_to_info(self, reset_logger):
        initialize_logger(log_level="INVALID")
        assert reset_logger.level == logging.INFO

    def test_idempotency(self, reset_logger, tmp_path):
        log_file = tmp_path / "woosmap.log"

        initialize_logger(log_file=str(log_file))
        initialize_logger(log_file=str(log_file))
        initialize_logger(log_level="DEBUG", log_file=str(log_file))

        assert len(reset_logger.handlers) == 2
        assert reset_logger.level == logging.INFO

    def test_formatters(self, reset_logger, tmp_path):
        initialize_logger(log_file=str(tmp_path / "woosmap.log"))

        for handler in reset_logger.handlers:
            format_string = handler.formatter._fmt
            assert "%(asctime)s" in format_string
            assert "%(levelname)s" in format_string
            assert "%(message)s" in format_string


class TestSetLogFile:
    """Test cases for set_log_file."""

    def test_redirects_output(self, reset_logger, tmp_path):
        log_file = tmp_path / "woosmap.log"

        set_log_file(str(log_file))
        log_debug("url before possible signing: https://api.woosmap.com/")
        flush(reset_logger)

        assert len(reset_logger.handlers) == 1
        assert "url before possible signing" in log_file.read_text()

    def test_replaces_previous_file(self, reset_logger, tmp_path):
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"

        set_log_file(str(first))
        set_log_file(str(second))
        log_error("Test error message")
        flush(reset_logger)

        assert "Test error message" not in first.read_text()
        assert "Test error message" in second.read_text()

    def test_respects_configured_level(self, reset_logger, tmp_path):
        log_file = tmp_path / "woosmap.log"
        reset_logger.setLevel(logging.WARNING)

        set_log_file(str(log_file))
        log_info("Info message")
        log_warning("Warning message")
        flush(reset_logger)

        content = log_file.read_text()
        assert "Info message" not in content
        assert "Warning message" in content


class TestConvenienceMethods:
    """Test cases for convenience logging methods."""

    def test_messages_written_to_file(self, reset_logger, tmp_path):
        log_file = tmp_path / "woosmap.log"
        initialize_logger(log_level="DEBUG", log_file=str(log_file))

        log_debug("Test debug message")
        log_info("Test info message")
        log_warning("Test warning message")
        log_error("Test error message")
        flush(reset_logger)

        content = log_file.read_text()
        assert "DEBUG" in content and "Test debug message" in content
        assert "INFO" in content and "Test info message" in content
        assert "WARNING" in content and "Test warning message" in content
        assert "ERROR" in content and "Test error message" in content

    def test_convenience_methods_call_correct_levels(self):
        with patch.object(logger_module, "_logger") as mock_logger:
            log_debug("debug message")
            log_info("info message")
            log_warning("warning message")
            log_error("error message")

        mock_logger.debug.assert_called_once_with("debug message")
        mock_logger.info.assert_called_once_with("info message")
        mock_logger.warning.assert_called_once_with("warning message")
        mock_logger.error.assert_called_once_with("error message")

    def test_propagates_to_caplog(self, caplog):
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            log_info("visible to the application")

        assert "visible to the application" in caplog.text
