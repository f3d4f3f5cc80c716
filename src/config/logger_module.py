"""
Logging utilities for the Woosmap client.

All library output goes through the "woosmap" logger. It is silent until the
embedding application either configures logging itself or calls
initialize_logger / set_log_file.
"""

import logging
from pathlib import Path
from typing import Optional


LOGGER_NAME = "woosmap"

_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(logging.NullHandler())

# Flag to track if logger has been initialized to ensure idempotency
_logger_initialized = False


def get_logger() -> logging.Logger:
    """Return the library logger."""
    return _logger


def _file_handler(log_file: str) -> logging.FileHandler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    return handler


def initialize_logger(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Attach console (and optionally file) handlers to the woosmap logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file
    """
    global _logger_initialized

    if _logger_initialized:
        return

    _logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    _logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    _logger.addHandler(console_handler)

    if log_file:
        _logger.addHandler(_file_handler(log_file))

    _logger_initialized = True

    _logger.info(f"Logger initialized with level {log_level}, file: {log_file}")


def set_log_file(log_file: str) -> None:
    """
    Send all woosmap log output to a file, replacing existing handlers.

    Args:
        log_file: Path to log file
    """
    global _logger_initialized

    for handler in list(_logger.handlers):
        _logger.removeHandler(handler)
        handler.close()

    _logger.addHandler(_file_handler(log_file))
    if _logger.level == logging.NOTSET:
        _logger.setLevel(logging.DEBUG)
    _logger_initialized = True


def log_debug(message: str) -> None:
    """Log a debug message."""
    _logger.debug(message)


def log_info(message: str) -> None:
    """
    Log an info message.

    Args:
        message: Message to log
    """
    _logger.info(message)


def log_warning(message: str) -> None:
    """
    Log a warning message.

    Args:
        message: Message to log
    """
    _logger.warning(message)


def log_error(message: str) -> None:
    """
    Log an error message.

    Args:
        message: Message to log
    """
    _logger.error(message)
