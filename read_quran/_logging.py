"""
Structured logging utilities for read-quran.

Provides a configured logger and helper functions for consistent logging.
"""

import logging
import sys
from typing import Optional


# Default format for read-quran logs
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "read_quran"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (default: "read_quran")

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: int | str = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure logging for read-quran.

    Args:
        level: Logging level, as an int or a level name (default: INFO)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured root logger for read_quran
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            format_string or DEFAULT_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
        )
    )

    logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """Enable debug-level logging for read-quran."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Disable all read-quran logging."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


_logger = get_logger()


def log_fetch_start(url: str) -> None:
    """Log the start of an API request."""
    _logger.info(f"Fetching {url}")


def log_fetch_complete(url: str, size: int, preview: str = "") -> None:
    """Log a completed API request with a short preview of the body."""
    _logger.info(f"Fetched {url} ({size} bytes)")
    if preview:
        _logger.debug(f"Received: {preview[:200]}...")


def log_fetch_failed(url: str, error: Exception) -> None:
    """Log a failed fetch (network or decode)."""
    _logger.error(f"Fetch failed for {url}: {error}")


def log_navigation(chapter: int, verse_index: int) -> None:
    """Log cursor movement."""
    _logger.debug(f"Cursor at chapter {chapter}, verse index {verse_index}")


def log_warning(message: str, **context) -> None:
    """Log a warning with optional context."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.warning(f"{message} ({ctx_str})")
    else:
        _logger.warning(message)


def log_error(message: str, exc_info: bool = False, **context) -> None:
    """Log an error with optional context and exception info."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.error(f"{message} ({ctx_str})", exc_info=exc_info)
    else:
        _logger.error(message, exc_info=exc_info)
