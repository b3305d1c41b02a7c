"""Module: logger_factory.py.

Author: Michael Economou
Date: 2026-03-02

Logger factory with caching.
Keeps a single logger instance per module name behind a lock.
"""

import logging
import threading

from listboard.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe logger factory with caching."""

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name: Logger name, typically ``__name__`` of the calling module

        Returns:
            Cached logger instance

        """
        name = name or "listboard"

        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = get_logger(name)
            return cls._loggers[name]


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience wrapper around ``LoggerFactory.get_logger``."""
    return LoggerFactory.get_logger(name)
