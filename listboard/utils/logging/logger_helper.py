"""Module: logger_helper.py.

Author: Michael Economou
Date: 2026-03-02

Helpers for creating loggers that are safe to use from any console.

Functions:
    get_logger(name): Returns a propagating logger with Unicode-safe methods.
    safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
    safe_log(logger_func, message): Logs a message, falling back to ASCII if needed.

DevOnlyFilter:
    A logging filter that hides dev-only debug messages from the console,
    while still allowing them to reach file logs.
"""

import logging
import re
from functools import partial

from listboard.config import SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "→": "->",  # right arrow
    "—": "--",  # em dash
    "–": "-",  # en dash
    "…": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replace unsupported Unicode characters with ASCII-safe alternatives.

    Args:
        text: The original text

    Returns:
        The text with known problematic characters replaced

    """
    return _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)


def safe_log(logger_func, message: str, *args, **kwargs):
    """Log through ``logger_func``, retrying with ASCII-safe text on UnicodeEncodeError."""
    if not isinstance(message, str):
        message = repr(message)
    try:
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(message), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Replace the logger's level methods with safe_log-wrapped versions."""
    for method_name in ["debug", "info", "warning", "error", "critical"]:
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger that delegates output to the root logger.

    Args:
        name: Logger name, usually ``__name__`` of the calling module

    Returns:
        Configured and patched logger instance

    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(logging.DEBUG)

    # Root logger owns all handlers (console + files)
    logger.propagate = True
    if logger.hasHandlers():
        logger.handlers.clear()

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    """Drop records marked with ``extra={"dev_only": True}``."""

    def __init__(self, show_dev_only: bool = SHOW_DEV_ONLY_IN_CONSOLE) -> None:
        super().__init__()
        self.show_dev_only = show_dev_only

    def filter(self, record: logging.LogRecord) -> bool:
        if self.show_dev_only:
            return True
        return not getattr(record, "dev_only", False)
