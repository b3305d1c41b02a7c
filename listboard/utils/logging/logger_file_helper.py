"""Module: logger_file_helper.py.

Author: Michael Economou
Date: 2026-03-02

Attach rotating file handlers to a logger, optionally restricted
to records from a single logger name.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from listboard.config import LOG_FILE_BACKUP_COUNT, LOG_FILE_MAX_BYTES

FILE_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class NameFilter(logging.Filter):
    """Pass only records emitted by the logger with the exact given name."""

    def __init__(self, logger_name: str) -> None:
        super().__init__()
        self.logger_name = logger_name

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name == self.logger_name


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = LOG_FILE_MAX_BYTES,
    backup_count: int = LOG_FILE_BACKUP_COUNT,
    filter_by_name: str | None = None,
) -> RotatingFileHandler:
    """Attach a rotating file handler to a logger.

    Args:
        logger: The logger to attach the handler to
        log_path: Path to the log file; parent directories are created
        level: Minimum level written by this handler
        max_bytes: Maximum file size before rotating
        backup_count: Number of rotated files to keep
        filter_by_name: Only write records from the logger with this name

    Returns:
        The handler that was attached

    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=FILE_LOG_DATEFMT))

    if filter_by_name:
        file_handler.addFilter(NameFilter(filter_by_name))

    logger.addHandler(file_handler)
    return file_handler
