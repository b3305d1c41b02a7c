"""Module: init_logging.py.

Author: Michael Economou
Date: 2026-03-02

Single entry point that wires the root logger for an embedding application:
activity, error and statistics log files plus a console handler that hides dev-only records.
"""

import logging
import os

from listboard.config import (
    LOG_CONSOLE_LEVEL,
    LOG_FORMAT,
    LOG_STATISTICS_FILE,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
    STATISTICS_LOGGER_NAME,
)
from listboard.utils.logging.logger_file_helper import add_file_handler
from listboard.utils.logging.logger_helper import DevOnlyFilter


def init_logging(app_name: str = "listboard", log_dir: str = "logs") -> logging.Logger:
    """Configure the root logger for the given app name.

    Args:
        app_name: Base name for log files (e.g. 'listboard')
        log_dir: Directory that receives the log files

    Returns:
        The configured root logger

    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # handlers do the filtering

    if LOG_TO_FILE:
        add_file_handler(
            root, os.path.join(log_dir, f"{app_name}_activity.log"), level=logging.INFO
        )
        add_file_handler(
            root, os.path.join(log_dir, f"{app_name}_errors.log"), level=logging.ERROR
        )
        if LOG_STATISTICS_FILE:
            add_file_handler(
                root,
                os.path.join(log_dir, f"{app_name}_statistics.log"),
                level=logging.INFO,
                filter_by_name=STATISTICS_LOGGER_NAME,
            )

    if LOG_TO_CONSOLE:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(LOG_CONSOLE_LEVEL)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler.addFilter(DevOnlyFilter())
        root.addHandler(console_handler)

    return root
