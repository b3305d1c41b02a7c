"""Module: listboard.config.app

Author: Michael Economou
Date: 2026-03-02

Application-level configuration: app info and logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "listboard"
APP_VERSION = "0.1.0"
APP_AUTHOR = "Michael Economou"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_MAX_BYTES = 1_000_000  # 1MB per file
LOG_FILE_BACKUP_COUNT = 3

# Statistics popup requests, one line each, in their own file
LOG_STATISTICS_FILE = True
STATISTICS_LOGGER_NAME = "listboard.statistics"

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
