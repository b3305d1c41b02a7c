"""Module: listboard.config

Author: Michael Economou
Date: 2026-03-02

Configuration package for listboard.

- app: Application info, logging settings
- catalog: Default list data, carousel image names, statistics formatting

All settings are re-exported from this module:
    from listboard.config import APP_NAME, DEFAULT_VERTICAL_DATA
"""

from listboard.config.app import *  # noqa: F401, F403
from listboard.config.catalog import *  # noqa: F401, F403
