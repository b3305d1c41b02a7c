"""Module: __init__.py

Author: Michael Economou
Date: 2026-03-02

Core package: pure queries and the exception types they raise.
"""

from listboard.core.errors import ConfigurationError, GroupIndexError, ListboardError

__all__ = [
    "ConfigurationError",
    "GroupIndexError",
    "ListboardError",
]
