"""Module: errors.py.

Author: Michael Economou
Date: 2026-03-02

Exception types raised by the listboard core.
"""


class ListboardError(Exception):
    """Base class for listboard errors."""


class ConfigurationError(ListboardError, ValueError):
    """Raised when a collection store is built without any groups."""


class GroupIndexError(ListboardError, IndexError):
    """Raised when the current group index does not address a group in the store.

    The index is never clamped or wrapped: an out-of-range (or negative) index
    is a caller bug and surfaces immediately.
    """

    def __init__(self, index: object, group_count: int) -> None:
        self.index = index
        self.group_count = group_count
        super().__init__(
            f"group index {index!r} out of range for store with {group_count} groups"
        )
