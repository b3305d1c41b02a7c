"""Module: selection_state.py.

Author: Michael Economou
Date: 2026-03-02

Selection State - which group is current and what the search box contains.

Writes and snapshot reads share one lock per instance, so a reader never sees
the index from one update paired with the query from another.
Change notifications are Observable signals emitted after the lock is released.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from listboard.utils.events import Observable, Signal
from listboard.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


@dataclass(frozen=True)
class SelectionSnapshot:
    """Immutable copy of a selection state at one point in time."""

    current_group_index: int = 0
    search_query: str = ""


class SelectionState(Observable):
    """Mutable current group index and search query.

    The index is stored as given; it is validated when a query reads it.
    """

    # Emitted with the new snapshot after any actual change
    selection_changed = Signal(SelectionSnapshot)

    def __init__(self, current_group_index: int = 0, search_query: str = "") -> None:
        super().__init__()
        self._current_group_index = current_group_index
        self._search_query = search_query
        self._lock = threading.Lock()

    @property
    def current_group_index(self) -> int:
        with self._lock:
            return self._current_group_index

    @property
    def search_query(self) -> str:
        with self._lock:
            return self._search_query

    def snapshot(self) -> SelectionSnapshot:
        """Return index and query read together under the lock."""
        with self._lock:
            return SelectionSnapshot(self._current_group_index, self._search_query)

    def update(
        self, *, group_index: int | None = None, search_query: str | None = None
    ) -> bool:
        """Change one or both fields atomically.

        Args:
            group_index: New current group index, or None to keep it
            search_query: New search text, or None to keep it

        Returns:
            True if anything changed

        """
        with self._lock:
            new_index = self._current_group_index if group_index is None else group_index
            new_query = self._search_query if search_query is None else search_query
            if new_index == self._current_group_index and new_query == self._search_query:
                return False
            self._current_group_index = new_index
            self._search_query = new_query
            snapshot = SelectionSnapshot(new_index, new_query)

        logger.debug(
            "Selection changed: group=%r query=%r",
            snapshot.current_group_index,
            snapshot.search_query,
            extra={"dev_only": True},
        )
        self.selection_changed.emit(snapshot)
        return True

    def __repr__(self) -> str:
        snapshot = self.snapshot()
        return (
            f"SelectionState(current_group_index={snapshot.current_group_index!r}, "
            f"search_query={snapshot.search_query!r})"
        )
