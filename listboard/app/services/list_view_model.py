"""Module: list_view_model.py.

Author: Michael Economou
Date: 2026-03-02

ListViewModel - Qt-free facade the presentation layer talks to.

Owns the CollectionStore and a SelectionState, forwards queries to the
query engine and re-emits selection changes as ``filter_changed`` so list
adapters know when to pull again.

Index policy: ``set_selection`` and ``select_group`` store the index without
checking it. The next query raises GroupIndexError if it is out of range.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from listboard.app.state.selection_state import SelectionSnapshot, SelectionState
from listboard.config import (
    CAROUSEL_IMAGES,
    DEFAULT_VERTICAL_DATA,
    ITEM_SUBTITLE_FORMAT,
    STATISTICS_LOGGER_NAME,
)
from listboard.core import query_engine
from listboard.core.errors import GroupIndexError
from listboard.models.frequency_summary import FrequencySummary
from listboard.models.item_group import CollectionStore
from listboard.utils.events import Observable, Signal
from listboard.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)
statistics_logger = get_cached_logger(STATISTICS_LOGGER_NAME)


class ListViewModel(Observable):
    """View-model for the searchable list screen and its statistics popup.

    Usage:
        view_model = ListViewModel()
        view_model.set_selection(0, "a")
        view_model.filtered_items()   # ['apple', 'banana', 'orange']
        view_model.show_statistics()  # 'List 1 (4 items)\\na = 5\\n...'
    """

    filter_changed = Signal()
    statistics_requested = Signal(str)

    def __init__(
        self,
        store: CollectionStore | Iterable[Iterable[str]] | None = None,
        selection: SelectionState | None = None,
        carousel_images: Sequence[str] = CAROUSEL_IMAGES,
    ) -> None:
        """Initialize the view-model.

        Args:
            store: A CollectionStore, plain nested sequences of items, or None
                for the built-in catalog
            selection: Selection state to share; a fresh one is created if None
            carousel_images: Image names for the horizontal carousel

        Raises:
            ConfigurationError: If the store has no groups

        """
        super().__init__()
        if store is None:
            store = DEFAULT_VERTICAL_DATA
        if not isinstance(store, CollectionStore):
            store = CollectionStore.from_sequences(store)

        self._store = store
        self._selection = selection if selection is not None else SelectionState()
        self._carousel_images = tuple(carousel_images)
        self._selection.selection_changed.connect(self._on_selection_changed)

        logger.debug(
            "ListViewModel initialized with %d groups",
            store.group_count,
            extra={"dev_only": True},
        )

    # =====================================
    # State
    # =====================================

    @property
    def store(self) -> CollectionStore:
        return self._store

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def carousel_images(self) -> tuple[str, ...]:
        return self._carousel_images

    @property
    def current_image(self) -> str | None:
        """Carousel image of the current group, shown as each row's leading image.

        None when the catalog has fewer images than groups.

        Raises:
            GroupIndexError: If the current group index is out of range

        """
        index = self._selection.current_group_index
        self._store.group_at(index)
        if index < len(self._carousel_images):
            return self._carousel_images[index]
        return None

    @property
    def group_count(self) -> int:
        return self._store.group_count

    @staticmethod
    def item_subtitle(item: str) -> str:
        """Return the row subtitle, e.g. 'Length: 5 characters'."""
        return ITEM_SUBTITLE_FORMAT.format(count=query_engine.character_count(item))

    def set_selection(self, index: int, query: str = "") -> None:
        """Set the current group and search text in one step."""
        self._selection.update(group_index=index, search_query=query)

    def select_group(self, index: int) -> None:
        """Switch the current group, keeping the search text."""
        self._selection.update(group_index=index)

    def set_search_text(self, text: str) -> None:
        """Replace the search text, keeping the current group."""
        self._selection.update(search_query=text)

    def _on_selection_changed(self, _snapshot: SelectionSnapshot) -> None:
        self.filter_changed.emit()

    # =====================================
    # Queries
    # =====================================

    def filtered_items(self) -> list[str]:
        """Return the current group filtered by the search text.

        Raises:
            GroupIndexError: If the current group index is out of range

        """
        snapshot = self._selection.snapshot()
        try:
            return query_engine.filtered_items(self._store, snapshot)
        except GroupIndexError as e:
            logger.warning("Cannot filter items: %s", e)
            raise

    def frequency_summary(self) -> FrequencySummary:
        """Return the character summary of the full current group.

        Raises:
            GroupIndexError: If the current group index is out of range

        """
        snapshot = self._selection.snapshot()
        try:
            return query_engine.frequency_summary(self._store, snapshot)
        except GroupIndexError as e:
            logger.warning("Cannot build statistics: %s", e)
            raise

    def show_statistics(self) -> str:
        """Return the statistics popup text and announce it to listeners."""
        text = self.frequency_summary().format()
        statistics_logger.info("Statistics generated: %s", text.splitlines()[0])
        self.statistics_requested.emit(text)
        return text
