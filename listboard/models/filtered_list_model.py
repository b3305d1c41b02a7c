"""Module: filtered_list_model.py.

Author: Michael Economou
Date: 2026-03-02

QAbstractListModel exposing a ListViewModel's filtered items to Qt views.

The model pulls ``filtered_items()`` once per selection change and serves rows
from that cached list. An out-of-range group index leaves the model empty.

Roles:
- DisplayRole / ToolTipRole: item text
- SubtitleRole: 'Length: N characters'
- DecorationRole / ImageNameRole: carousel image name of the current group
"""

from functools import partial
from typing import Any

from PyQt5.QtCore import QAbstractListModel, QModelIndex, Qt

from listboard.app.services.list_view_model import ListViewModel
from listboard.core.errors import GroupIndexError
from listboard.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class FilteredListModel(QAbstractListModel):
    """Single-column list of the items matching the current search."""

    SubtitleRole = Qt.UserRole
    ImageNameRole = Qt.UserRole + 1

    def __init__(self, view_model: ListViewModel, parent: Any = None) -> None:
        super().__init__(parent)
        self._view_model = view_model
        self._items: list[str] = []
        self._image_name: str | None = None
        self._pull()

        view_model.filter_changed.connect(self.refresh)
        # The pure-Python signal holds refresh strongly; drop it with the C++ object
        self.destroyed.connect(partial(view_model.filter_changed.disconnect, self.refresh))

    @property
    def view_model(self) -> ListViewModel:
        return self._view_model

    def items(self) -> list[str]:
        """Return a copy of the rows currently shown."""
        return list(self._items)

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        """Return number of rows (0 for child indexes)."""
        if parent.isValid():
            return 0
        return len(self._items)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        """Return row data for the supported roles."""
        if not index.isValid():
            return None

        row = index.row()
        if row < 0 or row >= len(self._items):
            return None

        item = self._items[row]

        if role in (Qt.DisplayRole, Qt.ToolTipRole):
            return item

        if role == self.SubtitleRole:
            return self._view_model.item_subtitle(item)

        if role in (Qt.DecorationRole, self.ImageNameRole):
            return self._image_name

        return None

    def roleNames(self) -> dict[int, bytes]:
        """Role names for QML delegates."""
        return {
            Qt.DisplayRole: b"display",
            self.SubtitleRole: b"subtitle",
            self.ImageNameRole: b"imageName",
        }

    def refresh(self) -> None:
        """Re-query the view-model and reset attached views."""
        self.beginResetModel()
        self._pull()
        self.endResetModel()

    def _pull(self) -> None:
        try:
            self._items = self._view_model.filtered_items()
            self._image_name = self._view_model.current_image
        except GroupIndexError:
            # already logged by the view-model
            self._items = []
            self._image_name = None
