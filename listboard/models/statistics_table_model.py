"""Module: statistics_table_model.py.

Author: Michael Economou
Date: 2026-03-02

QAbstractTableModel for the statistics popup.

Features:
- Two columns (Character, Count)
- One row per ranked character, vertical header shows the rank
- Summary header line kept in ``title`` for the popup caption
"""

from typing import Any

from PyQt5.QtCore import QAbstractTableModel, QModelIndex, Qt

from listboard.models.frequency_summary import FrequencySummary


class StatisticsTableModel(QAbstractTableModel):
    """Table model showing the (character, count) pairs of a FrequencySummary."""

    def __init__(self, summary: FrequencySummary | None = None, parent: Any = None) -> None:
        super().__init__(parent)
        self._pairs: list[tuple[str, int]] = list(summary.pairs) if summary else []
        self.title = summary.header if summary else ""
        self.left_header = "Character"
        self.right_header = "Count"

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._pairs)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        """Return number of columns (always 2)."""
        if parent.isValid():
            return 0
        return 2

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        """Return data for given index and role."""
        if not index.isValid():
            return None

        row = index.row()
        col = index.column()
        if row >= len(self._pairs):
            return None

        character, count = self._pairs[row]

        if role == Qt.DisplayRole:
            return character if col == 0 else str(count)

        if role == Qt.TextAlignmentRole and col == 1:
            return int(Qt.AlignRight | Qt.AlignVCenter)

        return None

    def headerData(self, section: int, orientation: Any, role: int = Qt.DisplayRole) -> Any:
        """Return column titles, or the 1-based rank for rows."""
        if role != Qt.DisplayRole:
            return None

        if orientation == Qt.Horizontal:
            return self.left_header if section == 0 else self.right_header

        return str(section + 1)

    def set_summary(self, summary: FrequencySummary) -> None:
        """Replace all rows and refresh views."""
        self.beginResetModel()
        self._pairs = list(summary.pairs)
        self.title = summary.header
        self.endResetModel()
