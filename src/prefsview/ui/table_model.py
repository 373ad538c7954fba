from __future__ import annotations

from typing import Any

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt

from ..model.session import PrefsSession
from ..store.reader import Entry


class PrefsTableModel(QAbstractTableModel):
    """Two-column Key/Value view over the session's filtered entries."""

    HEADERS = ("Key", "Value")
    KEY_COLUMN = 0
    VALUE_COLUMN = 1

    def __init__(self, session: PrefsSession, parent=None) -> None:
        super().__init__(parent)
        self._session = session
        self._search_text = ""
        self._rows: list[Entry] = []
        self._rebuild_rows()

    @property
    def search_text(self) -> str:
        return self._search_text

    def total_count(self) -> int:
        return len(self._session.model)

    def entry_at(self, row: int) -> Entry | None:
        if 0 <= row < len(self._rows):
            return self._rows[row]
        return None

    def set_search_text(self, text: str) -> None:
        text = str(text or "")
        if text == self._search_text:
            return
        self._search_text = text
        self.reload()

    def reload(self) -> None:
        self.beginResetModel()
        self._rebuild_rows()
        self.endResetModel()

    def _rebuild_rows(self) -> None:
        self._rows = list(self._session.filter(self._search_text))

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: B008
        if parent.isValid():
            return 0
        return len(self._rows)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: B008
        if parent.isValid():
            return 0
        return len(self.HEADERS)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        entry = self.entry_at(index.row()) if index.isValid() else None
        if entry is None:
            return None
        if role in (Qt.ItemDataRole.DisplayRole, Qt.ItemDataRole.EditRole, Qt.ItemDataRole.ToolTipRole):
            return entry.key if index.column() == self.KEY_COLUMN else entry.value
        return None

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if role != Qt.ItemDataRole.DisplayRole:
            return None
        if orientation == Qt.Orientation.Horizontal and 0 <= section < len(self.HEADERS):
            return self.HEADERS[section]
        return None

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        # Editable so the text can be selected and copied from the cell editor.
        return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable | Qt.ItemFlag.ItemIsEditable

    def setData(self, index: QModelIndex, value: Any, role: int = Qt.ItemDataRole.EditRole) -> bool:
        # Never written back to the preference store.
        return False
