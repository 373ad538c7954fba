from __future__ import annotations

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QLabel,
    QLineEdit,
    QSizePolicy,
    QTableView,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from ..app_settings import normalize_settings
from ..logging_utils import get_logger
from ..model.session import PrefsSession
from ..store.errors import StoreUnavailable
from .table_model import PrefsTableModel
from .theme import build_prefs_window_qss, build_tokens_from_settings

LOGGER = get_logger(__name__)

WINDOW_TITLE = "Editor Prefs"


class PrefsWindow(QWidget):
    def __init__(self, session: PrefsSession, parent=None, *, settings: dict | None = None) -> None:
        super().__init__(parent)
        self.settings = normalize_settings(settings)
        self.session = session
        self._refreshed_once = False

        self.setObjectName("prefsWindow")
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(self.settings["window_width"], self.settings["window_height"])
        self.setStyleSheet(build_prefs_window_qss(build_tokens_from_settings(self.settings)))

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self.toolbar = QToolBar(self)
        self.toolbar.setObjectName("prefsToolbar")
        self.toolbar.setMovable(False)
        self.refresh_action = QAction("Refresh", self)
        self.refresh_action.setShortcut(QKeySequence.StandardKey.Refresh)
        self.refresh_action.triggered.connect(self.refresh)
        self.toolbar.addAction(self.refresh_action)
        spacer = QWidget(self.toolbar)
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        self.toolbar.addWidget(spacer)
        self.search_edit = QLineEdit(self.toolbar)
        self.search_edit.setObjectName("prefsSearch")
        self.search_edit.setPlaceholderText("Search keys and values")
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.setFixedWidth(self.settings["search_field_width"])
        self.toolbar.addWidget(self.search_edit)
        root.addWidget(self.toolbar)

        self.error_label = QLabel("", self)
        self.error_label.setObjectName("prefsError")
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        root.addWidget(self.error_label)

        self.table_model = PrefsTableModel(session, self)
        self.table_view = QTableView(self)
        self.table_view.setObjectName("prefsTable")
        self.table_view.setModel(self.table_model)
        self.table_view.setAlternatingRowColors(True)
        self.table_view.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table_view.setEditTriggers(
            QAbstractItemView.EditTrigger.DoubleClicked | QAbstractItemView.EditTrigger.EditKeyPressed
        )
        self.table_view.verticalHeader().setVisible(False)
        header = self.table_view.horizontalHeader()
        header.setSectionResizeMode(PrefsTableModel.KEY_COLUMN, QHeaderView.ResizeMode.Interactive)
        header.setStretchLastSection(True)
        self.table_view.setColumnWidth(PrefsTableModel.KEY_COLUMN, self.settings["key_column_width"])
        root.addWidget(self.table_view, 1)

        self.status_label = QLabel("", self)
        self.status_label.setObjectName("prefsStatus")
        root.addWidget(self.status_label)

        self.search_edit.textChanged.connect(self._on_search_changed)
        self._update_status()

    def showEvent(self, event) -> None:  # type: ignore[override]
        super().showEvent(event)
        if not self._refreshed_once:
            self.refresh()

    def search_text(self) -> str:
        return self.search_edit.text()

    def set_search_text(self, text: str) -> None:
        self.search_edit.setText(text)

    def refresh(self) -> bool:
        """Re-read the store. Returns False when the store was unavailable."""
        self._refreshed_once = True
        ok = True
        try:
            self.session.refresh()
        except StoreUnavailable as exc:
            ok = False
            self._show_error(str(exc))
        else:
            self._show_error("")
        self._reload_keeping_scroll()
        return ok

    def _on_search_changed(self, text: str) -> None:
        LOGGER.debug("Search text changed: %r", text)
        scroll_value = self.table_view.verticalScrollBar().value()
        self.table_model.set_search_text(text)
        self._restore_scroll(scroll_value)
        self._update_status()

    def _reload_keeping_scroll(self) -> None:
        scroll_value = self.table_view.verticalScrollBar().value()
        self.table_model.reload()
        self._restore_scroll(scroll_value)
        self._update_status()

    def _restore_scroll(self, value: int) -> None:
        # Lay the rows out now so the scroll range already fits the new row count.
        self.table_view.doItemsLayout()
        self.table_view.verticalScrollBar().setValue(value)

    def _show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.error_label.setVisible(bool(message))

    def _update_status(self) -> None:
        shown = self.table_model.rowCount()
        total = self.table_model.total_count()
        self.status_label.setText(f"{shown} of {total} entries")
