from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QLabel, QMainWindow

from ..app_settings import normalize_settings
from ..logging_utils import get_logger
from ..model.session import PrefsSession
from ..store.keys import truncate_at_marker
from ..store.reader import PreferenceStoreReader
from .debug_logs_dialog import DebugLogsDialog
from .prefs_window import WINDOW_TITLE, PrefsWindow

LOGGER = get_logger(__name__)


def build_session(settings: dict) -> PrefsSession:
    reader = PreferenceStoreReader(
        settings["store_location"],
        key_normalizer=truncate_at_marker(settings["key_marker"]),
    )
    return PrefsSession(reader)


class MainWindow(QMainWindow):
    def __init__(self, settings: dict | None = None, *, session: PrefsSession | None = None) -> None:
        super().__init__()
        self.settings = normalize_settings(settings)
        self.session = session if session is not None else build_session(self.settings)
        self._prefs_window: PrefsWindow | None = None
        self._debug_logs_dialog: DebugLogsDialog | None = None

        self.setWindowTitle("Prefs Viewer")
        self.resize(480, 200)
        hint = QLabel("Open Window > Editor Prefs to browse stored preferences.", self)
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setCentralWidget(hint)

        window_menu = self.menuBar().addMenu("&Window")
        self.open_prefs_action = QAction(WINDOW_TITLE, self)
        self.open_prefs_action.triggered.connect(self.open_prefs_window)
        window_menu.addAction(self.open_prefs_action)

        help_menu = self.menuBar().addMenu("&Help")
        self.debug_logs_action = QAction("Debug Logs", self)
        self.debug_logs_action.triggered.connect(self.show_debug_logs)
        help_menu.addAction(self.debug_logs_action)

    def open_prefs_window(self) -> PrefsWindow:
        """Show the prefs window, creating it on first use."""
        if self._prefs_window is None:
            LOGGER.info("Opening prefs window for %s", self.session.location)
            self._prefs_window = PrefsWindow(self.session, settings=self.settings)
        self._prefs_window.show()
        self._prefs_window.raise_()
        self._prefs_window.activateWindow()
        return self._prefs_window

    def show_debug_logs(self) -> DebugLogsDialog:
        if self._debug_logs_dialog is None:
            self._debug_logs_dialog = DebugLogsDialog(self)
        self._debug_logs_dialog.reload()
        self._debug_logs_dialog.show()
        return self._debug_logs_dialog

    def closeEvent(self, event) -> None:  # type: ignore[override]
        if self._prefs_window is not None:
            self._prefs_window.close()
        super().closeEvent(event)
