from __future__ import annotations

from PySide6.QtWidgets import QApplication, QDialog, QDialogButtonBox, QPlainTextEdit, QVBoxLayout

from ..logging_utils import LOG_BUFFER
from .theme import build_debug_logs_dialog_qss, build_tokens_from_settings


class DebugLogsDialog(QDialog):
    """Shows what prefsview has logged since startup."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Debug Logs")
        self.resize(760, 440)
        settings = getattr(parent, "settings", None)
        self.setStyleSheet(build_debug_logs_dialog_qss(build_tokens_from_settings(settings or {})))

        self.logs_view = QPlainTextEdit(self)
        self.logs_view.setReadOnly(True)
        self.logs_view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close, self)
        self.copy_button = buttons.addButton("Copy", QDialogButtonBox.ButtonRole.ActionRole)
        self.reload_button = buttons.addButton("Reload", QDialogButtonBox.ButtonRole.ActionRole)
        self.clear_button = buttons.addButton("Clear", QDialogButtonBox.ButtonRole.ResetRole)
        self.copy_button.clicked.connect(lambda: QApplication.clipboard().setText(self.logs_view.toPlainText()))
        self.reload_button.clicked.connect(self.reload)
        self.clear_button.clicked.connect(self.clear)
        buttons.rejected.connect(self.close)

        layout = QVBoxLayout(self)
        layout.addWidget(self.logs_view, 1)
        layout.addWidget(buttons)

    def reload(self) -> None:
        self.logs_view.setPlainText("\n".join(LOG_BUFFER.lines()))
        bar = self.logs_view.verticalScrollBar()
        bar.setValue(bar.maximum())

    def clear(self) -> None:
        LOG_BUFFER.clear()
        self.logs_view.clear()
