import sys
from typing import Optional

from PySide6.QtWidgets import QApplication

from .app_settings import normalize_settings
from .logging_utils import configure_app_logging, get_logger
from .ui.main_window import MainWindow

LOGGER = get_logger(__name__)


def main(existing_app: Optional[QApplication] = None, settings: Optional[dict] = None) -> MainWindow:
    # Use existing QApplication if passed (from run.py), otherwise create one
    owns_app = existing_app is None
    app = existing_app or QApplication(sys.argv)
    resolved = normalize_settings(settings)
    configure_app_logging(resolved["log_level"])
    app.setApplicationName("Prefs Viewer")
    LOGGER.info("App main() starting (owns_app=%s)", owns_app)

    window = MainWindow(resolved)

    previous_hook = sys.excepthook

    def _global_exception_hook(exc_type, exc_value, exc_tb) -> None:
        LOGGER.exception("Unhandled exception routed to global hook", exc_info=(exc_type, exc_value, exc_tb))
        previous_hook(exc_type, exc_value, exc_tb)

    sys.excepthook = _global_exception_hook

    window.show()
    if resolved["open_prefs_on_start"]:
        window.open_prefs_window()
    if owns_app:
        sys.exit(app.exec())
    return window
