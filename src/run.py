import faulthandler
import sys
import threading
import traceback
from pathlib import Path

from PySide6.QtCore import QtMsgType, qInstallMessageHandler
from PySide6.QtWidgets import QApplication

# --- Add ROOT for imports ---
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from prefsview.app import main
from prefsview.app_settings import get_crash_logs_file_path
from prefsview.logging_utils import configure_app_logging, get_logger

configure_app_logging("INFO")
LOGGER = get_logger(__name__)

_MAIN_WINDOW = None


def _save_crash_text(text: str) -> None:
    try:
        path = get_crash_logs_file_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(text.rstrip("\n"))
            handle.write("\n\n")
    except OSError:
        LOGGER.warning("Could not write crash log to %s", get_crash_logs_file_path())


def _install_crash_hooks() -> None:
    def _handle_exception(exc_type, exc_value, exc_tb) -> None:
        error_text = "".join(traceback.format_exception(exc_type, exc_value, exc_tb)).strip()
        _save_crash_text(f"[Crash]\n{error_text}")
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    def _handle_thread_exception(args: threading.ExceptHookArgs) -> None:
        error_text = "".join(
            traceback.format_exception(args.exc_type, args.exc_value, args.exc_traceback)
        ).strip()
        _save_crash_text(f"[Thread crash]\n{error_text}")

    sys.excepthook = _handle_exception
    threading.excepthook = _handle_thread_exception

    def _qt_message_handler(mode, context, message) -> None:
        mode_name = mode.name if isinstance(mode, QtMsgType) else str(mode)
        if mode in (QtMsgType.QtCriticalMsg, QtMsgType.QtFatalMsg):
            _save_crash_text(f"[Qt:{mode_name}] {message}")
        LOGGER.debug("[Qt:%s] %s", mode_name, message)

    qInstallMessageHandler(_qt_message_handler)

    # Segfaults and aborts go to the same log.
    try:
        path = get_crash_logs_file_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        faulthandler.enable(file=open(path, "a", encoding="utf-8"), all_threads=True)
    except OSError:
        LOGGER.warning("faulthandler could not open %s", get_crash_logs_file_path())


if __name__ == "__main__":
    _install_crash_hooks()
    app = QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(True)
    try:
        _MAIN_WINDOW = main(existing_app=app)
    except Exception:
        _save_crash_text(f"[Startup]\n{traceback.format_exc()}")
        LOGGER.exception("Main window bootstrap failed")
        sys.exit(1)
    exit_code = app.exec()
    LOGGER.info("Qt event loop exited with code %s", exit_code)
    sys.exit(exit_code)
