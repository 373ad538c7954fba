from .main_window import MainWindow
from .prefs_window import PrefsWindow
from .table_model import PrefsTableModel

__all__ = ["MainWindow", "PrefsTableModel", "PrefsWindow"]
