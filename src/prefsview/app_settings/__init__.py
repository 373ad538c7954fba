"""Viewer settings helpers."""

from .coercion import coerce_bool, normalize_settings
from .defaults import DEFAULT_STORE_LOCATION, build_default_settings
from .paths import get_crash_logs_file_path

__all__ = [
    "DEFAULT_STORE_LOCATION",
    "build_default_settings",
    "coerce_bool",
    "normalize_settings",
    "get_crash_logs_file_path",
]
