from __future__ import annotations

from typing import Any

from ..store.keys import DEFAULT_KEY_MARKER
from ..store.reader import DEFAULT_STORE_LOCATION


def build_default_settings() -> dict[str, Any]:
    return {
        "store_location": DEFAULT_STORE_LOCATION,
        "key_marker": DEFAULT_KEY_MARKER,
        "log_level": "INFO",
        "dark_mode": False,
        "key_column_width": 256,
        "search_field_width": 256,
        "window_width": 900,
        "window_height": 600,
        "open_prefs_on_start": True,
    }
