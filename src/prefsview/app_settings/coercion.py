from __future__ import annotations

from typing import Any

from ..logging_utils import LOG_LEVEL_OPTIONS
from .defaults import build_default_settings


def coerce_bool(value, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off", ""}:
            return False
    return default


def _coerce_int_clamped(value: object, default: int, min_value: int, max_value: int) -> int:
    try:
        num = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        num = default
    return max(min_value, min(max_value, num))


def _coerce_text(value: object, default: str, *, allow_empty: bool = False) -> str:
    if not isinstance(value, str):
        return default
    if not value and not allow_empty:
        return default
    return value


def normalize_settings(raw: dict[str, Any] | None) -> dict[str, Any]:
    """Overlay ``raw`` on the defaults, fixing values that are out of range.

    Unknown keys are kept as-is.
    """
    defaults = build_default_settings()
    settings = dict(defaults)
    if isinstance(raw, dict):
        settings.update(raw)

    settings["store_location"] = _coerce_text(settings.get("store_location"), defaults["store_location"])
    # An empty marker disables key truncation.
    settings["key_marker"] = _coerce_text(settings.get("key_marker"), defaults["key_marker"], allow_empty=True)
    level = str(settings.get("log_level") or "").strip().upper()
    settings["log_level"] = level if level in LOG_LEVEL_OPTIONS else defaults["log_level"]
    settings["dark_mode"] = coerce_bool(settings.get("dark_mode"), default=defaults["dark_mode"])
    settings["open_prefs_on_start"] = coerce_bool(
        settings.get("open_prefs_on_start"),
        default=defaults["open_prefs_on_start"],
    )
    settings["key_column_width"] = _coerce_int_clamped(settings.get("key_column_width"), 256, 64, 1024)
    settings["search_field_width"] = _coerce_int_clamped(settings.get("search_field_width"), 256, 96, 1024)
    settings["window_width"] = _coerce_int_clamped(settings.get("window_width"), 900, 320, 4096)
    settings["window_height"] = _coerce_int_clamped(settings.get("window_height"), 600, 240, 4096)
    return settings
