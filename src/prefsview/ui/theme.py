from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any

DEFAULT_ACCENT = "#4a90e2"

_PALETTES: dict[bool, dict[str, str]] = {
    False: {
        "text": "#111111",
        "text_muted": "#6b7078",
        "window_bg": "#ffffff",
        "chrome_bg": "#f0f2f5",
        "surface_bg": "#ffffff",
        "input_bg": "#ffffff",
        "border": "#c9ced6",
        "error_bg": "#f9e0e1",
        "error_fg": "#7a1115",
    },
    True: {
        "text": "#e8edf3",
        "text_muted": "#8d959f",
        "window_bg": "#1d2127",
        "chrome_bg": "#252b33",
        "surface_bg": "#1a2026",
        "input_bg": "#161c22",
        "border": "#3b434d",
        "error_bg": "#7b2a2f",
        "error_fg": "#ffd7d8",
    },
}


def _accent_or_default(value: object) -> str:
    text = str(value or "").strip()
    return text.lower() if re.fullmatch(r"#[0-9a-fA-F]{6}", text) else DEFAULT_ACCENT


@dataclass(frozen=True)
class UIThemeTokens:
    dark_mode: bool
    accent: str
    text: str
    text_muted: str
    window_bg: str
    chrome_bg: str
    surface_bg: str
    input_bg: str
    border: str
    error_bg: str
    error_fg: str
    radius_md: int
    space_xs: int
    space_md: int


def build_tokens_from_settings(settings: dict[str, Any]) -> UIThemeTokens:
    s = settings if isinstance(settings, dict) else {}
    dark = bool(s.get("dark_mode", False))
    return UIThemeTokens(
        dark_mode=dark,
        accent=_accent_or_default(s.get("accent_color")),
        **_PALETTES[dark],
        radius_md=6,
        space_xs=4,
        space_md=8,
    )


def build_prefs_window_qss(tokens: UIThemeTokens) -> str:
    return f"""
        QWidget#prefsWindow {{
            background: {tokens.window_bg};
            color: {tokens.text};
        }}
        QToolBar#prefsToolbar {{
            background: {tokens.chrome_bg};
            border-bottom: 1px solid {tokens.border};
            spacing: {tokens.space_xs}px;
        }}
        QLineEdit#prefsSearch {{
            background: {tokens.input_bg};
            color: {tokens.text};
            border: 1px solid {tokens.border};
            border-radius: {tokens.radius_md}px;
            padding: 2px {tokens.space_xs}px;
        }}
        QTableView#prefsTable {{
            background: {tokens.surface_bg};
            color: {tokens.text};
            gridline-color: {tokens.border};
            selection-background-color: {tokens.accent};
        }}
        QLabel#prefsError {{
            background: {tokens.error_bg};
            color: {tokens.error_fg};
            border-radius: {tokens.radius_md}px;
            padding: {tokens.space_md}px;
        }}
        QLabel#prefsStatus {{
            color: {tokens.text_muted};
            padding: {tokens.space_xs}px;
        }}
    """


def build_debug_logs_dialog_qss(tokens: UIThemeTokens) -> str:
    return f"""
        QPlainTextEdit {{
            background: {tokens.surface_bg};
            color: {tokens.text};
            border: 1px solid {tokens.border};
            border-radius: {tokens.radius_md}px;
            selection-background-color: {tokens.accent};
        }}
        QPushButton {{
            border-radius: {tokens.radius_md}px;
            padding: {tokens.space_xs}px {tokens.space_md}px;
        }}
    """
