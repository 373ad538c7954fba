import sys
import unittest
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from prefsview.ui.theme import (
    build_debug_logs_dialog_qss,
    build_prefs_window_qss,
    build_tokens_from_settings,
)


class ThemeTokensTests(unittest.TestCase):
    def test_dark_and_light_palettes_differ(self) -> None:
        light = build_tokens_from_settings({})
        dark = build_tokens_from_settings({"dark_mode": True})
        self.assertFalse(light.dark_mode)
        self.assertTrue(dark.dark_mode)
        self.assertNotEqual(light.window_bg, dark.window_bg)

    def test_bad_accent_falls_back(self) -> None:
        self.assertEqual(build_tokens_from_settings({"accent_color": "nope"}).accent, "#4a90e2")
        self.assertEqual(build_tokens_from_settings({"accent_color": "abc"}).accent, "#4a90e2")
        self.assertEqual(build_tokens_from_settings({"accent_color": "#ABCDEF"}).accent, "#abcdef")

    def test_qss_targets_window_widgets(self) -> None:
        tokens = build_tokens_from_settings({"dark_mode": True})
        qss = build_prefs_window_qss(tokens)
        for name in ("#prefsToolbar", "#prefsSearch", "#prefsTable", "#prefsError", "#prefsStatus"):
            self.assertIn(name, qss)
        self.assertIn(tokens.surface_bg, build_debug_logs_dialog_qss(tokens))


if __name__ == "__main__":
    unittest.main()
