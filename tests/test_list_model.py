import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from prefsview.model.entries import PrefsListModel, is_blank_search, matches_search
from prefsview.store.reader import Entry


def _keys(entries) -> list[str]:
    return [entry.key for entry in entries]


class PrefsListModelTests(unittest.TestCase):
    def setUp(self) -> None:
        self.model = PrefsListModel()
        self.model.load(
            [
                Entry("volumeMax", "1.0"),
                Entry("Brightness", "50"),
                Entry("Volume", "0.8"),
            ]
        )

    def test_load_sorts_by_ordinal_key(self) -> None:
        self.assertEqual(_keys(self.model.entries), ["Brightness", "Volume", "volumeMax"])
        for a, b in zip(self.model.entries, self.model.entries[1:]):
            self.assertLessEqual(a.key, b.key)

    def test_empty_search_returns_everything_in_order(self) -> None:
        self.assertEqual(list(self.model.filter("")), list(self.model.entries))
        self.assertEqual(list(self.model.filter(None)), list(self.model.entries))

    def test_whitespace_search_behaves_like_empty(self) -> None:
        self.assertEqual(list(self.model.filter("   ")), list(self.model.filter("")))
        self.assertEqual(list(self.model.filter("\t\n")), list(self.model.entries))

    def test_key_match_is_case_insensitive(self) -> None:
        self.assertEqual(_keys(self.model.filter("VOL")), ["Volume", "volumeMax"])

    def test_value_match(self) -> None:
        self.assertEqual(_keys(self.model.filter("0.8")), ["Volume"])

    def test_search_is_plain_substring(self) -> None:
        self.assertEqual(list(self.model.filter(".*")), [])
        self.assertEqual(_keys(self.model.filter("ume m")), [])

    def test_filter_is_restartable_and_idempotent(self) -> None:
        view = self.model.filter("vol")
        first = list(view)
        second = list(view)
        self.assertEqual(first, second)
        self.assertEqual(list(self.model.filter("vol")), first)
        self.assertEqual(_keys(self.model.entries), ["Brightness", "Volume", "volumeMax"])

    def test_load_replaces_wholesale(self) -> None:
        self.model.load([Entry("only", "x")])
        self.assertEqual(list(self.model.filter("")), [Entry("only", "x")])
        self.assertEqual(len(self.model), 1)

    def test_duplicate_keys_are_all_kept(self) -> None:
        self.model.load([Entry("dup", "b"), Entry("dup", "a")])
        self.assertEqual(list(self.model.filter("")), [Entry("dup", "b"), Entry("dup", "a")])

    def test_empty_model(self) -> None:
        model = PrefsListModel()
        self.assertEqual(list(model.filter("")), [])
        self.assertEqual(list(model.filter("x")), [])

    def test_clear(self) -> None:
        self.model.clear()
        self.assertEqual(self.model.entries, ())

    def test_view_keeps_the_list_it_was_made_from(self) -> None:
        view = self.model.filter("")
        self.model.load([])
        self.assertEqual(len(list(view)), 3)

    def test_order_is_by_code_point(self) -> None:
        self.model.load([Entry("\U0001F600", "emoji"), Entry("\uFFFD", "replacement"), Entry("a", "x")])
        self.assertEqual(_keys(self.model.entries), ["a", "\uFFFD", "\U0001F600"])

    def test_helpers(self) -> None:
        self.assertTrue(is_blank_search("  "))
        self.assertFalse(is_blank_search(" a "))
        self.assertTrue(matches_search(Entry("Key", "Value"), "alu"))
        self.assertFalse(matches_search(Entry("Key", "Value"), "zzz"))


if __name__ == "__main__":
    unittest.main()
