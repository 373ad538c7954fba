from __future__ import annotations

from typing import Iterable, Iterator

from ..store.reader import Entry


def is_blank_search(search_text: str | None) -> bool:
    return not str(search_text or "").strip()


def matches_search(entry: Entry, search_text: str) -> bool:
    needle = search_text.lower()
    return needle in entry.key.lower() or needle in entry.value.lower()


class FilteredEntries:
    """Entries of one loaded list that match a search string.

    Iterating again starts over; the underlying list is never modified.
    """

    def __init__(self, entries: tuple[Entry, ...], search_text: str | None) -> None:
        self._entries = entries
        self.search_text = str(search_text or "")

    def __iter__(self) -> Iterator[Entry]:
        if is_blank_search(self.search_text):
            return iter(self._entries)
        return (entry for entry in self._entries if matches_search(entry, self.search_text))

    def __repr__(self) -> str:
        return f"FilteredEntries(search_text={self.search_text!r}, total={len(self._entries)})"


class PrefsListModel:
    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries: tuple[Entry, ...] = ()
        self.load(entries)

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def load(self, entries: Iterable[Entry]) -> None:
        # Ordinal by code point and case-sensitive; stable for equal keys.
        self._entries = tuple(sorted(entries, key=lambda entry: entry.key))

    def clear(self) -> None:
        self._entries = ()

    def filter(self, search_text: str | None) -> FilteredEntries:
        return FilteredEntries(self._entries, search_text)
