from .entries import FilteredEntries, PrefsListModel, is_blank_search, matches_search
from .session import PrefsSession

__all__ = [
    "FilteredEntries",
    "PrefsListModel",
    "PrefsSession",
    "is_blank_search",
    "matches_search",
]
