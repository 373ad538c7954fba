from __future__ import annotations

from ..logging_utils import get_logger
from ..store.errors import StoreUnavailable
from ..store.reader import PreferenceStoreReader
from .entries import FilteredEntries, PrefsListModel

LOGGER = get_logger(__name__)


class PrefsSession:
    """Owns the loaded entries and re-reads them on demand."""

    def __init__(
        self,
        reader: PreferenceStoreReader | None = None,
        model: PrefsListModel | None = None,
    ) -> None:
        self.reader = reader if reader is not None else PreferenceStoreReader()
        self.model = model if model is not None else PrefsListModel()
        self.last_error: str | None = None

    @property
    def location(self) -> str:
        return self.reader.location

    def refresh(self) -> int:
        """Re-read the store and replace the loaded entries.

        On StoreUnavailable the previously loaded entries stay in place and
        the error is re-raised.
        """
        try:
            entries = self.reader.read_entries()
        except StoreUnavailable as exc:
            self.last_error = str(exc)
            raise
        self.model.load(entries)
        self.last_error = None
        LOGGER.info("Loaded %d preference entries from %s", len(self.model), self.location)
        return len(self.model)

    def filter(self, search_text: str | None) -> FilteredEntries:
        return self.model.filter(search_text)
