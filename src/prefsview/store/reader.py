from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Protocol, Tuple

from ..logging_utils import get_logger
from .errors import StoreUnavailable
from .keys import KeyNormalizer, default_key_normalizer
from .payload import classify_registry_value, payload_to_text

LOGGER = get_logger(__name__)

# Relative to HKEY_CURRENT_USER.
DEFAULT_STORE_LOCATION = "Software\\Unity Technologies\\Unity Editor 5.x\\"

# (value name, data, registry type) as returned by winreg.EnumValue.
RawRecord = Tuple[str, Any, int]


@dataclass(frozen=True)
class Entry:
    key: str
    value: str


class StoreBackend(Protocol):
    def open(self, location: str): ...


class WinregBackend:
    """Read-only access to a key under a registry hive (HKCU by default)."""

    def __init__(self, hive: int | None = None) -> None:
        self._hive = hive

    @contextmanager
    def open(self, location: str) -> Iterator[Iterable[RawRecord]]:
        if os.name != "nt":
            raise StoreUnavailable(location, "the Windows registry is not available on this platform")
        import winreg

        hive = winreg.HKEY_CURRENT_USER if self._hive is None else self._hive
        try:
            handle = winreg.OpenKey(hive, location.rstrip("\\"), 0, winreg.KEY_READ)
        except OSError as exc:
            raise StoreUnavailable(location, exc.strerror or str(exc)) from exc
        with handle:
            yield self._iter_values(winreg, handle)

    @staticmethod
    def _iter_values(winreg, handle) -> Iterator[RawRecord]:
        value_count = winreg.QueryInfoKey(handle)[1]
        for index in range(value_count):
            name, data, reg_type = winreg.EnumValue(handle, index)
            yield name, data, reg_type


class PreferenceStoreReader:
    def __init__(
        self,
        location: str = DEFAULT_STORE_LOCATION,
        *,
        key_normalizer: KeyNormalizer | None = None,
        backend: StoreBackend | None = None,
    ) -> None:
        self.location = location
        self._key_normalizer = key_normalizer or default_key_normalizer
        self._backend = backend if backend is not None else WinregBackend()

    def decode_record(self, record: RawRecord) -> Entry:
        name, data, reg_type = record
        payload = classify_registry_value(data, reg_type)
        return Entry(self._key_normalizer(name), payload_to_text(payload))

    def read_entries(self) -> list[Entry]:
        """Read every value stored at the location in one pass.

        Raises StoreUnavailable if the location cannot be opened or read.
        The store handle is closed before this returns.
        """
        entries: list[Entry] = []
        try:
            with self._backend.open(self.location) as records:
                try:
                    for record in records:
                        entries.append(self.decode_record(record))
                except OSError as exc:
                    raise StoreUnavailable(self.location, exc.strerror or str(exc)) from exc
        except StoreUnavailable as exc:
            LOGGER.warning("Reading preference store failed: %s", exc)
            raise
        LOGGER.debug("Read %d entries from %s", len(entries), self.location)
        return entries
