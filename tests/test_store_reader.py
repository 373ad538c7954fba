import os
import sys
import unittest
from contextlib import contextmanager
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from prefsview.store.errors import PrefsViewError, StoreUnavailable
from prefsview.store.keys import identity_key
from prefsview.store.payload import REG_BINARY, REG_DWORD, REG_SZ
from prefsview.store.reader import DEFAULT_STORE_LOCATION, Entry, PreferenceStoreReader, WinregBackend


class _MemoryBackend:
    def __init__(self, stores: dict, *, fail_after: int | None = None) -> None:
        self.stores = stores
        self.fail_after = fail_after
        self.opened: list[str] = []
        self.closed: list[str] = []

    @contextmanager
    def open(self, location: str):
        if location not in self.stores:
            raise StoreUnavailable(location, "not found")
        self.opened.append(location)
        try:
            yield self._records(location)
        finally:
            self.closed.append(location)

    def _records(self, location: str):
        for index, record in enumerate(self.stores[location]):
            if self.fail_after is not None and index >= self.fail_after:
                raise OSError(5, "Access is denied")
            yield record


class PreferenceStoreReaderTests(unittest.TestCase):
    def test_reads_and_normalizes_every_value(self) -> None:
        backend = _MemoryBackend(
            {
                DEFAULT_STORE_LOCATION: [
                    ("myFloat_h1234567890", 5, REG_DWORD),
                    ("kLastScene_h99", "Assets/Main.unity\0".encode("utf-8"), REG_BINARY),
                    ("plain", "text", REG_SZ),
                ]
            }
        )
        entries = PreferenceStoreReader(backend=backend).read_entries()
        self.assertEqual(
            entries,
            [
                Entry("myFloat", "5"),
                Entry("kLastScene", "Assets/Main.unity\0"),
                Entry("plain", "text"),
            ],
        )
        self.assertEqual(backend.opened, [DEFAULT_STORE_LOCATION])
        self.assertEqual(backend.closed, [DEFAULT_STORE_LOCATION])

    def test_colliding_keys_are_kept_as_separate_entries(self) -> None:
        backend = _MemoryBackend({"loc": [("dup_h1", "a", REG_SZ), ("dup_h2", "b", REG_SZ)]})
        entries = PreferenceStoreReader("loc", backend=backend).read_entries()
        self.assertEqual(entries, [Entry("dup", "a"), Entry("dup", "b")])

    def test_custom_key_normalizer(self) -> None:
        backend = _MemoryBackend({"loc": [("dup_h1", "a", REG_SZ)]})
        reader = PreferenceStoreReader("loc", key_normalizer=identity_key, backend=backend)
        self.assertEqual(reader.read_entries(), [Entry("dup_h1", "a")])

    def test_missing_location_raises_store_unavailable(self) -> None:
        backend = _MemoryBackend({})
        with self.assertRaises(StoreUnavailable) as ctx:
            PreferenceStoreReader("missing", backend=backend).read_entries()
        self.assertEqual(ctx.exception.location, "missing")
        self.assertIsInstance(ctx.exception, PrefsViewError)
        self.assertIn("missing", str(ctx.exception))

    def test_read_error_releases_handle_and_raises(self) -> None:
        backend = _MemoryBackend({"loc": [("a", "1", REG_SZ), ("b", "2", REG_SZ)]}, fail_after=1)
        with self.assertRaises(StoreUnavailable) as ctx:
            PreferenceStoreReader("loc", backend=backend).read_entries()
        self.assertEqual(backend.closed, ["loc"])
        self.assertEqual(ctx.exception.reason, "Access is denied")

    def test_empty_store_gives_empty_list(self) -> None:
        backend = _MemoryBackend({"loc": []})
        self.assertEqual(PreferenceStoreReader("loc", backend=backend).read_entries(), [])

    @unittest.skipIf(os.name == "nt", "registry is available on Windows")
    def test_winreg_backend_reports_unavailable_without_registry(self) -> None:
        with self.assertRaises(StoreUnavailable):
            PreferenceStoreReader(backend=WinregBackend()).read_entries()

    @unittest.skipUnless(os.name == "nt", "requires the Windows registry")
    def test_winreg_backend_missing_key(self) -> None:
        reader = PreferenceStoreReader("Software\\prefsview-tests\\does-not-exist\\")
        with self.assertRaises(StoreUnavailable):
            reader.read_entries()


if __name__ == "__main__":
    unittest.main()
