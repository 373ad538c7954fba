"""Reading the editor's preference store."""

from .errors import PrefsViewError, StoreUnavailable
from .keys import DEFAULT_KEY_MARKER, KeyNormalizer, identity_key, truncate_at_marker
from .payload import PayloadKind, StorePayload, classify_registry_value, payload_to_text
from .reader import Entry, PreferenceStoreReader, RawRecord, WinregBackend

__all__ = [
    "DEFAULT_KEY_MARKER",
    "Entry",
    "KeyNormalizer",
    "PayloadKind",
    "PreferenceStoreReader",
    "PrefsViewError",
    "RawRecord",
    "StorePayload",
    "StoreUnavailable",
    "WinregBackend",
    "classify_registry_value",
    "identity_key",
    "payload_to_text",
    "truncate_at_marker",
]
