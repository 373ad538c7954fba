from __future__ import annotations


class PrefsViewError(Exception):
    """Base class for errors raised by prefsview."""


class StoreUnavailable(PrefsViewError):
    """The preference store location is missing or cannot be read."""

    def __init__(self, location: str, reason: str = "") -> None:
        self.location = location
        self.reason = str(reason or "").strip()
        message = f"Preference store not available: {location}"
        if self.reason:
            message = f"{message} ({self.reason})"
        super().__init__(message)
