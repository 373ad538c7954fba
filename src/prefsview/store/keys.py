from __future__ import annotations

from typing import Callable

DEFAULT_KEY_MARKER = "_h"

KeyNormalizer = Callable[[str], str]


def truncate_at_marker(marker: str = DEFAULT_KEY_MARKER) -> KeyNormalizer:
    """Build a normalizer that cuts raw value names at the first ``marker``.

    The editor appends ``_h<hash>`` to every value name it writes, e.g.
    ``myFloat_h1234567890``. An empty marker leaves names untouched.
    """
    if not marker:
        return identity_key

    def _normalize(raw_name: str) -> str:
        return raw_name.split(marker, 1)[0]

    return _normalize


def identity_key(raw_name: str) -> str:
    return raw_name


default_key_normalizer = truncate_at_marker(DEFAULT_KEY_MARKER)
