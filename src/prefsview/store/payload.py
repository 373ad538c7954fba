from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

# Same numbering as the winreg module; kept here so payloads can be
# classified on platforms without a registry.
REG_NONE = 0
REG_SZ = 1
REG_EXPAND_SZ = 2
REG_BINARY = 3
REG_DWORD = 4
REG_DWORD_BIG_ENDIAN = 5
REG_MULTI_SZ = 7
REG_QWORD = 11


class PayloadKind(str, Enum):
    BYTES = "bytes"
    INTEGER = "integer"
    TEXT = "text"


PayloadData = Union[bytes, int, str]


@dataclass(frozen=True)
class StorePayload:
    kind: PayloadKind
    data: PayloadData

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | None) -> "StorePayload":
        return cls(PayloadKind.BYTES, bytes(data or b""))

    @classmethod
    def from_int(cls, data: int) -> "StorePayload":
        return cls(PayloadKind.INTEGER, int(data))

    @classmethod
    def from_text(cls, data: object) -> "StorePayload":
        if isinstance(data, (list, tuple)):
            return cls(PayloadKind.TEXT, "\n".join(str(part) for part in data))
        return cls(PayloadKind.TEXT, "" if data is None else str(data))


_BYTE_TYPES = {REG_NONE, REG_BINARY}
_INTEGER_TYPES = {REG_DWORD, REG_DWORD_BIG_ENDIAN, REG_QWORD}


def classify_registry_value(data: object, reg_type: int) -> StorePayload:
    """Wrap a raw ``winreg.EnumValue`` datum in its payload variant."""
    if reg_type in _BYTE_TYPES and (data is None or isinstance(data, (bytes, bytearray))):
        return StorePayload.from_bytes(data)  # type: ignore[arg-type]
    if reg_type in _INTEGER_TYPES and isinstance(data, int):
        return StorePayload.from_int(data)
    return StorePayload.from_text(data)


def _bytes_to_text(data: PayloadData) -> str:
    return bytes(data).decode("utf-8", errors="replace")  # type: ignore[arg-type]


def _int_to_text(data: PayloadData) -> str:
    return str(int(data))


def _text_to_text(data: PayloadData) -> str:
    return str(data)


_CONVERTERS: dict[PayloadKind, Callable[[PayloadData], str]] = {
    PayloadKind.BYTES: _bytes_to_text,
    PayloadKind.INTEGER: _int_to_text,
    PayloadKind.TEXT: _text_to_text,
}


def payload_to_text(payload: StorePayload) -> str:
    return _CONVERTERS[payload.kind](payload.data)
