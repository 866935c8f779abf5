"""Key layout helpers.

A key is a 4-byte signed little-endian start index followed by one difference
byte per plaintext byte::

    [int32 LE start index][payload ...]
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Final

from .exceptions import ErrorKind, InvalidArgumentError

__all__ = [
    "KEY_HEADER_SIZE",
    "START_INDEX_MAX",
    "START_INDEX_MIN",
    "ParsedKey",
    "build_key",
    "pack_start_index",
    "parse_key",
    "unpack_start_index",
]

_HEADER: Final[struct.Struct] = struct.Struct("<i")

KEY_HEADER_SIZE: Final[int] = _HEADER.size
START_INDEX_MIN: Final[int] = -(2**31)
START_INDEX_MAX: Final[int] = 2**31 - 1


@dataclass(frozen=True)
class ParsedKey:
    """Representation of a decoded key."""

    start_index: int
    payload: bytes

    @property
    def payload_length(self) -> int:
        return len(self.payload)

    def to_bytes(self) -> bytes:
        return build_key(self.start_index, self.payload)


def pack_start_index(index: int) -> bytes:
    """Return *index* as a 4-byte signed little-endian header."""

    if not START_INDEX_MIN <= index <= START_INDEX_MAX:
        raise ValueError("start index does not fit in a signed 32-bit integer")
    return _HEADER.pack(index)


def unpack_start_index(header: bytes) -> int:
    """Read the start index stored in the first four bytes of *header*."""

    if len(header) < KEY_HEADER_SIZE:
        raise InvalidArgumentError(
            ErrorKind.INVALID_KEY,
            "key",
            f"Invalid key: expected at least {KEY_HEADER_SIZE} bytes, got {len(header)}",
        )
    return _HEADER.unpack_from(header, 0)[0]


def build_key(start_index: int, payload: bytes) -> bytes:
    """Concatenate the start index header with *payload*."""

    return pack_start_index(start_index) + bytes(payload)


def parse_key(blob: bytes) -> ParsedKey:
    """Split *blob* into its start index and payload.

    Only the layout is checked here; whether the key fits a particular
    ciphertext is decided by :func:`chug.cipher.morph`.
    """

    start_index = unpack_start_index(blob)
    return ParsedKey(start_index=start_index, payload=bytes(blob[KEY_HEADER_SIZE:]))
