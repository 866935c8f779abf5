"""Helpers for moving between human-readable text, hex and raw bytes."""
from __future__ import annotations

import binascii
import re

from .exceptions import ErrorKind, InvalidArgumentError

DEFAULT_ENCODING = "utf-8"

_SEPARATORS = re.compile(r"[\s:\-]+")


def encode_text(text: str, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Encode *text* into the bytes fed to :func:`chug.cipher.map`."""

    if not isinstance(text, str):
        raise TypeError("text must be a str")
    return text.encode(encoding)


def decode_text(data: bytes, encoding: str = DEFAULT_ENCODING, errors: str = "strict") -> str:
    return bytes(data).decode(encoding, errors)


def to_hex(data: bytes) -> str:
    """Render *data* as lowercase hex without separators."""

    return bytes(data).hex()


def from_hex(text: str) -> bytes:
    """Parse hex text produced by :func:`to_hex`.

    Upper case digits and ``-``, ``:`` or whitespace separators are accepted so
    dumps such as ``49-20-73`` parse as well.
    """

    cleaned = _SEPARATORS.sub("", text)
    try:
        return binascii.unhexlify(cleaned)
    except (binascii.Error, ValueError) as exc:
        raise InvalidArgumentError(ErrorKind.INVALID_HEX, "text", "Invalid hex string") from exc


__all__ = ["DEFAULT_ENCODING", "decode_text", "encode_text", "from_hex", "to_hex"]
