"""Mapping and morphing between a plaintext, a cover ciphertext and a key.

:func:`map` derives a key from a plaintext and a cover ciphertext; :func:`morph`
reads the plaintext back out of the ciphertext with that key.  Both directions
reduce with Python's floor-modulo so every stored byte lands in ``[0, 255]``.
"""

from __future__ import annotations

from typing import Final, Union

from .exceptions import ErrorKind, InvalidArgumentError, OutOfRangeError
from .key import KEY_HEADER_SIZE, START_INDEX_MAX, pack_start_index, unpack_start_index

__all__ = ["BYTE_MODULUS", "map", "morph"]

BYTE_MODULUS: Final[int] = 256

BytesLike = Union[bytes, bytearray, memoryview]


def _require_bytes(value: BytesLike | None, name: str) -> bytes:
    if value is None:
        raise InvalidArgumentError(ErrorKind.NULL_INPUT, name, f"The {name} is null!")
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, not {type(value).__name__}")
    return bytes(value)


def map(plaintext: BytesLike, ciphertext: BytesLike, start_index: int = 0) -> bytes:
    """Generate a key that deduces *plaintext* from *ciphertext*.

    Args:
        plaintext: The data to hide.
        ciphertext: The cover data combined with the plaintext to derive the key.
            Must be at least as long as ``start_index + len(plaintext)``.
        start_index: Offset into *ciphertext* where the mapped window begins.

    Returns:
        The key: the start index as a 4-byte signed little-endian integer
        followed by one difference byte per plaintext byte.

    Raises:
        InvalidArgumentError: If an input is ``None`` (``NULL_INPUT``) or the
            ciphertext is shorter than the plaintext (``CIPHERTEXT_TOO_SMALL``).
        OutOfRangeError: If *start_index* is negative or pushes the window past
            the end of the ciphertext (``START_INDEX_INVALID``).
    """

    plain = _require_bytes(plaintext, "plaintext")
    cover = _require_bytes(ciphertext, "ciphertext")

    if len(plain) > len(cover):
        raise InvalidArgumentError(
            ErrorKind.CIPHERTEXT_TOO_SMALL,
            "ciphertext",
            "The ciphertext is smaller than the plaintext!",
        )

    if not isinstance(start_index, int) or isinstance(start_index, bool):
        raise TypeError(f"start_index must be an int, not {type(start_index).__name__}")
    if start_index < 0 or start_index + len(plain) > len(cover) or start_index > START_INDEX_MAX:
        raise OutOfRangeError(
            ErrorKind.START_INDEX_INVALID,
            "start_index",
            "Index is outside the bounds of the array!",
        )

    window = cover[start_index : start_index + len(plain)]
    payload = bytes((p - c) % BYTE_MODULUS for p, c in zip(plain, window))
    return pack_start_index(start_index) + payload


def morph(ciphertext: BytesLike, key: BytesLike) -> bytes:
    """Derive the hidden message from *ciphertext* using *key*.

    Raises:
        InvalidArgumentError: ``NULL_INPUT`` for a missing argument, ``INVALID_KEY``
            when the key is too short to hold a start index or does not fit
            the ciphertext.
    """

    cover = _require_bytes(ciphertext, "ciphertext")
    blob = _require_bytes(key, "key")

    start_index = unpack_start_index(blob)
    payload = blob[KEY_HEADER_SIZE:]

    if (
        start_index < 0
        or start_index >= len(cover)
        or len(payload) > len(cover)
        or start_index + len(payload) > len(cover)
    ):
        raise InvalidArgumentError(ErrorKind.INVALID_KEY, "key", "Invalid key!")

    window = cover[start_index : start_index + len(payload)]
    return bytes((c + k) % BYTE_MODULUS for c, k in zip(window, payload))
