import random
import struct

import pytest

from chug.cipher import map, morph
from chug.exceptions import ErrorKind, InvalidArgumentError


def _key(start: int, payload: bytes = b"") -> bytes:
    return struct.pack("<i", start) + payload


def test_roundtrip_random_inputs():
    rng = random.Random(1234)
    for _ in range(200):
        cover = bytes(rng.randrange(256) for _ in range(rng.randint(1, 64)))
        plaintext = bytes(rng.randrange(256) for _ in range(rng.randint(0, len(cover))))
        start = rng.randint(0, len(cover) - len(plaintext))
        if start == len(cover):
            continue
        assert morph(cover, map(plaintext, cover, start)) == plaintext


def test_roundtrip_reference_example():
    cover = "I really want some grilled cheese!".encode("utf-8")
    secret = "I secretly want steak".encode("utf-8")

    key = map(secret, cover)
    assert key[:4] == bytes(4)
    assert morph(cover, key) == secret


def test_roundtrip_non_ascii_text():
    cover = "یک متن پوششی نسبتاً طولانی برای آزمایش".encode("utf-8")
    secret = "راز".encode("utf-8")
    assert morph(cover, map(secret, cover, 5)) == secret


def test_morph_rejects_start_index_past_ciphertext():
    cover = b"ABCDE"
    with pytest.raises(InvalidArgumentError) as excinfo:
        morph(cover, _key(len(cover)))
    assert excinfo.value.kind is ErrorKind.INVALID_KEY


def test_morph_rejects_negative_start_index():
    with pytest.raises(InvalidArgumentError) as excinfo:
        morph(b"ABCDE", _key(-1, b"\x00"))
    assert excinfo.value.kind is ErrorKind.INVALID_KEY


def test_morph_rejects_payload_longer_than_ciphertext():
    with pytest.raises(InvalidArgumentError) as excinfo:
        morph(b"ABC", _key(0, b"\x00" * 4))
    assert excinfo.value.kind is ErrorKind.INVALID_KEY


def test_morph_rejects_payload_overrunning_window():
    with pytest.raises(InvalidArgumentError) as excinfo:
        morph(b"ABCDE", _key(3, b"\x00" * 3))
    assert excinfo.value.kind is ErrorKind.INVALID_KEY


@pytest.mark.parametrize("key", [b"", b"\x00", b"\x00\x00\x00"])
def test_morph_rejects_short_key(key):
    with pytest.raises(InvalidArgumentError) as excinfo:
        morph(b"ABCDE", key)
    assert excinfo.value.kind is ErrorKind.INVALID_KEY


@pytest.mark.parametrize(
    ("ciphertext", "key", "argument"),
    [(None, bytes(4), "ciphertext"), (b"ABCDE", None, "key")],
)
def test_morph_rejects_missing_input(ciphertext, key, argument):
    with pytest.raises(InvalidArgumentError) as excinfo:
        morph(ciphertext, key)
    assert excinfo.value.kind is ErrorKind.NULL_INPUT
    assert excinfo.value.argument == argument


def test_morph_adds_modulo_256():
    assert morph(bytes([200, 10]), _key(0, bytes([100, 250]))) == bytes([44, 4])
