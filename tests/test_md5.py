import hashlib
import struct

import pytest

from digestkit.md5 import Md5, compress_block

VECTORS = [
    (b"", "d41d8cd98f00b204e9800998ecf8427e"),
    (b"a", "0cc175b9c0f1b6a831c399e269772661"),
    (b"abc", "900150983cd24fb0d6963f7d28e17f72"),
    (b"message digest", "f96b697d7cb7938d525a2f31aaf161d0"),
    (b"abcdefghijklmnopqrstuvwxyz", "c3fcd3d76192e4007dfb496cca67e13b"),
    (
        b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
        "d174ab98d277d9f5a5611c2c9f419d9f",
    ),
    (b"1234567890" * 8, "57edf4a22be3c955ac49da2e2107b67a"),
    (b"hello world", "5eb63bbbe01eeed093cb22bb8f5acdc3"),
]

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)


@pytest.mark.parametrize("message, expected", VECTORS)
def test_known_vectors(message, expected):
    assert Md5(message).hexdigest() == expected


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 129, 1000])
def test_matches_standard_library(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert Md5(data).digest() == hashlib.md5(data).digest()


@pytest.mark.parametrize("length", [0, 63, 64, 65, 200])
def test_split_updates_agree(length):
    data = bytes(i % 251 for i in range(length))
    h = Md5()
    for start in range(0, length, 13):
        h.update(data[start:start + 13])
    assert h.digest() == Md5(data).digest()


def test_compress_block_on_padded_empty_message():
    block = b"\x80" + bytes(63)
    state = compress_block(INITIAL_STATE, block)
    assert struct.pack("<4I", *state).hex() == "d41d8cd98f00b204e9800998ecf8427e"


def test_compress_block_rejects_wrong_length():
    with pytest.raises(ValueError):
        compress_block(INITIAL_STATE, bytes(63))


def test_digest_does_not_consume_state():
    h = Md5(b"hello")
    first = h.digest()
    assert h.digest() == first
    h.update(b" world")
    assert h.hexdigest() == "5eb63bbbe01eeed093cb22bb8f5acdc3"


def test_reset_returns_to_empty():
    h = Md5(b"y" * 130)
    h.reset()
    assert h.hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"


def test_copy_is_independent():
    h = Md5(b"abc")
    clone = h.copy()
    clone.update(b"def")
    assert h.hexdigest() == "900150983cd24fb0d6963f7d28e17f72"
    assert clone.digest() == hashlib.md5(b"abcdef").digest()


def test_rejects_str():
    with pytest.raises(TypeError):
        Md5().update("abc")