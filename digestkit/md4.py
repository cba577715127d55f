"""MD4 message digest (RFC 1320)."""

from __future__ import annotations

import struct

BLOCK_SIZE = 64
DIGEST_SIZE = 16

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)


def _rotl(value, shift):
    value &= _MASK32
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def _f(x, y, z):
    return (x & y) | (~x & z)


def _g(x, y, z):
    return (x & y) | (x & z) | (y & z)


def _h(x, y, z):
    return x ^ y ^ z


def _op1(a, b, c, d, k, s):
    return _rotl(a + _f(b, c, d) + k, s)


def _op2(a, b, c, d, k, s):
    return _rotl(a + _g(b, c, d) + k + 0x5A827999, s)


def _op3(a, b, c, d, k, s):
    return _rotl(a + _h(b, c, d) + k + 0x6ED9EBA1, s)


def _compress(state, block):
    data = struct.unpack("<16I", block)
    a, b, c, d = state

    for i in (0, 4, 8, 12):
        a = _op1(a, b, c, d, data[i], 3)
        d = _op1(d, a, b, c, data[i + 1], 7)
        c = _op1(c, d, a, b, data[i + 2], 11)
        b = _op1(b, c, d, a, data[i + 3], 19)

    for i in range(4):
        a = _op2(a, b, c, d, data[i], 3)
        d = _op2(d, a, b, c, data[i + 4], 5)
        c = _op2(c, d, a, b, data[i + 8], 9)
        b = _op2(b, c, d, a, data[i + 12], 13)

    for i in (0, 2, 1, 3):
        a = _op3(a, b, c, d, data[i], 3)
        d = _op3(d, a, b, c, data[i + 8], 9)
        c = _op3(c, d, a, b, data[i + 4], 11)
        b = _op3(b, c, d, a, data[i + 12], 15)

    return tuple((s + v) & _MASK32 for s, v in zip(state, (a, b, c, d)))


class Md4:
    """Incremental MD4 hasher with a hashlib-like interface."""

    name = "md4"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data=b""):
        self.reset()
        if data:
            self.update(data)

    def reset(self):
        """Return the hasher to its initial, empty state."""
        self._state = _INITIAL_STATE
        self._blocks = 0
        self._buffer = bytearray()

    def update(self, data):
        """Feed bytes-like ``data`` into the hash."""
        self._buffer.extend(memoryview(data).tobytes())
        full = len(self._buffer) - len(self._buffer) % BLOCK_SIZE
        state = self._state
        for offset in range(0, full, BLOCK_SIZE):
            state = _compress(state, bytes(self._buffer[offset:offset + BLOCK_SIZE]))
        self._state = state
        self._blocks = (self._blocks + full // BLOCK_SIZE) & _MASK64
        del self._buffer[:full]

    def copy(self):
        """Return an independent copy of the current state."""
        clone = Md4.__new__(Md4)
        clone._state = self._state
        clone._blocks = self._blocks
        clone._buffer = bytearray(self._buffer)
        return clone

    def digest(self):
        """Return the digest of everything fed so far; the state is kept."""
        bit_len = ((self._blocks * BLOCK_SIZE + len(self._buffer)) * 8) & _MASK64
        tail = bytes(self._buffer) + b"\x80"
        tail += bytes((56 - len(tail)) % BLOCK_SIZE)
        tail += struct.pack("<Q", bit_len)
        state = self._state
        for offset in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[offset:offset + BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self):
        return self.digest().hex()

    def __repr__(self):
        return "Md4()"