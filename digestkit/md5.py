"""MD5 message digest (RFC 1321)."""

from __future__ import annotations

import struct

BLOCK_SIZE = 64
DIGEST_SIZE = 16

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_RC = (
    # round 1
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE, 0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    # round 2
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    # round 3
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C, 0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    # round 4
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1, 0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = ((7, 12, 17, 22), (5, 9, 14, 20), (4, 11, 16, 23), (6, 10, 15, 21))


def _rotl(value, shift):
    value &= _MASK32
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def _mix(round_index, x, y, z):
    if round_index == 0:
        return (x & y) | (~x & z)
    if round_index == 1:
        return (x & z) | (y & ~z)
    if round_index == 2:
        return x ^ y ^ z
    return y ^ (x | (~z & _MASK32))


def _word_index(round_index, step):
    if round_index == 0:
        return step
    if round_index == 1:
        return (5 * step + 1) % 16
    if round_index == 2:
        return (3 * step + 5) % 16
    return (7 * step) % 16


def compress_block(state, block):
    """Apply the MD5 compression function to one 64-byte block.

    ``state`` is a sequence of four 32-bit words; the new state is returned
    as a tuple.
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"MD5 block must be {BLOCK_SIZE} bytes, got {len(block)}")
    data = struct.unpack("<16I", bytes(block))
    a, b, c, d = state

    for step, constant in enumerate(_RC):
        round_index, position = divmod(step, 16)
        mixed = _mix(round_index, b, c, d)
        rotated = _rotl(
            mixed + a + data[_word_index(round_index, position)] + constant,
            _SHIFTS[round_index][position % 4],
        )
        a, b, c, d = d, (rotated + b) & _MASK32, b, c

    return tuple((s + v) & _MASK32 for s, v in zip(state, (a, b, c, d)))


class Md5:
    """Incremental MD5 hasher with a hashlib-like interface."""

    name = "md5"
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
            state = compress_block(state, self._buffer[offset:offset + BLOCK_SIZE])
        self._state = state
        self._blocks = (self._blocks + full // BLOCK_SIZE) & _MASK64
        del self._buffer[:full]

    def copy(self):
        """Return an independent copy of the current state."""
        clone = Md5.__new__(Md5)
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
            state = compress_block(state, tail[offset:offset + BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self):
        return self.digest().hex()

    def __repr__(self):
        return "Md5()"