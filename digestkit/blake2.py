"""BLAKE2b and BLAKE2s hash functions with keyed, salted and personalised modes."""

from __future__ import annotations

import struct

from digestkit.lanes import (
    gather,
    rotate_right,
    shuffle_left,
    shuffle_right,
    to_le_bytes,
    wrapping_add,
    xor,
)

SIGMA = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
)

BLAKE2B_IV = (
    0x6A09E667F3BCC908,
    0xBB67AE8584CAA73B,
    0x3C6EF372FE94F82B,
    0xA54FF53A5F1D36F1,
    0x510E527FADE682D1,
    0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B,
    0x5BE0CD19137E2179,
)

BLAKE2S_IV = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_MASK64 = 0xFFFFFFFFFFFFFFFF


def _quarter_round(v, m, rd, rb, bits):
    a, b, c, d = v
    a = wrapping_add(wrapping_add(a, b, bits), m, bits)
    d = rotate_right(xor(d, a), rd, bits)
    c = wrapping_add(c, d, bits)
    b = rotate_right(xor(b, c), rb, bits)
    return [a, b, c, d]


class Blake2:
    """Common BLAKE2 machinery; use Blake2b or Blake2s."""

    name = "blake2"
    word_bits = None
    block_size = None
    max_digest_size = None
    rotations = None
    rounds = None
    iv = None

    def __init__(self, data=b"", *, digest_size=None, key=b"", salt=b"", person=b""):
        if self.word_bits is None:
            raise TypeError("Blake2 is abstract; use Blake2b or Blake2s")
        if digest_size is None:
            digest_size = self.max_digest_size
        if not 1 <= digest_size <= self.max_digest_size:
            raise ValueError(
                f"digest_size must be between 1 and {self.max_digest_size}, got {digest_size}"
            )
        key = bytes(key)
        salt = bytes(salt)
        person = bytes(person)
        if len(key) > self.max_digest_size:
            raise ValueError(f"key must be at most {self.max_digest_size} bytes")
        limit = self.max_digest_size // 4
        if len(salt) > limit:
            raise ValueError(f"salt must be at most {limit} bytes")
        if len(person) > limit:
            raise ValueError(f"person must be at most {limit} bytes")

        self.digest_size = digest_size
        self._key = key
        word_code = "Q" if self.word_bits == 64 else "I"
        pair = struct.Struct(f"<2{word_code}")
        params = (
            0x01010000 ^ (len(key) << 8) ^ digest_size, 0, 0, 0,
            *pair.unpack(salt.ljust(limit, b"\0")),
            *pair.unpack(person.ljust(limit, b"\0")),
        )
        self._h0 = (
            xor(self.iv[:4], params[:4]),
            xor(self.iv[4:], params[4:]),
        )
        self._words = struct.Struct(f"<16{word_code}")
        self.reset()
        if data:
            self.update(data)

    @property
    def _word_mask(self):
        return (1 << self.word_bits) - 1

    def reset(self):
        """Return the hasher to its initial state, keeping key, salt and person."""
        self._h = self._h0
        self._t = 0
        self._buffer = bytearray()
        if self._key:
            self._buffer.extend(self._key.ljust(self.block_size, b"\0"))

    def update(self, data):
        """Feed bytes-like ``data`` into the hash."""
        buf = self._buffer
        buf.extend(memoryview(data).tobytes())
        bs = self.block_size
        # The last block is held back until more data arrives or the hash is finalised.
        count = max(0, (len(buf) - 1) // bs)
        for offset in range(0, count * bs, bs):
            self._t = (self._t + bs) & _MASK64
            self._compress(bytes(buf[offset:offset + bs]), final=False)
        del buf[:count * bs]

    def copy(self):
        """Return an independent copy of the current state."""
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._buffer = bytearray(self._buffer)
        return clone

    def digest(self):
        """Return the digest of everything fed so far; the state is kept."""
        return self.copy()._finalize()

    def hexdigest(self):
        return self.digest().hex()

    def _finalize(self):
        self._t = (self._t + len(self._buffer)) & _MASK64
        self._compress(bytes(self._buffer).ljust(self.block_size, b"\0"), final=True)
        out = to_le_bytes(self._h[0], self.word_bits) + to_le_bytes(self._h[1], self.word_bits)
        return out[:self.digest_size]

    def _compress(self, block, final):
        bits = self.word_bits
        mask = self._word_mask
        rd1, rb1, rd2, rb2 = self.rotations
        m = self._words.unpack(block)

        t0 = self._t & mask
        t1 = (self._t >> 32) & mask if bits == 32 else 0
        f0 = mask if final else 0

        h0, h1 = self._h
        v = [h0, h1, tuple(self.iv[:4]), xor(self.iv[4:], (t0, t1, f0, 0))]

        for s in SIGMA[:self.rounds]:
            v = _quarter_round(v, gather(m, s[0:8:2]), rd1, rb1, bits)
            v = _quarter_round(v, gather(m, s[1:8:2]), rd2, rb2, bits)
            v = [v[0], shuffle_left(v[1], 1), shuffle_left(v[2], 2), shuffle_left(v[3], 3)]
            v = _quarter_round(v, gather(m, s[8:16:2]), rd1, rb1, bits)
            v = _quarter_round(v, gather(m, s[9:16:2]), rd2, rb2, bits)
            v = [v[0], shuffle_right(v[1], 1), shuffle_right(v[2], 2), shuffle_right(v[3], 3)]

        self._h = (xor(h0, xor(v[0], v[2])), xor(h1, xor(v[1], v[3])))

    def __repr__(self):
        return f"{type(self).__name__}(digest_size={self.digest_size})"


class Blake2b(Blake2):
    """BLAKE2b: 64-bit words, 128-byte blocks, digests of up to 64 bytes."""

    name = "blake2b"
    word_bits = 64
    block_size = 128
    max_digest_size = 64
    rotations = (32, 24, 16, 63)
    rounds = 12
    iv = BLAKE2B_IV


class Blake2s(Blake2):
    """BLAKE2s: 32-bit words, 64-byte blocks, digests of up to 32 bytes."""

    name = "blake2s"
    word_bits = 32
    block_size = 64
    max_digest_size = 32
    rotations = (16, 12, 8, 7)
    rounds = 10
    iv = BLAKE2S_IV