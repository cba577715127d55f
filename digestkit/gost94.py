"""GOST R 34.11-94 hash function with selectable parameter sets."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from functools import lru_cache

BLOCK_SIZE = 32
DIGEST_SIZE = 32

_MASK32 = 0xFFFFFFFF
_MOD256 = 1 << 256

_C = bytes((
    0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00,
    0x00, 0xFF, 0xFF, 0x00, 0xFF, 0x00, 0x00, 0xFF, 0xFF, 0x00, 0x00, 0x00, 0xFF, 0xFF, 0x00, 0xFF,
))

# Output byte j of the P transform takes input byte _P_ORDER[j].
_P_ORDER = tuple(8 * (j % 4) + j // 4 for j in range(32))


@dataclass(frozen=True)
class Gost94Params:
    """A GOST94 parameter set: S-box, initial hash value and name."""

    name: str
    s_box: tuple
    h0: bytes = bytes(32)

    def __post_init__(self):
        rows = tuple(tuple(int(v) for v in row) for row in self.s_box)
        if len(rows) != 8 or any(len(row) != 16 for row in rows):
            raise ValueError("S-box must have 8 rows of 16 entries")
        if any(not 0 <= v < 16 for row in rows for v in row):
            raise ValueError("S-box entries must be 4-bit values")
        h0 = bytes(self.h0)
        if len(h0) != BLOCK_SIZE:
            raise ValueError(f"initial hash value must be {BLOCK_SIZE} bytes")
        object.__setattr__(self, "s_box", rows)
        object.__setattr__(self, "h0", h0)


CRYPTO_PRO_PARAMS = Gost94Params(
    name="Gost94CryptoPro",
    s_box=(
        (10, 4, 5, 6, 8, 1, 3, 7, 13, 12, 14, 0, 9, 2, 11, 15),
        (5, 15, 4, 0, 2, 13, 11, 9, 1, 7, 6, 3, 12, 14, 10, 8),
        (7, 15, 12, 14, 9, 4, 1, 0, 3, 11, 5, 2, 6, 10, 8, 13),
        (4, 10, 7, 12, 0, 15, 2, 8, 14, 1, 6, 5, 13, 11, 9, 3),
        (7, 6, 4, 11, 9, 12, 2, 10, 1, 8, 0, 14, 15, 13, 3, 5),
        (7, 6, 2, 4, 13, 9, 15, 0, 10, 1, 5, 11, 8, 14, 12, 3),
        (13, 14, 4, 1, 7, 0, 5, 10, 3, 12, 8, 15, 6, 2, 9, 11),
        (1, 3, 10, 9, 5, 11, 4, 15, 8, 6, 7, 14, 13, 0, 2, 12),
    ),
)

S2015_PARAMS = Gost94Params(
    name="Gost94s2015",
    s_box=(
        (12, 4, 6, 2, 10, 5, 11, 9, 14, 8, 13, 7, 0, 3, 15, 1),
        (6, 8, 2, 3, 9, 10, 5, 12, 1, 14, 4, 7, 11, 13, 0, 15),
        (11, 3, 5, 8, 2, 15, 10, 13, 14, 1, 7, 4, 12, 9, 6, 0),
        (12, 8, 2, 1, 13, 4, 15, 6, 7, 0, 10, 5, 3, 14, 9, 11),
        (7, 15, 5, 10, 8, 1, 6, 13, 0, 9, 3, 14, 11, 4, 2, 12),
        (5, 13, 15, 6, 9, 2, 12, 10, 11, 7, 8, 1, 4, 3, 14, 0),
        (8, 14, 2, 5, 6, 9, 1, 12, 15, 4, 11, 0, 13, 10, 3, 7),
        (1, 7, 14, 13, 0, 5, 8, 3, 4, 15, 10, 6, 9, 12, 11, 2),
    ),
)

TEST_PARAMS = Gost94Params(
    name="Gost94Test",
    s_box=(
        (4, 10, 9, 2, 13, 8, 0, 14, 6, 11, 1, 12, 7, 15, 5, 3),
        (14, 11, 4, 12, 6, 13, 15, 10, 2, 3, 8, 1, 0, 7, 5, 9),
        (5, 8, 1, 13, 10, 3, 4, 2, 14, 15, 12, 7, 6, 0, 9, 11),
        (7, 13, 10, 1, 0, 8, 9, 15, 14, 4, 6, 12, 11, 2, 5, 3),
        (6, 12, 7, 1, 5, 15, 13, 8, 4, 10, 9, 14, 0, 3, 11, 2),
        (4, 11, 10, 0, 7, 2, 1, 13, 3, 6, 8, 5, 9, 12, 15, 14),
        (13, 11, 4, 1, 3, 15, 5, 9, 0, 10, 14, 7, 6, 8, 2, 12),
        (1, 15, 13, 0, 5, 7, 10, 4, 9, 2, 3, 14, 6, 11, 8, 12),
    ),
)


def _rotl11(value):
    return ((value << 11) | (value >> 21)) & _MASK32


@lru_cache(maxsize=None)
def _round_tables(s_box):
    """Byte-wise tables combining the S-box substitution with the 11-bit rotation."""
    tables = []
    for j in range(4):
        low, high = s_box[2 * j], s_box[2 * j + 1]
        shift = 8 * j
        tables.append(tuple(
            _rotl11((low[b & 0x0F] | (high[b >> 4] << 4)) << shift) for b in range(256)
        ))
    return tuple(tables)


def _encrypt(half, key, tables):
    """Encrypt an 8-byte value with the GOST 28147-89 block cipher."""
    t0, t1, t2, t3 = tables
    k = struct.unpack("<8I", key)
    a, b = struct.unpack("<2I", half)
    for ki in k + k + k + k[::-1]:
        x = (a + ki) & _MASK32
        a, b = b ^ t0[x & 0xFF] ^ t1[(x >> 8) & 0xFF] ^ t2[(x >> 16) & 0xFF] ^ t3[x >> 24], a
    return struct.pack("<2I", b, a)


def _xor(left, right):
    return bytes(x ^ y for x, y in zip(left, right))


def _transform_a(block):
    return block[8:] + _xor(block[:8], block[8:16])


def _transform_p(block):
    return bytes(block[i] for i in _P_ORDER)


def _psi(block, rounds):
    """Apply the psi linear feedback shift on 16-bit words ``rounds`` times."""
    words = list(struct.unpack("<16H", block))
    for _ in range(rounds):
        words.append(words[0] ^ words[1] ^ words[2] ^ words[3] ^ words[12] ^ words[15])
        del words[0]
    return struct.pack("<16H", *words)


def _step(h, m, tables):
    """The GOST94 step function: returns the new chaining value."""
    parts = [_encrypt(h[0:8], _transform_p(_xor(h, m)), tables)]

    u = _transform_a(h)
    v = _transform_a(_transform_a(m))
    parts.append(_encrypt(h[8:16], _transform_p(_xor(u, v)), tables))

    u = _xor(_transform_a(u), _C)
    v = _transform_a(_transform_a(v))
    parts.append(_encrypt(h[16:24], _transform_p(_xor(u, v)), tables))

    u = _transform_a(u)
    v = _transform_a(_transform_a(v))
    parts.append(_encrypt(h[24:32], _transform_p(_xor(u, v)), tables))

    s = b"".join(parts)
    mixed = _psi(_xor(_psi(s, 12), m), 1)
    return _psi(_xor(h, mixed), 61)


class Gost94:
    """Incremental GOST R 34.11-94 hasher with a hashlib-like interface."""

    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, params=CRYPTO_PRO_PARAMS, data=b""):
        self.params = params
        self._tables = _round_tables(params.s_box)
        self.reset()
        if data:
            self.update(data)

    @property
    def name(self):
        return self.params.name

    def reset(self):
        """Return the hasher to its initial, empty state."""
        self._h = self.params.h0
        self._n = 0
        self._sigma = 0
        self._buffer = bytearray()

    def update(self, data):
        """Feed bytes-like ``data`` into the hash."""
        self._buffer.extend(memoryview(data).tobytes())
        full = len(self._buffer) - len(self._buffer) % BLOCK_SIZE
        if not full:
            return
        self._n = (self._n + 8 * full) % _MOD256
        for offset in range(0, full, BLOCK_SIZE):
            self._compress(bytes(self._buffer[offset:offset + BLOCK_SIZE]))
        del self._buffer[:full]

    def copy(self):
        """Return an independent copy of the current state."""
        clone = Gost94.__new__(Gost94)
        clone.params = self.params
        clone._tables = self._tables
        clone._h = self._h
        clone._n = self._n
        clone._sigma = self._sigma
        clone._buffer = bytearray(self._buffer)
        return clone

    def digest(self):
        """Return the digest of everything fed so far; the state is kept."""
        return self.copy()._finalize()

    def hexdigest(self):
        return self.digest().hex()

    def _compress(self, block):
        self._h = _step(self._h, block, self._tables)
        self._sigma = (self._sigma + int.from_bytes(block, "little")) % _MOD256

    def _finalize(self):
        if self._buffer:
            self._n = (self._n + 8 * len(self._buffer)) % _MOD256
            self._compress(bytes(self._buffer) + bytes(BLOCK_SIZE - len(self._buffer)))
            self._buffer.clear()
        self._h = _step(self._h, self._n.to_bytes(BLOCK_SIZE, "little"), self._tables)
        self._h = _step(self._h, self._sigma.to_bytes(BLOCK_SIZE, "little"), self._tables)
        return self._h

    def __repr__(self):
        return f"{self.params.name}Core {{ .. }}"