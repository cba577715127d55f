"""Four-lane word vectors as used by the BLAKE2 round function.

A vector is a tuple of four unsigned integers. Every operation returns a new
tuple. Word width is given in bits and must be 32 or 64.
"""

from __future__ import annotations

LANES = 4
WORD_BITS = (32, 64)


def _mask(bits):
    if bits not in WORD_BITS:
        raise ValueError(f"word width must be one of {WORD_BITS}, got {bits}")
    return (1 << bits) - 1


def _check_lanes(*vectors):
    for vector in vectors:
        if len(vector) != LANES:
            raise ValueError(f"expected {LANES} lanes, got {len(vector)}")


def gather(src, indices):
    """Build a vector from the words of ``src`` at the four given ``indices``."""
    indices = tuple(indices)
    _check_lanes(indices)
    return tuple(src[i] for i in indices)


def wrapping_add(a, b, bits):
    """Add two vectors lane by lane, modulo 2**bits."""
    mask = _mask(bits)
    _check_lanes(a, b)
    return tuple((x + y) & mask for x, y in zip(a, b))


def xor(a, b):
    """Exclusive-or two vectors lane by lane."""
    _check_lanes(a, b)
    return tuple(x ^ y for x, y in zip(a, b))


def rotate_right(v, n, bits):
    """Rotate every lane of ``v`` right by ``n`` bits within a ``bits``-wide word."""
    mask = _mask(bits)
    _check_lanes(v)
    n %= bits
    if n == 0:
        return tuple(x & mask for x in v)
    return tuple(((x & mask) >> n | (x << (bits - n))) & mask for x in v)


def shuffle_left(v, n):
    """Move the lanes of ``v`` left by ``n`` positions, wrapping around."""
    _check_lanes(v)
    n %= LANES
    v = tuple(v)
    return v[n:] + v[:n]


def shuffle_right(v, n):
    """Move the lanes of ``v`` right by ``n`` positions; undoes ``shuffle_left``."""
    return shuffle_left(v, -n)


def to_le_bytes(v, bits):
    """Serialise the lanes of ``v`` in order, each as a little-endian word."""
    _mask(bits)
    _check_lanes(v)
    width = bits // 8
    try:
        return b"".join(x.to_bytes(width, "little") for x in v)
    except OverflowError as exc:
        raise ValueError(f"lane value does not fit in {bits} bits") from exc