"""KangarooTwelve extendable-output function."""

from __future__ import annotations

import struct

RATE = 168
CHUNK_SIZE = 8192
_CV_SIZE = 32
_MASK64 = 0xFFFFFFFFFFFFFFFF

_RC = (
    0x0000_0000_8000_808B,
    0x8000_0000_0000_008B,
    0x8000_0000_0000_8089,
    0x8000_0000_0000_8003,
    0x8000_0000_0000_8002,
    0x8000_0000_0000_0080,
    0x0000_0000_0000_800A,
    0x8000_0000_8000_000A,
    0x8000_0000_8000_8081,
    0x8000_0000_0000_8080,
    0x0000_0000_8000_0001,
    0x8000_0000_8000_8008,
)

# ((t + 1) * (t + 2) / 2) % 64 for t in 0..24
_RHO = (1, 3, 6, 10, 15, 21, 28, 36, 45, 55, 2, 14, 27, 41, 56, 8, 25, 43, 62, 18, 39, 61, 20, 44)
_PI = (10, 7, 11, 17, 18, 3, 5, 16, 8, 21, 24, 4, 15, 23, 19, 13, 12, 2, 20, 14, 22, 9, 6, 1)


def _rotl(value, shift):
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def keccak_p12(lanes):
    """Apply the 12-round Keccak-p[1600] permutation to 25 lanes.

    Returns the permuted lanes as a new list; the argument is left unchanged.
    """
    state = list(lanes)
    if len(state) != 25:
        raise ValueError(f"expected 25 lanes, got {len(state)}")

    for rc in _RC:
        # theta
        c = [state[x] ^ state[x + 5] ^ state[x + 10] ^ state[x + 15] ^ state[x + 20]
             for x in range(5)]
        for x in range(5):
            d = c[(x + 4) % 5] ^ _rotl(c[(x + 1) % 5], 1)
            for y in range(0, 25, 5):
                state[x + y] ^= d

        # rho and pi
        current = state[1]
        for target, shift in zip(_PI, _RHO):
            current, state[target] = state[target], _rotl(current, shift)

        # chi
        for y in range(0, 25, 5):
            row = state[y:y + 5]
            for x in range(5):
                state[y + x] = row[x] ^ (~row[(x + 1) % 5] & row[(x + 2) % 5] & _MASK64)

        # iota
        state[0] ^= rc
    return state


def _permute(state):
    lanes = keccak_p12(struct.unpack("<25Q", state))
    return bytearray(struct.pack("<25Q", *lanes))


def right_encode(value):
    """Encode a non-negative integer as big-endian bytes followed by their count."""
    if value < 0:
        raise ValueError("right_encode requires a non-negative integer")
    encoded = value.to_bytes((value.bit_length() + 7) // 8, "big")
    return encoded + bytes([len(encoded)])


def _sponge(data, suffix, output_len):
    """TurboSHAKE-style sponge with rate 168 and the given domain suffix."""
    state = bytearray(200)
    block_size = min(len(data), RATE)
    state[:block_size] = data[:block_size]

    offset = block_size
    while offset < len(data):
        state = _permute(state)
        block_size = min(len(data) - offset, RATE)
        for i, byte in enumerate(data[offset:offset + block_size]):
            state[i] ^= byte
        offset += block_size
    if block_size == RATE:
        state = _permute(state)
        block_size = 0

    state[block_size] ^= suffix
    if suffix & 0x80 and block_size == RATE - 1:
        state = _permute(state)
    state[RATE - 1] ^= 0x80
    state = _permute(state)

    output = bytearray()
    remaining = output_len
    while remaining > 0:
        block_size = min(remaining, RATE)
        output += state[:block_size]
        remaining -= block_size
        if remaining > 0:
            state = _permute(state)
    return bytes(output)


class Reader:
    """Output reader for KangarooTwelve; it can be read exactly once."""

    def __init__(self, buffer, customization):
        self._buffer = bytes(buffer)
        self._customization = bytes(customization)
        self._finished = False

    def read(self, length):
        """Return ``length`` bytes of output.

        Raises RuntimeError when called a second time.
        """
        if self._finished:
            raise RuntimeError("multiple reads from a KangarooTwelve reader are unsupported")
        if length < 0:
            raise ValueError("output length must be non-negative")

        message = (self._buffer + self._customization
                   + right_encode(len(self._customization)))
        chunks = [message[i:i + CHUNK_SIZE] for i in range(0, len(message), CHUNK_SIZE)]

        if len(chunks) == 1:
            result = _sponge(chunks[0], 0x07, length)
        else:
            node = bytearray(chunks[0])
            node += b"\x03" + bytes(7)
            for chunk in chunks[1:]:
                node += _sponge(chunk, 0x0B, _CV_SIZE)
            node += right_encode(len(chunks) - 1)
            node += b"\xFF\xFF"
            result = _sponge(bytes(node), 0x06, length)

        self._finished = True
        return result


class KangarooTwelve:
    """The KangarooTwelve extendable-output function."""

    name = "k12"

    def __init__(self, data=b"", customization=b""):
        self._buffer = bytearray()
        self.customization = bytes(customization)
        if data:
            self.update(data)

    def update(self, data):
        """Feed bytes-like ``data`` into the function."""
        self._buffer.extend(memoryview(data).tobytes())

    def finalize_xof(self):
        """Return a Reader over the output for the data fed so far."""
        return Reader(self._buffer, self.customization)

    def digest(self, length):
        """Return ``length`` output bytes; the state is kept."""
        return self.finalize_xof().read(length)

    def hexdigest(self, length):
        return self.digest(length).hex()

    def reset(self):
        """Discard the input fed so far; the customization string is kept."""
        self._buffer.clear()

    def __repr__(self):
        return "KangarooTwelve()"