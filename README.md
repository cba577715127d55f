# digestkit

Hash functions written in plain Python, with no dependencies beyond the
standard library. The hashers follow the familiar `hashlib` style:
`update()`, `digest()` and `hexdigest()`, and the fixed-output hashers also
have `copy()`. All of them have `reset()`, which returns the hasher to its
initial state. `digest()` does not change the hasher, so more data can be fed
afterwards.

Included:

- `digestkit.md2.Md2`: MD2, 16-byte digest
- `digestkit.md4.Md4`: MD4, 16-byte digest
- `digestkit.md5.Md5`: MD5, 16-byte digest; the block function is also
  available as `digestkit.md5.compress_block(state, block)`
- `digestkit.gost94.Gost94`: GOST R 34.11-94, 32-byte digest, with a choice of
  `Gost94Params` parameter sets
- `digestkit.k12.KangarooTwelve`: the KangarooTwelve extendable-output
  function, with an optional customization string
- `digestkit.blake2.Blake2b` and `digestkit.blake2.Blake2s`: BLAKE2 with
  variable output size, keyed (MAC) mode, salt and personalization
- `digestkit.lanes`: the four-lane word-vector helpers used by the BLAKE2
  round function (`gather`, `wrapping_add`, `xor`, `rotate_right`,
  `shuffle_left`, `shuffle_right`, `to_le_bytes`)

## Installation

```
pip install digestkit
```

## Usage

```python
from digestkit.md5 import Md5

h = Md5()
h.update(b"hello world")
assert h.hexdigest() == "5eb63bbbe01eeed093cb22bb8f5acdc3"
```

Data can also be passed to the constructor:

```python
from digestkit.md4 import Md4

assert Md4(b"hello world").hexdigest() == "aa010fbc1d14c795d86ef98c95479d17"
```

### GOST R 34.11-94

Three parameter sets are provided as module constants:
`CRYPTO_PRO_PARAMS` (the default), `S2015_PARAMS` (the S-box of
GOST R 34.12-2015) and `TEST_PARAMS`. A custom `Gost94Params(name, s_box, h0)`
can be built too; an S-box must have 8 rows of 16 four-bit values and `h0`
must be 32 bytes, otherwise `ValueError` is raised.

```python
from digestkit.gost94 import Gost94, TEST_PARAMS

h = Gost94()  # CryptoPro parameters
h.update(b"The quick brown fox jumps over the lazy dog")
print(h.hexdigest())

t = Gost94(TEST_PARAMS, b"message")
print(t.name, t.hexdigest())
```

### KangarooTwelve

KangarooTwelve produces output of any length you ask for:

```python
from digestkit.k12 import KangarooTwelve

k = KangarooTwelve(b"", customization=b"")
assert k.hexdigest(32) == (
    "1ac2d450fc3b4205d19da7bfca1b37513c0803577ac7167f06fe2ce1f0ef39e5"
)

reader = KangarooTwelve(b"message").finalize_xof()
output = reader.read(64)
```

A `Reader` can be read only once; a second `read()` raises `RuntimeError`.
`reset()` discards the input but keeps the customization string. The input
is held in memory until output is read.

### BLAKE2

```python
from digestkit.blake2 import Blake2b, Blake2s

assert Blake2b(b"hello world").hexdigest().startswith("021ced8799296cec")
assert Blake2s(b"hello world").hexdigest().startswith("9aec680679456110")

short = Blake2b(b"my_input", digest_size=10)
assert short.hexdigest() == "2cc55c84e416924e6400"

mac = Blake2s(b"message", key=b"secret", person=b"personal")
print(mac.hexdigest())
```

`digest_size` runs from 1 to 64 bytes for `Blake2b` and 1 to 32 for
`Blake2s`. The key may be as long as the largest digest size (64 or 32
bytes), and salt and personalization up to a quarter of that. Values out of
range raise `ValueError`. `reset()` keeps the key, salt and personalization.

## What this package does not do

It is a library only: there is no command-line tool. Everything is computed
in pure Python, so it is far slower than `hashlib`, and no effort is made to
run in constant time.

## Running the tests

```
pip install -e ".[test]"
pytest
```