import pytest

from digestkit.k12 import KangarooTwelve, Reader, keccak_p12, right_encode


def digest(data, n):
    h = KangarooTwelve()
    h.update(data)
    return h.digest(n)


def test_empty_32():
    assert digest(b"", 32).hex() == (
        "1ac2d450fc3b4205d19da7bfca1b37513c0803577ac7167f06fe2ce1f0ef39e5"
    )


def test_empty_64():
    assert digest(b"", 64).hex() == (
        "1ac2d450fc3b4205d19da7bfca1b37513c0803577ac7167f06fe2ce1f0ef39e5"
        "4269c056b8c82e48276038b6d292966cc07a3d4645272e31ff38508139eb0a71"
    )


def test_empty_long_output_tail():
    assert digest(b"", 10032)[10000:].hex() == (
        "e8dc563642f7228c84684c898405d3a834799158c079b12880277a1d28e2ff6d"
    )


PAT_M = [
    "2bda92450e8b147f8a7cb629e784a058efca7cf7d8218e02d345dfaa65244a1f",
    "6bf75fa2239198db4772e36478f8e19b0f371205f6a9a93a273f51df37122888",
    "0c315ebcdedbf61426de7dcf8fb725d1e74675d7f5327a5067f367b108ecb67c",
    "cb552e2ec77d9910701d578b457ddf772c12e322e4ee7fe417f92c758f0d59d0",
    "8701045e22205345ff4dda05555cbb5c3af1a771c2b89baef37db43d9998b9fe",
]


@pytest.mark.parametrize("i", range(5))
def test_pat_m(i):
    m = bytes(j % 251 for j in range(17 ** i))
    assert digest(m, 32).hex() == PAT_M[i]


PAT_C = [
    "fab658db63e94a246188bf7af69a133045f46ee984c56e3c3328caaf1aa1a583",
    "d848c5068ced736f4462159b9867fd4c20b808acc3d5bc48e0b06ba0a3762ec4",
    "c389e5009ae57120854c2e8c64670ac01358cf4c1baf89447a724234dc7ced74",
    "75d2f86a2e644566726b4fbcfc5657b9dbcf070c7b0dca06450ab291d7443bcf",
]


@pytest.mark.parametrize("i", range(4))
def test_pat_c(i):
    m = b"\xff" * (2 ** i - 1)
    c = bytes(j % 251 for j in range(41 ** i))
    h = KangarooTwelve(customization=c)
    h.update(m)
    assert h.digest(32).hex() == PAT_C[i]


def test_constructor_data_matches_update():
    data = bytes(range(200))
    assert KangarooTwelve(data).digest(32) == digest(data, 32)


def test_shorter_output_is_prefix():
    data = b"prefix property"
    assert digest(data, 64)[:32] == digest(data, 32)


def test_reader_reads_once():
    reader = KangarooTwelve(b"abc").finalize_xof()
    first = reader.read(16)
    assert len(first) == 16
    with pytest.raises(RuntimeError):
        reader.read(16)


def test_reader_direct_matches_hasher():
    assert Reader(b"abc", b"").read(32) == digest(b"abc", 32)


def test_reset_keeps_customization():
    h = KangarooTwelve(b"data", customization=b"custom")
    h.reset()
    assert h.digest(32) == KangarooTwelve(customization=b"custom").digest(32)
    assert h.digest(32) != digest(b"", 32)


def test_hexdigest_matches_digest():
    h = KangarooTwelve(b"hex")
    assert h.hexdigest(20) == h.digest(20).hex()


@pytest.mark.parametrize(
    "value, expected",
    [(0, b"\x00"), (1, b"\x01\x01"), (255, b"\xff\x01"), (256, b"\x01\x00\x02")],
)
def test_right_encode(value, expected):
    assert right_encode(value) == expected


def test_right_encode_negative():
    with pytest.raises(ValueError):
        right_encode(-1)


def test_keccak_p12_leaves_input_unchanged():
    lanes = [0] * 25
    result = keccak_p12(lanes)
    assert lanes == [0] * 25
    assert len(result) == 25
    assert result == keccak_p12([0] * 25)
    assert all(0 <= v < 2 ** 64 for v in result)
    assert any(result)


def test_keccak_p12_wrong_length():
    with pytest.raises(ValueError):
        keccak_p12([0] * 24)