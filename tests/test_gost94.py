import pytest

from digestkit.gost94 import (
    CRYPTO_PRO_PARAMS,
    S2015_PARAMS,
    TEST_PARAMS,
    Gost94,
    Gost94Params,
)

FOX = b"The quick brown fox jumps over the lazy dog"


def test_cryptopro_fox():
    h = Gost94(CRYPTO_PRO_PARAMS)
    h.update(FOX)
    assert h.hexdigest() == "9004294a361a508c586fe53d1f1b02746765e71b765472786e4770d565830a76"


def test_cryptopro_empty():
    assert Gost94(CRYPTO_PRO_PARAMS).hexdigest() == (
        "981e5f3ca30c841487830f84fb433e13ac1101569b9c13584ac483234cd656c0"
    )


def test_test_params_empty():
    assert Gost94(TEST_PARAMS).hexdigest() == (
        "ce85b99cc46752fffee35cab9a7b0278abb4c2d2055cff685af4912c49490f8d"
    )


def test_test_params_fox():
    assert Gost94(TEST_PARAMS, FOX).hexdigest() == (
        "77b7fa410c9ac58a25f49bca7d0468c9296529315eaca76bd1a10f376d1f4294"
    )


def test_default_params_are_cryptopro():
    assert Gost94(data=FOX).digest() == Gost94(CRYPTO_PRO_PARAMS, FOX).digest()


def test_gost_engine_vectors():
    h = Gost94(CRYPTO_PRO_PARAMS)
    for _ in range(128):
        h.update(b"12345670")
    assert h.hexdigest() == "f7fc6d16a6a5c12ac4f7d320e0fd0d8354908699125e09727a4ef929122b1cae"
    h.reset()

    for _ in range(128):
        h.update(b"\x00\x01\x02\x15\x84\x67\x45\x31")
    assert h.hexdigest() == "69f529aa82d9344ab0fa550cdf4a70ecfd92a38b5520b1906329763e09105196"
    h.reset()

    buf = b"12345670" * 128
    h.update(buf[:539])
    assert h.hexdigest() == "bd5f1e4b539c7b00f0866afdbc8ed452503a18436061747a343f43efe888aac9"
    h.reset()

    for _ in range(4096):
        for _ in range(7):
            h.update(b"121345678")
        h.update(b"1234567\n")
    h.update(b"12345\n")
    assert h.hexdigest() == "e5d3ac4ea3f67896c51ff919cedb9405ad771e39f0f2eab103624f9a758e506f"


def test_split_updates_match_single_update():
    data = bytes(range(256)) * 3
    whole = Gost94(TEST_PARAMS, data).digest()
    h = Gost94(TEST_PARAMS)
    for size in (1, 31, 32, 33, 100):
        pass
    pieces = [data[:1], data[1:32], data[32:65], data[65:500], data[500:]]
    for piece in pieces:
        h.update(piece)
    assert h.digest() == whole


def test_digest_does_not_consume_state():
    h = Gost94(S2015_PARAMS, b"abc")
    first = h.digest()
    assert h.digest() == first
    h.update(b"def")
    assert h.digest() == Gost94(S2015_PARAMS, b"abcdef").digest()


def test_copy_is_independent():
    h = Gost94(CRYPTO_PRO_PARAMS, b"prefix")
    clone = h.copy()
    clone.update(b"more")
    assert h.digest() == Gost94(CRYPTO_PRO_PARAMS, b"prefix").digest()
    assert clone.digest() == Gost94(CRYPTO_PRO_PARAMS, b"prefixmore").digest()


def test_reset_restores_empty_state():
    h = Gost94(TEST_PARAMS, FOX)
    h.reset()
    assert h.hexdigest() == "ce85b99cc46752fffee35cab9a7b0278abb4c2d2055cff685af4912c49490f8d"


def test_parameter_sets_differ():
    digests = {Gost94(p, FOX).digest() for p in (CRYPTO_PRO_PARAMS, S2015_PARAMS, TEST_PARAMS)}
    assert len(digests) == 3
    assert all(len(d) == 32 for d in digests)


def test_name_follows_params():
    assert Gost94(S2015_PARAMS).name == "Gost94s2015"


def test_invalid_sbox_shape():
    with pytest.raises(ValueError):
        Gost94Params(name="bad", s_box=((0,) * 16,) * 7)


def test_invalid_sbox_entry():
    with pytest.raises(ValueError):
        Gost94Params(name="bad", s_box=((16,) + (0,) * 15,) * 8)


def test_invalid_initial_value():
    with pytest.raises(ValueError):
        Gost94Params(name="bad", s_box=TEST_PARAMS.s_box, h0=bytes(31))