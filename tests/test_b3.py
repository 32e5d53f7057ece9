import pytest

from doppel.b3 import Blake3, blake3_digest


def _sample(length):
    return bytes(i % 251 for i in range(length))


def test_empty_input_vector():
    assert Blake3().hexdigest() == (
        "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"
    )


def test_abc_vector():
    assert blake3_digest(b"abc").hex() == (
        "6437b3ac38465133ffb63b75273a8db548c558465d79db03fd359c6cd5bd9d85"
    )


@pytest.mark.parametrize(
    "length", [0, 1, 63, 64, 65, 1023, 1024, 1025, 2048, 2049, 3072, 5000]
)
@pytest.mark.parametrize("piece", [1, 7, 64, 1000])
def test_incremental_matches_one_shot(length, piece):
    data = _sample(length)
    hasher = Blake3()
    for start in range(0, length, piece):
        hasher.update(data[start:start + piece])
    assert hasher.digest() == blake3_digest(data)


def test_digest_does_not_consume_state():
    hasher = Blake3(b"hello ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"world")
    assert hasher.digest() == blake3_digest(b"hello world")


def test_hexdigest_matches_digest():
    hasher = Blake3(_sample(1500))
    assert hasher.hexdigest() == hasher.digest().hex()
    assert len(hasher.hexdigest()) == 64


@pytest.mark.parametrize("length", [0, 100, 3000])
def test_extended_output_extends_default(length):
    data = _sample(length)
    long_out = Blake3(data, digest_size=131).digest()
    assert len(long_out) == 131
    assert long_out[:32] == blake3_digest(data)
    assert long_out[:64] == Blake3(data, digest_size=64).digest()


def test_accepts_bytes_like_objects():
    data = _sample(2100)
    expected = blake3_digest(data)
    assert blake3_digest(bytearray(data)) == expected
    assert blake3_digest(memoryview(data)) == expected


def test_distinct_inputs_give_distinct_digests():
    digests = {blake3_digest(_sample(n)) for n in range(0, 2200, 100)}
    assert len(digests) == 22


def test_invalid_digest_size():
    with pytest.raises(ValueError):
        Blake3(digest_size=0)


def test_text_is_rejected():
    with pytest.raises(TypeError):
        Blake3().update("text")