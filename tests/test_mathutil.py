import pytest
from hypothesis import given, strategies as st

from chainbytes import mathutil


def test_power():
    assert mathutil.power(16, 2) == 256


def test_power_non_positive_exponent():
    assert mathutil.power(7, 0) == 1
    assert mathutil.power(7, -3) == 1


@pytest.mark.parametrize(
    "value, little_endian, length, expected",
    [
        (-1234, False, -1, bytes([4, 210])),
        (-1234, True, -1, bytes([210, 4])),
        (0, False, -1, bytes([0])),
        (1234, False, 4, bytes([0, 0, 4, 210])),
        (1234, True, 4, bytes([210, 4, 0, 0])),
    ],
)
def test_to_uint8_slice(value, little_endian, length, expected):
    assert mathutil.to_uint8_slice(value, little_endian, length) == expected


def test_to_uint8_slice_too_long():
    with pytest.raises(ValueError):
        mathutil.to_uint8_slice(0x123456, False, 2)


def test_from_twos():
    assert mathutil.from_twos(0xFB2E, 16) == -1234


def test_to_twos():
    assert mathutil.to_twos(-1234, 16) == 0xFB2E
    assert mathutil.to_twos(1234, 16) == 1234


def test_inotn():
    assert mathutil.inotn(0xFB2E, 16) == 1233
    assert mathutil.inotn(0, 8) == 0xFF
    assert mathutil.inotn(0, 0) == 0


def test_small_helpers():
    assert mathutil.iaddn(5, 3) == 8
    assert mathutil.clone(7) == 7
    assert mathutil.absolute(-5) == 5
    assert mathutil.andln(0x1234, 0xFF) == 0x34
    assert mathutil.iushrn(0x1234, 8, -1, False) == 0x12


def test_bit_len_and_count_bits():
    assert mathutil.bit_len(1234) == 11
    assert mathutil.bit_len(-1234) == 11
    assert mathutil.count_bits(0x3FFFFFF) == 26
    assert mathutil.count_bits(0) == 0


def test_count_bits_negative():
    with pytest.raises(ValueError):
        mathutil.count_bits(-1)


@given(st.integers(min_value=1, max_value=64).flatmap(
    lambda w: st.tuples(st.just(w), st.integers(min_value=-(2**w - 1), max_value=-1))
))
def test_twos_round_trip(pair):
    width, value = pair
    encoded = mathutil.to_twos(value, width)
    assert 0 <= encoded < 2**width
    assert mathutil.from_twos(encoded, width) == value


@given(st.integers(min_value=0, max_value=2**128))
def test_to_uint8_slice_round_trip(value):
    data = mathutil.to_uint8_slice(value, False, -1)
    assert int.from_bytes(data, "big") == value