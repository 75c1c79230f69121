from unittest import mock

import pytest

from md5chunks.utils import (
    INITIAL_STATE,
    build_signature,
    is_big_endian,
    left_rotate_32bits,
    preprocess,
    sig2hex,
    to_little_endian_32,
    to_little_endian_64,
)


def test_left_rotate_basic():
    assert left_rotate_32bits(0x12345678, 4) == 0x23456781


def test_left_rotate_full():
    assert left_rotate_32bits(0xABCDEF01, 32) == 0xABCDEF01


def test_left_rotate_zero():
    assert left_rotate_32bits(0xF0E1D2C3, 0) == 0xF0E1D2C3


def test_left_rotate_large():
    assert left_rotate_32bits(0x98765432, 36) == 0x87654329


def test_is_big_endian_follows_host():
    with mock.patch("sys.byteorder", "big"):
        assert is_big_endian() is True
    with mock.patch("sys.byteorder", "little"):
        assert is_big_endian() is False


def test_to_little_endian_32_little_host():
    with mock.patch("sys.byteorder", "little"):
        assert to_little_endian_32(0x04030201) == 0x01020304


def test_to_little_endian_32_big_host():
    with mock.patch("sys.byteorder", "big"):
        assert to_little_endian_32(0x01020304) == 0x01020304


@pytest.mark.parametrize("order, expected", [("big", 0x000000FF), ("little", 0xFF000000)])
def test_to_little_endian_32_single_byte(order, expected):
    with mock.patch("sys.byteorder", order):
        assert to_little_endian_32(0x000000FF) == expected


def test_to_little_endian_64_little_host():
    with mock.patch("sys.byteorder", "little"):
        assert to_little_endian_64(0x0807060504030201) == 0x0102030405060708


def test_to_little_endian_64_big_host():
    with mock.patch("sys.byteorder", "big"):
        assert to_little_endian_64(0x0102030405060708) == 0x0102030405060708


def test_sig2hex_basic():
    signature = [0x01, 0x23, 0x45, 0x67, 0x89, 0xAB, 0xCD, 0xEF,
                 0xFE, 0xDC, 0xBA, 0x98, 0x76, 0x54, 0x32, 0x10]
    assert sig2hex(signature) == "0123456789abcdeffedcba9876543210"


def test_sig2hex_all_zeros():
    assert sig2hex(bytes(16)) == "00000000000000000000000000000000"


def test_sig2hex_all_ones():
    assert sig2hex(b"\xff" * 16) == "ffffffffffffffffffffffffffffffff"


def test_sig2hex_rejects_wrong_length():
    with pytest.raises(ValueError):
        sig2hex(b"\x00" * 15)


def test_preprocess_layout_little_host():
    data = b"The quick brown fox"
    with mock.patch("sys.byteorder", "little"):
        padded = preprocess(data)
    assert padded.startswith(data)
    assert padded[len(data)] == 0x80
    assert set(padded[len(data) + 1:-8]) <= {0}
    assert int.from_bytes(padded[-8:], "little") == len(data) * 8


def test_build_signature_of_initial_state():
    assert build_signature(*INITIAL_STATE).hex() == "0123456789abcdeffedcba9876543210"


def test_build_signature_masks_to_32_bits():
    assert build_signature(0x1_00000001, 0, 0, 0)[:4] == b"\x01\x00\x00\x00"