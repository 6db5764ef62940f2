import pytest

from fractol.libft.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert set(buf) == {0x41}


def test_memset_out_of_range():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears():
    buf = bytearray(b"hello")
    bzero(buf, 4)
    assert buf[:4] == bytearray(4)
    assert buf[4:] == b"o"


def test_calloc_is_zeroed_with_size():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"abcabc"
    assert memchr(data, ord("c"), len(data)) == data.index(b"c")


def test_memchr_respects_length():
    assert memchr(b"abcd", ord("d"), 3) is None


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"same", b"same", 4) == 0
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_sign_and_prefix():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_antisymmetric():
    a, b = b"\x10\x20\x30", b"\x10\x25\x00"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"wxyz", 4)
    assert result is dst
    assert dst == bytearray(b"wxyz..")


def test_memcpy_out_of_range():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"123456")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"121234")


def test_memmove_backward_overlap():
    buf = bytearray(b"123456")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"345656")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)