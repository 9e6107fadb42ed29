import pytest

from solong.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    original = bytearray(b"abcdefgh")
    buf = bytearray(original)
    result = memset(buf, ord("z"), 5)
    assert result is buf
    assert buf[:5] == b"z" * 5
    assert buf[5:] == original[5:]


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x1FF, 4)
    assert buf == bytes([0xFF]) * 4


def test_memset_length_beyond_buffer_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"xxxxxx")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"xxx"


def test_calloc_zero_filled_of_requested_size():
    buf = calloc(4, 8)
    assert len(buf) == 4 * 8
    assert not any(buf)


def test_calloc_zero_count():
    assert calloc(0, 16) == bytearray()


def test_calloc_overflow_raises():
    with pytest.raises(MemoryError):
        calloc(2, SIZE_MAX // 2 + 1)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    index = memchr(data, ord("o"), len(data))
    assert data[index] == ord("o")
    assert ord("o") not in data[:index]


def test_memchr_respects_length():
    data = b"hello world"
    assert memchr(data, ord("w"), 5) is None


def test_memchr_finds_zero_byte():
    data = b"ab\x00cd"
    assert memchr(data, 0, len(data)) == data.index(0)


def test_memcmp_equal_and_sign():
    assert memcmp(b"abcd", b"abcd", 4) == 0
    assert memcmp(b"abcx", b"abcd", 4) > 0
    assert memcmp(b"abcd", b"abcx", 4) < 0
    assert memcmp(b"abcx", b"abcd", 3) == 0


def test_memcmp_uses_unsigned_bytes():
    assert memcmp(b"\x80", b"\x01", 1) == 0x80 - 0x01


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcpy_copies_prefix():
    dst = bytearray(b"..........")
    src = b"0123456789"
    result = memcpy(dst, src, 4)
    assert result is dst
    assert dst[:4] == src[:4]
    assert dst[4:] == b"." * 6


def test_memcpy_too_long_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    original = b"abcdefghij"
    buf = bytearray(original)
    memmove(buf, 2, 0, 6)
    assert buf[2:8] == original[0:6]
    assert buf[:2] == original[:2]
    assert buf[8:] == original[8:]


def test_memmove_backward_overlap():
    original = b"abcdefghij"
    buf = bytearray(original)
    memmove(buf, 0, 3, 7)
    assert buf[:7] == original[3:10]
    assert buf[7:] == original[7:]


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(5), 3, 0, 4)