import pytest

from sigtalk.memory import SIZE_MAX, bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_limit():
    data = b"abcdef"
    assert memchr(data, ord("e"), 3) is None
    assert memchr(data, ord("e"), 5) == data.index(b"e")


def test_memchr_truncates_value_to_byte():
    data = bytes([1, 2, 0x41, 3])
    assert memchr(data, 0x141, len(data)) == 2


def test_memchr_zero_length():
    assert memchr(b"abc", ord("a"), 0) is None


def test_memchr_limit_past_end_rejected():
    with pytest.raises(ValueError):
        memchr(b"ab", 0, 5)


def test_memcmp_equal():
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) == 255


def test_memcmp_limit_ignores_tail():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_antisymmetric():
    a, b = b"\x10\x20\x30", b"\x10\x25\x00"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("z"), 3)
    assert result is buf
    assert buf == bytearray(b"zzzdef")


def test_memset_truncates_value():
    buf = bytearray(2)
    memset(buf, 0x1FF, 2)
    assert buf == bytearray([0xFF, 0xFF])


def test_memset_too_long_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"\x01\x02\x03\x04")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00\x03\x04")


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abcdef", 4)
    assert result is dst
    assert dst == bytearray(b"abcd..")


def test_memcpy_too_long_rejected():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abcd", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_out_of_bounds_rejected():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)


def test_calloc_zeroed_and_sized():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_size():
    assert len(calloc(5, 0)) == 0


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX // 2 + 1, 2)


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 1)