import io
import sys

import pytest

from sigtalk.output import put_char, put_endl, put_nbr, put_str


@pytest.fixture
def stream():
    return io.StringIO()


def test_put_char_string(stream):
    put_char("x", stream)
    assert stream.getvalue() == "x"


def test_put_char_code_point(stream):
    put_char(ord("A"), stream)
    assert stream.getvalue() == "A"


def test_put_char_rejects_long_string(stream):
    with pytest.raises(ValueError):
        put_char("ab", stream)
    assert stream.getvalue() == ""


def test_put_char_sequence_builds_text(stream):
    for ch in "hello":
        put_char(ch, stream)
    assert stream.getvalue() == "hello"


def test_put_str_writes_text(stream):
    put_str("Server Pid:", stream)
    assert stream.getvalue() == "Server Pid:"


def test_put_str_none_writes_nothing(stream):
    put_str(None, stream)
    assert stream.getvalue() == ""


def test_put_endl_appends_newline(stream):
    put_endl("line", stream)
    assert stream.getvalue() == "line\n"


def test_put_endl_none_writes_nothing(stream):
    put_endl(None, stream)
    assert stream.getvalue() == ""


def test_put_endl_empty_string_is_newline_only(stream):
    put_endl("", stream)
    assert stream.getvalue() == "\n"


@pytest.mark.parametrize("number", [0, 7, 42, -5, 123456, -2147483648, 2147483647])
def test_put_nbr_round_trips(stream, number):
    put_nbr(number, stream)
    assert int(stream.getvalue()) == number


def test_put_nbr_int_min(stream):
    put_nbr(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


def test_put_nbr_negative_has_single_sign(stream):
    put_nbr(-9, stream)
    assert stream.getvalue().count("-") == 1


def test_default_stream_is_stdout(monkeypatch):
    fake = io.StringIO()
    monkeypatch.setattr(sys, "stdout", fake)
    put_str("abc")
    put_nbr(12)
    assert fake.getvalue() == "abc12"