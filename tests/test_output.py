import os

import pytest

from ftkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _capture(write):
    read_fd, write_fd = os.pipe()
    try:
        write(write_fd)
    finally:
        os.close(write_fd)
    with os.fdopen(read_fd, "rb") as stream:
        return stream.read()


def test_putchar_writes_string_character():
    assert _capture(lambda fd: putchar_fd("z", fd)) == b"z"


def test_putchar_writes_integer_as_byte():
    assert _capture(lambda fd: putchar_fd(ord("A"), fd)) == b"A"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        _capture(lambda fd: putchar_fd("ab", fd))


def test_putstr_writes_text():
    assert _capture(lambda fd: putstr_fd("hello world", fd)) == b"hello world"


def test_putstr_stops_at_nul():
    assert _capture(lambda fd: putstr_fd("abc\0def", fd)) == b"abc"


def test_putstr_none_writes_nothing():
    assert _capture(lambda fd: putstr_fd(None, fd)) == b""


def test_putendl_appends_newline():
    assert _capture(lambda fd: putendl_fd("line", fd)) == b"line" + b"\n"


def test_putendl_none_writes_nothing():
    assert _capture(lambda fd: putendl_fd(None, fd)) == b""


@pytest.mark.parametrize("n", [0, 7, 42, -1, -987654, 2147483647, -2147483647])
def test_putnbr_round_trips(n):
    assert int(_capture(lambda fd: putnbr_fd(n, fd))) == n


def test_putnbr_int_min():
    assert _capture(lambda fd: putnbr_fd(-2147483648, fd)) == b"-2147483648"


@pytest.mark.parametrize("n", [2147483648, -2147483649])
def test_putnbr_out_of_range(n):
    with pytest.raises(OverflowError):
        _capture(lambda fd: putnbr_fd(n, fd))