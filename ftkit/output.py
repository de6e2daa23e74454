"""Writing characters, strings and integers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from .cstring import strdup
from .text import INT_MAX, INT_MIN

CharLike = Union[str, int]

_ENCODING = "utf-8"


def _encode_char(c: CharLike) -> bytes:
    if isinstance(c, int):
        return bytes([c & 0xFF])
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c.encode(_ENCODING)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``; an integer is written as a single byte."""
    _write_all(fd, _encode_char(c))


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd``.

    Nothing is written when ``s`` is None or ``fd`` is 0.
    """
    if s is None or not fd:
        return
    _write_all(fd, strdup(s).encode(_ENCODING))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``.

    Nothing is written when ``s`` is None or ``fd`` is 0.
    """
    if s is None or not fd:
        return
    _write_all(fd, strdup(s).encode(_ENCODING) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer to ``fd``."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    if n == INT_MIN:
        putstr_fd(str(n), fd)
        return
    _write_all(fd, str(n).encode("ascii"))