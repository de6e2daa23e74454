"""Helpers for NUL-terminated strings held in Python text.

A string ends at its first NUL character, if it has one; everything
after it is ignored, as a C string would be. Positions are returned as
indexes into the string, and ``None`` stands for "not found".
"""

from __future__ import annotations

from itertools import takewhile
from typing import Optional, Tuple, Union

from .chars import is_digit

CharLike = Union[str, int]

NUL = "\0"
_SPACES = " \t\n\v\f\r"
_UINT_MASK = 0xFFFFFFFF
_INT_SIGN_BIT = 0x80000000


def _cstr(s: str) -> str:
    """Return the part of ``s`` before its first NUL."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return s.partition(NUL)[0]


def _char(c: CharLike) -> str:
    """Normalise a character given as str or int; ints are truncated to a byte."""
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _check_size(size: int, name: str) -> None:
    if size < 0:
        raise ValueError(f"{name} must not be negative, got {size}")


def _to_int32(value: int) -> int:
    """Interpret the low 32 bits of ``value`` as a signed integer."""
    value &= _UINT_MASK
    return value - (1 << 32) if value & _INT_SIGN_BIT else value


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def strlcpy(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``dstsize`` slots, one kept for the NUL.

    Returns the resulting destination text and the length of ``src``,
    which tells whether the copy was truncated. With ``dstsize`` 0 the
    destination is left unchanged.
    """
    _check_size(dstsize, "dstsize")
    source = _cstr(src)
    if dstsize == 0:
        return _cstr(dst), len(source)
    return source[:dstsize - 1], len(source)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``dstsize`` slots.

    Returns the resulting text and the length the full result would have
    had, counting ``dst`` as at most ``dstsize`` long.
    """
    _check_size(dstsize, "dstsize")
    target = _cstr(dst)
    source = _cstr(src)
    dst_len = len(target)
    if dstsize > 0 and dst_len < dstsize - 1:
        target += source[:dstsize - 1 - dst_len]
    return target, min(dst_len, dstsize) + len(source)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the codes of the first differing characters,
    the terminator counting as code 0, or 0 when they agree.
    """
    _check_size(n, "n")
    if n == 0:
        return 0
    left = _cstr(s1) + NUL
    right = _cstr(s2) + NUL
    for _, x, y in zip(range(n), left, right):
        if x != y or x == NUL:
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    wanted = _cstr(needle)
    if not wanted:
        return 0
    index = _cstr(haystack)[:length].find(wanted)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return _cstr(s)


def atoi(s: str) -> int:
    """Parse a decimal integer the way the C library does.

    Leading whitespace is skipped, one sign is accepted, and digits are
    read until the first non-digit. The result wraps around as a 32-bit
    signed integer; a string without digits gives 0.
    """
    text = _cstr(s).lstrip(_SPACES)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for digit in takewhile(is_digit, text):
        value = (value * 10 + int(digit)) & _UINT_MASK
    return _to_int32(sign * value)