"""Allocating string operations: substrings, joins, trimming, splitting,
integer formatting and character-wise mapping.

Input strings end at their first NUL, like the rest of the package.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Union

from .cstring import strdup

CharLike = Union[str, int]

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1


def _separator(sep: CharLike) -> str:
    if isinstance(sep, int):
        return chr(sep & 0xFF)
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"separator must be a single character, got {len(sep)}")
        return sep
    raise TypeError(f"expected str or int, got {type(sep).__name__}")


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return strdup(s).strip(strdup(charset))


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on ``sep``, dropping empty words."""
    return [word for word in strdup(s).split(_separator(sep)) if word]


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``.

    The result ends at the first NUL that ``f`` produces.
    """
    return strdup("".join(f(index, ch) for index, ch in enumerate(strdup(s))))


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call ``f(index, char)`` for each character and return the edited string.

    ``f`` returns a replacement character, or ``None`` to keep the one it got.
    """
    edited = []
    for index, ch in enumerate(strdup(s)):
        replacement = f(index, ch)
        edited.append(ch if replacement is None else replacement)
    return "".join(edited)