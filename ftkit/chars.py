"""Character classification and ASCII case conversion.

Every function takes either a one-character string or an integer code.
Only the ASCII ranges are recognised; any other character is left alone
or reported as not belonging to the class.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_LOWER_FIRST, _LOWER_LAST = ord("a"), ord("z")
_UPPER_FIRST, _UPPER_LAST = ord("A"), ord("Z")
_DIGIT_FIRST, _DIGIT_LAST = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as str or int."""
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form (str or int) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _LOWER_FIRST <= code <= _LOWER_LAST or _UPPER_FIRST <= code <= _UPPER_LAST


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is returned as is."""
    code = _code(c)
    if _LOWER_FIRST <= code <= _LOWER_LAST:
        return _like(c, code - _CASE_OFFSET)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is returned as is."""
    code = _code(c)
    if _UPPER_FIRST <= code <= _UPPER_LAST:
        return _like(c, code + _CASE_OFFSET)
    return c