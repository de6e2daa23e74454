# ftkit

A small library of classic low-level helpers with plain Python types. It has
no dependencies beyond the standard library.

## Modules

### `ftkit.chars`

ASCII character tests and case conversion. Each function takes a
one-character `str` or an integer code. A `str` longer or shorter than one
character raises `ValueError`.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` (codes 0–127), `is_print`
  (space through `~`) return `bool`.
- `to_upper`, `to_lower` convert ASCII letters. The result has the same form
  as the argument: `str` in, `str` out; `int` in, `int` out. Any other
  character comes back unchanged.

### `ftkit.memory`

Helpers for `bytearray` and other byte sequences. A negative length raises
`ValueError`. A length past the end of a buffer raises `IndexError`.

- `memset(buf, value, length)` fills the first `length` bytes with
  `value & 0xFF` and returns `buf`.
- `bzero(buf, length)` zeroes the first `length` bytes.
- `memcpy(dst, src, n)` copies `n` bytes and returns `dst`. If both are
  `None` it returns `None`. If only one is `None` it raises `TypeError`.
- `memmove(buf, dst, src, n)` copies `n` bytes inside one buffer, from offset
  `src` to offset `dst`. The two ranges may overlap.
- `memchr(buf, c, n)` returns the index of the first byte equal to `c` within
  the first `n` bytes, or `None`.
- `memcmp(a, b, n)` returns the difference of the first differing bytes, or
  `0`.
- `calloc(count, size)` returns a zeroed `bytearray` of `count * size` bytes.

### `ftkit.cstring`

Routines that treat text as NUL-terminated: a string ends at its first
`"\0"`. They return positions as indexes and `None` for "not found".

- `strlen(s)` and `strdup(s)` give the length of the text, or a copy of it,
  up to the first NUL.
- `strlcpy(dst, src, dstsize)` returns `(result, len(src))`.
- `strlcat(dst, src, dstsize)` returns `(result, min(len(dst), dstsize) + len(src))`.
- `strchr(s, c)` and `strrchr(s, c)` return the first or last index of `c`.
  Searching for NUL gives the string's length.
- `strncmp(s1, s2, n)` compares at most `n` characters. It returns the
  difference of the character codes, with the terminator counted as code 0.
- `strnstr(haystack, needle, length)` returns the index of a needle that lies
  wholly within the first `length` characters. An empty needle gives `0`.
- `atoi(s)` skips leading whitespace and accepts one sign. It reads digits
  until the first non-digit and wraps the value to a 32-bit signed integer. A
  string with no digits gives `0`.

### `ftkit.text`

Functions that build new strings.

- `substr(s, start, length)`
- `strjoin(s1, s2)`
- `strtrim(s, charset)` strips characters found in `charset` from both ends.
- `split(s, sep)` splits on `sep` and drops empty words.
- `itoa(n)` formats a 32-bit signed integer. Out-of-range values raise
  `OverflowError`.
- `strmapi(s, f)` builds a string from `f(index, char)`.
- `striteri(s, f)` calls `f(index, char)` for each character. `f` returns a
  replacement character, or `None` to keep the original. The edited string is
  returned.

The module also defines `INT_MIN` and `INT_MAX`.

### `ftkit.output`

Writes to an OS file descriptor with `os.write`.

- `putchar_fd(c, fd)` writes one character. An integer is written as a single
  byte.
- `putstr_fd(s, fd)` writes text up to the first NUL.
- `putendl_fd(s, fd)` does the same, followed by a newline.
- `putnbr_fd(n, fd)` writes the decimal form of a 32-bit signed integer.

`putstr_fd` and `putendl_fd` write nothing when `s` is `None` or `fd` is `0`.

### `ftkit.linked`

`Node(content, next=None)` and `LinkedList(items=None)`.

A list supports iteration over its contents and `len()`. It has these
methods:

- `push_front(node)`
- `push_back(node)`
- `last()` returns the last node, or `None`.
- `clear(delete)` passes every content to `delete` and empties the list. It
  does nothing when `delete` is `None`.
- `iterate(f)`
- `map(f, delete=None)` returns a new list. If `f` raises, the contents built
  so far go to `delete` and the exception propagates.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.text import split, itoa, strtrim
from ftkit.cstring import atoi, strlcpy
from ftkit.memory import calloc, memset

split("  hello  world ", " ")     # ['hello', 'world']
itoa(-2147483648)                 # '-2147483648'
strtrim("xxabcxx", "x")           # 'abc'
atoi("   -42abc")                 # -42
strlcpy("", "hello", 3)           # ('he', 5)

buf = calloc(4, 2)                # bytearray of 8 zero bytes
memset(buf, ord("a"), 3)          # bytearray(b'aaa\x00\x00\x00\x00\x00')
```

```python
from ftkit.linked import LinkedList, Node

items = LinkedList([1, 2, 3])
items.push_front(Node(0))
items.push_back(Node(4))
len(items)                                # 5
list(items.map(lambda x: x * 10, None))   # [0, 10, 20, 30, 40]
```

## What it does not do

This is a library only. It installs no command-line program.