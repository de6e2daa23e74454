"""Byte-buffer helpers working on ``bytearray`` and other byte sequences.

Lengths larger than a buffer raise ``IndexError`` and negative lengths
raise ``ValueError``, where unchecked memory access would be undefined.
"""

from __future__ import annotations

from typing import Optional, Sequence


def _check_length(length: int, *buffers: Sequence[int]) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise IndexError(f"length {length} exceeds buffer of size {len(buf)}")


def _check_range(buf: Sequence[int], offset: int, length: int) -> None:
    if offset < 0 or offset + length > len(buf):
        raise IndexError(
            f"range {offset}..{offset + length} outside buffer of size {len(buf)}"
        )


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` truncated to a byte."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def memcpy(dst: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dst``.

    Returns ``dst``; when both buffers are missing, returns ``None``.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both dst and src are required")
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The ranges may overlap; the result is as if the source were copied
    out first.
    """
    _check_length(n)
    _check_range(buf, src, n)
    _check_range(buf, dst, n)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0 when equal.
    """
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)