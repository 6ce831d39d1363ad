"""Byte-buffer primitives working on ``bytes`` and ``bytearray`` objects."""

from __future__ import annotations

import sys
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

__all__ = ["memchr", "memcmp", "memset", "bzero", "memcpy", "memmove", "calloc"]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(name: str, n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"{name} ({n}) exceeds buffer length ({len(buf)})")


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` in ``data[:n]``, or ``None``."""
    _check_length("n", n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(b1: BytesLike, b2: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_length("n", n, b1, b2)
    for a, b in zip(bytes(b1[:n]), bytes(b2[:n])):
        if a != b:
            return a - b
    return 0


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes with ``value`` (truncated to a byte)."""
    _check_length("length", length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Set the first ``length`` bytes to zero."""
    memset(buffer, 0, length)


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_length("n", n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buffer``; the regions may overlap."""
    if min(dst_offset, src_offset, length) < 0:
        raise ValueError("offsets and length must not be negative")
    end = max(dst_offset, src_offset) + length
    if end > len(buffer):
        raise ValueError(f"region ends at {end}, past buffer length {len(buffer)}")
    buffer[dst_offset:dst_offset + length] = bytes(buffer[src_offset:src_offset + length])
    return buffer


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the product would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError("count * size overflows")
    return bytearray(count * size)