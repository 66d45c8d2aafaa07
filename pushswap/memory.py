"""Byte-buffer helpers with C-like semantics on bytearrays and memoryviews."""

from __future__ import annotations

__all__ = ["bzero", "calloc", "memset", "memcpy", "memmove", "memchr", "memcmp"]


def _check_length(buffer, n: int) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(buffer):
        raise ValueError(f"length {n} exceeds buffer size {len(buffer)}")


def memset(buffer, value: int, length: int):
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` and return it."""
    _check_length(buffer, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst, src, n: int):
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    if dst is None and src is None:
        return None
    _check_length(dst, n)
    _check_length(src, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst, src, length: int):
    """Copy ``length`` bytes from ``src`` to ``dst``; the regions may overlap."""
    if dst is None and src is None:
        return None
    _check_length(dst, length)
    _check_length(src, length)
    # Taking a snapshot first makes overlapping views copy correctly.
    dst[:length] = bytes(src[:length])
    return dst


def memchr(data, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to ``c`` in the first ``n`` bytes."""
    _check_length(data, n)
    offset = bytes(data[:n]).find(c & 0xFF)
    return None if offset < 0 else offset


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch."""
    _check_length(a, n)
    _check_length(b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0