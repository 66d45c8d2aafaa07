"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO

from .chars import itoa

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def putchar_fd(c: str, stream: Optional[TextIO]) -> None:
    """Write the single character ``c`` to ``stream``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if stream is None:
        return
    stream.write(c)


def putstr_fd(s: Optional[str], stream: Optional[TextIO]) -> None:
    """Write ``s`` to ``stream``; nothing happens if either is missing."""
    if s is None or stream is None:
        return
    stream.write(s)


def putendl_fd(s: Optional[str], stream: Optional[TextIO]) -> None:
    """Write ``s`` followed by a newline; nothing happens if either is missing."""
    if s is None or stream is None:
        return
    stream.write(s + "\n")


def putnbr_fd(n: int, stream: Optional[TextIO]) -> None:
    """Write the decimal text of the 32-bit signed integer ``n``."""
    text = itoa(n)
    if stream is None:
        return
    stream.write(text)