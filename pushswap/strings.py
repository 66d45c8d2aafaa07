"""String helpers with C-like semantics, expressed with Python strings.

Positions are returned as indices instead of pointers, and a missing result
is ``None``. The terminating NUL of a C string is modelled as the position
``len(s)``, so searching for ``"\\0"`` finds the end of the string.
"""

from __future__ import annotations

from typing import Callable, MutableSequence

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
    "strlcpy",
    "strlcat",
]

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")


def strlen(s: str | None) -> int:
    """Return the length of ``s``; ``None`` counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: str | None, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` returns ``len(s)``.
    """
    _check_char(c)
    if s is None:
        return None
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` returns ``len(s)``.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    _check_size(n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str | None, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    An empty (or missing) needle matches at index 0.
    """
    _check_size(length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start beyond the end gives an empty string.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; ``None`` if either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str | None, func: Callable[[int, str], str]) -> str | None:
    """Build a new string from ``func(index, char)`` applied to each character."""
    if s is None or func is None:
        return None
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str] | None,
    func: Callable[[int, str], str | None],
) -> None:
    """Call ``func(index, char)`` on each character in place.

    When ``func`` returns a value other than ``None`` it replaces the character.
    """
    if chars is None or func is None:
        return
    for i, ch in enumerate(list(chars)):
        replacement = func(i, ch)
        if replacement is not None:
            chars[i] = replacement


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_size(size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``size`` does not exceed ``len(dst)`` nothing is appended and the
    returned length is ``size + len(src)``.
    """
    _check_size(size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)