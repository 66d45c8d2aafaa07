"""Character classification and integer/text conversions with C-like semantics."""

from __future__ import annotations

import re

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "tolower",
    "toupper",
    "atoi",
    "atol",
    "itoa",
]

_WHITESPACE = "\f\n\r\t\v "
_NUMBER = re.compile(r"([+-]?)([0-9]*)")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _code(c: str | int) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def isalpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus // 2 else value


def _parse(text: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits."""
    match = _NUMBER.match(text.lstrip(_WHITESPACE))
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def atoi(text: str) -> int:
    """Convert the leading number in ``text`` to a 32-bit signed integer.

    Values that do not fit wrap around as a 32-bit machine integer would.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Convert the leading number in ``text`` to a 64-bit signed integer.

    Values that do not fit wrap around as a 64-bit machine integer would.
    """
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)