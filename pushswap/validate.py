"""Validation of command-line numbers before they are put on the stack."""

from __future__ import annotations

from typing import Iterable, Sequence

from .chars import INT_MAX, INT_MIN, atoi, atol, isdigit
from .strings import strnstr

__all__ = [
    "InputError",
    "check_arguments",
    "check_first_argument",
    "parse_arguments",
    "check_duplicates",
    "is_sorted",
]


class InputError(ValueError):
    """Raised when the arguments or the instructions are not acceptable."""


def check_arguments(args: Sequence[str]) -> None:
    """Reject arguments out of the 32-bit range or holding non-digit characters.

    An argument that starts with ``-`` is not checked character by character.
    """
    for arg in args:
        number = atol(arg)
        if number > INT_MAX or number < INT_MIN:
            raise InputError(f"{arg!r} does not fit in a 32-bit integer")
        if not arg.startswith("-") and not all(isdigit(ch) for ch in arg):
            raise InputError(f"{arg!r} is not a number")


def check_first_argument(args: Sequence[str]) -> None:
    """Apply the extra checks made on the first argument.

    A lone empty argument, a lone one-character non-digit and a first
    argument containing ``--`` are rejected.
    """
    if not args:
        return
    first = args[0]
    if len(args) == 1 and first == "":
        raise InputError("empty argument")
    if len(args) == 1 and len(first) == 1 and not isdigit(first[0]):
        raise InputError(f"{first!r} is not a number")
    if strnstr(first, "--", len(first)) is not None:
        raise InputError(f"{first!r} contains '--'")


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Check the arguments and return their values, the first being the top."""
    check_arguments(args)
    return [atoi(arg) for arg in args]


def check_duplicates(values: Iterable[int]) -> None:
    """Raise :class:`InputError` if any value appears twice."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError(f"duplicate value {value}")
        seen.add(value)


def is_sorted(values: Sequence[int]) -> bool:
    """True when the values never decrease."""
    return all(a <= b for a, b in zip(values, values[1:]))