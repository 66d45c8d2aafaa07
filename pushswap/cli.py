"""The command that prints the operations sorting its arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .algorithm import solve
from .validate import (
    InputError,
    check_duplicates,
    check_first_argument,
    is_sorted,
    parse_arguments,
)

__all__ = ["run", "main"]


def run(args: Sequence[str]) -> list[str]:
    """Validate ``args`` and return the operations that sort them.

    Raises :class:`InputError` for unacceptable arguments.
    """
    if not args:
        return []
    check_first_argument(args)
    values = parse_arguments(args)
    check_duplicates(values)
    if is_sorted(values):
        return []
    return [str(op) for op in solve(values)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; print ``Error`` to stderr on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        operations = run(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for operation in operations:
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())