"""The command that checks whether instructions read from stdin sort its arguments."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .linereader import LineReader
from .stack import Board, Operation
from .strings import strncmp
from .validate import InputError, check_duplicates, is_sorted, parse_arguments

__all__ = ["parse_instruction", "apply_instructions", "check", "main"]

# Instructions are recognised by comparing a prefix of the line, in this order.
_INSTRUCTIONS = (
    ("sa\n", 2, Operation.SA),
    ("sb\n", 2, Operation.SB),
    ("ss\n", 2, Operation.SS),
    ("pa\n", 2, Operation.PA),
    ("pb\n", 2, Operation.PB),
    ("ra\n", 2, Operation.RA),
    ("rb\n", 2, Operation.RB),
    ("rr\n", 2, Operation.RR),
    ("rra\n", 3, Operation.RRA),
    ("rrb\n", 2, Operation.RRB),
    ("rrr\n", 3, Operation.RRR),
)


def parse_instruction(line: str) -> Operation:
    """Return the operation named at the start of ``line``.

    The first entry whose leading characters match wins, so any line
    beginning with ``rr`` is taken as ``rr``.
    """
    for text, length, operation in _INSTRUCTIONS:
        if strncmp(line, text, length) == 0:
            return operation
    raise InputError(f"unknown instruction {line!r}")


def apply_instructions(board: Board, lines: Iterable[str]) -> None:
    """Apply instructions until an empty line, the end, or a solved board."""
    for line in lines:
        if strncmp(line, "\n", 1) == 0:
            break
        board.execute(parse_instruction(line), record=False)
        if board.stack_a.is_sorted() and not board.stack_b:
            break


def check(values: Sequence[int], lines: Iterable[str]) -> bool:
    """Apply ``lines`` to ``values`` and report whether stack ``a`` ends sorted."""
    board = Board(values)
    apply_instructions(board, lines)
    return board.stack_a.is_sorted()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read instructions from stdin and print ``OK`` or ``KO``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
        check_duplicates(values)
        if is_sorted(values):
            return 0
        result = check(values, LineReader(sys.stdin))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK" if result else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())