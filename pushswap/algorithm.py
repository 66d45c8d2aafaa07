"""Sorting stack ``a`` with the puzzle's operations."""

from __future__ import annotations

from typing import Iterable

from .stack import Board, Element, Operation, Stack

__all__ = [
    "sort_two",
    "sort_three",
    "sort_five",
    "set_targets",
    "calculate_costs",
    "sort_large",
    "solve",
]


def _top_two(stack: Stack) -> tuple[Element, Element]:
    items = iter(stack)
    return next(items), next(items)


def sort_two(board: Board) -> None:
    """Sort a stack ``a`` of two elements."""
    if not board.stack_a.is_sorted():
        board.execute(Operation.SA)


def sort_three(board: Board) -> None:
    """Sort a stack ``a`` of three indexed elements."""
    stack = board.stack_a
    biggest = stack.biggest_index()
    top, second = _top_two(stack)
    if top.index == biggest:
        board.execute(Operation.RA)
    elif second.index == biggest:
        board.execute(Operation.RRA)
    top, second = _top_two(stack)
    if top.index > second.index:
        board.execute(Operation.SA)


def sort_five(board: Board) -> None:
    """Sort a stack ``a`` of five elements by parking the two smallest on ``b``."""
    while len(board.stack_a) > 3:
        board.move_to_top(board.stack_a.smallest_index())
        board.execute(Operation.PB)
    if board.stack_b.is_sorted():
        board.execute(Operation.SB)
    sort_three(board)
    board.execute(Operation.PA)
    board.execute(Operation.PA)


def set_targets(stack_a: Stack, stack_b: Stack) -> None:
    """Give each element of ``b`` the index on ``a`` it should be placed above.

    That is the smallest bigger index on ``a``, or the smallest index on
    ``a`` when there is no bigger one.
    """
    smallest = stack_a.smallest_index()
    for element in stack_b:
        bigger = [e.index for e in stack_a if e.index > element.index]
        element.i_target = min(bigger) if bigger else smallest


def calculate_costs(stack_a: Stack, stack_b: Stack) -> None:
    """Set the cost of bringing each element of ``b`` and its target to the top."""
    size_a, size_b = len(stack_a), len(stack_b)
    for element in stack_b:
        target = stack_a.find_index(element.i_target)
        cost = element.pos if element.up else size_b - element.pos
        cost += target.pos if target.up else size_a - target.pos
        element.cost = cost


def _move(board: Board, cheapest_index: int) -> None:
    stack_a, stack_b = board.stack_a, board.stack_b
    cheapest = stack_b.find_index(cheapest_index)
    target = stack_a.find_index(cheapest.i_target)
    if cheapest.up and target.up:
        while stack_a.top() is not target and stack_b.top() is not cheapest:
            board.execute(Operation.RR)
    elif not cheapest.up and not target.up:
        while stack_a.top() is not target and stack_b.top() is not cheapest:
            board.execute(Operation.RRR)
    stack_a.reposition()
    stack_b.reposition()
    while stack_a.top() is not target:
        board.execute(Operation.RA if target.up else Operation.RRA)
        stack_a.reposition()
    while stack_b.top() is not cheapest:
        board.execute(Operation.RB if cheapest.up else Operation.RRB)
        stack_b.reposition()
    board.execute(Operation.PA)


def sort_large(board: Board) -> None:
    """Sort stack ``a`` of four or more elements by cheapest insertion."""
    stack_a, stack_b = board.stack_a, board.stack_b
    size = len(stack_a)
    board.execute(Operation.PA)
    for _ in range(size - 3):
        board.execute(Operation.PB)
    sort_three(board)
    while stack_b:
        stack_a.reposition()
        stack_b.reposition()
        set_targets(stack_a, stack_b)
        calculate_costs(stack_a, stack_b)
        _move(board, stack_b.cheapest_index())
    stack_a.reposition()
    board.move_to_top(1)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values``, the first being the top."""
    board = Board(values)
    stack_a = board.stack_a
    size = len(stack_a)
    stack_a.reposition()
    stack_a.assign_indices()
    if size == 2:
        sort_two(board)
    elif size == 3:
        sort_three(board)
    elif size == 5:
        sort_five(board)
    elif size >= 4:
        sort_large(board)
    return list(board.operations)