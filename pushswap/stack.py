"""The two stacks of the puzzle, their elements and the allowed operations."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from .chars import INT_MAX

__all__ = ["Element", "Stack", "Operation", "Board"]


@dataclass(eq=False)
class Element:
    """One number on a stack, with the bookkeeping the sorter uses.

    ``index`` is the 1-based rank of ``value``, ``pos`` the 1-based place
    from the top, ``up`` whether the element lies in the upper half,
    ``cost`` the number of moves needed to bring it home and ``i_target``
    the index of the element it should land on top of.
    """

    value: int
    index: int = 0
    pos: int = 0
    up: bool = False
    cost: int = 0
    i_target: int = 0


class Stack:
    """A stack of elements; the first value given is the top."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[Element] = deque(Element(value) for value in values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def values(self) -> list[int]:
        """Return the values from top to bottom."""
        return [element.value for element in self._items]

    def top(self) -> Optional[Element]:
        """Return the top element, or ``None`` when the stack is empty."""
        return self._items[0] if self._items else None

    def swap(self) -> bool:
        """Exchange the two top elements; return whether anything changed."""
        if len(self._items) < 2:
            return False
        items = self._items
        items[0], items[1] = items[1], items[0]
        return True

    def push_from(self, other: "Stack") -> bool:
        """Move the top element of ``other`` onto this stack."""
        if not other._items:
            return False
        self._items.appendleft(other._items.popleft())
        return True

    def rotate(self) -> bool:
        """Move the top element to the bottom."""
        if len(self._items) < 2:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom element to the top."""
        if len(self._items) < 2:
            return False
        self._items.rotate(1)
        return True

    def reposition(self) -> None:
        """Number the elements from the top and mark those in the upper half."""
        median = len(self._items) // 2
        for pos, element in enumerate(self._items, start=1):
            element.pos = pos
            element.up = pos <= median

    def assign_indices(self) -> None:
        """Give every element the count of values not greater than its own."""
        values = self.values()
        for element in self._items:
            element.index = sum(1 for value in values if value <= element.value)

    def find_index(self, index: int) -> Optional[Element]:
        """Return the first element with the given index, or ``None``."""
        return next((e for e in self._items if e.index == index), None)

    def find_pos(self, pos: int) -> Optional[Element]:
        """Return the first element at the given position, or ``None``."""
        return next((e for e in self._items if e.pos == pos), None)

    def pos_of_index(self, index: int) -> int:
        """Return the position of the element with ``index``, or 0 if absent."""
        element = self.find_index(index)
        return element.pos if element is not None else 0

    def smallest_index(self) -> int:
        """Return the smallest index on the stack; ``INT_MAX`` when empty."""
        return min((e.index for e in self._items), default=INT_MAX)

    def biggest_index(self) -> int:
        """Return the biggest positive index on the stack; 0 when there is none."""
        return max((e.index for e in self._items), default=0) if any(
            e.index > 0 for e in self._items
        ) else 0

    def smallest_cost(self) -> Optional[Element]:
        """Return the first element of lowest cost, or ``None`` when empty."""
        if not self._items:
            return None
        return min(self._items, key=lambda e: e.cost)

    def cheapest_index(self) -> int:
        """Return the index of the first element of lowest cost."""
        element = self.smallest_cost()
        if element is None:
            raise ValueError("an empty stack has no cheapest element")
        return element.index

    def is_sorted(self) -> bool:
        """True when the values ascend from top to bottom."""
        values = self.values()
        return all(a <= b for a, b in zip(values, values[1:]))


class Operation(str, Enum):
    """The instructions of the puzzle, named as they are written out."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Board:
    """Stack ``a`` holding the numbers, an empty stack ``b`` and the moves made."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.stack_a = Stack(values)
        self.stack_b = Stack()
        self.operations: list[Operation] = []

    def execute(self, operation: Operation | str, record: bool = True) -> bool:
        """Apply ``operation`` and return whether it changed anything.

        A single-stack operation is recorded only when it took effect;
        the combined ``ss``, ``rr`` and ``rrr`` are always recorded.
        """
        op = Operation(operation)
        a, b = self.stack_a, self.stack_b
        combined = op in (Operation.SS, Operation.RR, Operation.RRR)
        if op is Operation.SA:
            done = a.swap()
        elif op is Operation.SB:
            done = b.swap()
        elif op is Operation.SS:
            done = a.swap() | b.swap()
        elif op is Operation.PA:
            done = a.push_from(b)
        elif op is Operation.PB:
            done = b.push_from(a)
        elif op is Operation.RA:
            done = a.rotate()
        elif op is Operation.RB:
            done = b.rotate()
        elif op is Operation.RR:
            done = a.rotate() | b.rotate()
        elif op is Operation.RRA:
            done = a.reverse_rotate()
        elif op is Operation.RRB:
            done = b.reverse_rotate()
        else:
            done = a.reverse_rotate() | b.reverse_rotate()
        if record and (done or combined):
            self.operations.append(op)
        return done

    def move_to_top(self, index: int) -> None:
        """Rotate stack ``a`` until the element with ``index`` is on top.

        The direction follows the element's ``up`` flag, so the stack should
        have been repositioned first.
        """
        target = self.stack_a.find_index(index)
        if target is None:
            raise KeyError(f"no element with index {index} on stack a")
        operation = Operation.RA if target.up else Operation.RRA
        while self.stack_a.top() is not target:
            self.execute(operation)

    def is_solved(self) -> bool:
        """True when stack ``a`` is sorted and stack ``b`` is empty."""
        return self.stack_a.is_sorted() and not self.stack_b