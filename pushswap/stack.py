"""Stacks, the operations that act on them and parsing of their input."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable, Iterator, Optional

INT_MAX = 2147483647
INT_MIN = -2147483648

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when arguments or commands are not acceptable."""


class Stack:
    """A stack of integers whose first element is the top."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def swap(self) -> None:
        """Exchange the two top elements; do nothing with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if len(self._items) < 2:
            return
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        if len(self._items) < 2:
            return
        self._items.rotate(1)

    def push_onto(self, other: Stack) -> None:
        """Move the top element of this stack onto the top of ``other``."""
        if not self._items:
            return
        other._items.appendleft(self._items.popleft())

    def is_sorted(self) -> bool:
        """True when values ascend from top to bottom.

        An empty stack counts as not sorted.
        """
        if not self._items:
            return False
        items = list(self._items)
        return all(low <= high for low, high in zip(items, items[1:]))

    def top(self) -> int:
        """Return the top value; raise IndexError on an empty stack."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def index_of(self, value: int) -> int:
        """Return the position of ``value`` counted from the top."""
        for position, item in enumerate(self._items):
            if item == value:
                return position
        raise ValueError(f"{value} is not in the stack")

    def above_middle(self, value: int) -> bool:
        """Tell whether ``value`` is reached faster by rotating than by reverse rotating."""
        position = self.index_of(value)
        middle = len(self._items) // 2
        if position < middle:
            return True
        if position > middle:
            return False
        return middle % 2 == 1

    def find_min_above(self, floor: int) -> Optional[int]:
        """Return the smallest value greater than ``floor``.

        A value equal to the smallest integer is returned at once, whatever
        the floor. Returns None when nothing qualifies.
        """
        best: Optional[int] = None
        limit = INT_MAX
        for value in self._items:
            if value == INT_MIN:
                return value
            if floor < value < limit:
                limit = value
                best = value
        return best

    def find_max_below(self, ceiling: int) -> Optional[int]:
        """Return the largest value smaller than ``ceiling``.

        A value equal to the largest integer is returned at once, whatever
        the ceiling. Returns None when nothing qualifies.
        """
        best: Optional[int] = None
        limit = INT_MIN
        for value in self._items:
            if value == INT_MAX:
                return value
            if limit < value < ceiling:
                limit = value
                best = value
        return best


class Operation(Enum):
    """The eleven moves that act on the two stacks."""

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

    def apply(self, a: Stack, b: Stack) -> None:
        """Perform this move on stacks ``a`` and ``b``."""
        if self is Operation.SA:
            a.swap()
        elif self is Operation.SB:
            b.swap()
        elif self is Operation.SS:
            a.swap()
            b.swap()
        elif self is Operation.PA:
            b.push_onto(a)
        elif self is Operation.PB:
            a.push_onto(b)
        elif self is Operation.RA:
            a.rotate()
        elif self is Operation.RB:
            b.rotate()
        elif self is Operation.RR:
            a.rotate()
            b.rotate()
        elif self is Operation.RRA:
            a.reverse_rotate()
        elif self is Operation.RRB:
            b.reverse_rotate()
        else:
            a.reverse_rotate()
            b.reverse_rotate()

    @classmethod
    def from_command(cls, line: str) -> Operation:
        """Parse one input line: a move name followed by exactly one newline."""
        if line.endswith("\n"):
            name = line[:-1]
            for operation in cls:
                if operation.value == name:
                    return operation
        raise InputError(f"unknown command: {line!r}")


def parse_number(text: str) -> int:
    """Parse an optionally signed decimal that fits in a 32-bit int."""
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not set(digits) <= _DIGITS:
        raise InputError(f"not a number: {text!r}")
    number = int(digits)
    if text.startswith("-"):
        number = -number
    if not INT_MIN <= number <= INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return number


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn command-line words into distinct integers.

    A single word is split on spaces first.
    """
    words = list(args)
    if len(words) == 1:
        words = [part for part in words[0].split(" ") if part]
    values: list[int] = []
    seen: set[int] = set()
    for word in words:
        number = parse_number(word)
        if number in seen:
            raise InputError(f"duplicate value: {word!r}")
        seen.add(number)
        values.append(number)
    return values