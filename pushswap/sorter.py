"""Turk-style sorting of stack ``a`` with the help of stack ``b``."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable

from pushswap.stack import INT_MAX, INT_MIN, Operation, Stack


def _above_middle(position: int, length: int) -> bool:
    """The rotation-direction rule used when the cost of a move is estimated."""
    middle = length // 2
    if position < middle:
        return True
    if position > middle:
        return False
    return middle % 2 == 1


def _target_below(ranked: list[int], value: int) -> int:
    """The value in ``b`` that ``value`` should be pushed on top of.

    ``ranked`` holds the values of ``b`` in ascending order.
    """
    if ranked[-1] == INT_MAX:
        return INT_MAX
    below = bisect_left(ranked, value)
    if below > 0 and ranked[below - 1] > INT_MIN:
        return ranked[below - 1]
    return ranked[-1]


class Sorter:
    """Sorts stack ``a`` and records every operation it performs."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.operations: list[Operation] = []

    def sort(self) -> list[Operation]:
        """Sort ``a`` in ascending order and return the operations used."""
        if len(self.a) and not self.a.is_sorted():
            if len(self.a) <= 3:
                self._sort_three()
            else:
                self._sort_stack()
        return list(self.operations)

    def _do(self, operation: Operation) -> None:
        operation.apply(self.a, self.b)
        self.operations.append(operation)

    def _rotate_to(
        self, stack: Stack, value: int, forward: Operation, backward: Operation
    ) -> None:
        operation = forward if stack.above_middle(value) else backward
        while stack.top() != value:
            self._do(operation)

    def _sort_three(self) -> None:
        if len(self.a) < 2:
            return
        largest = self.a.find_max_below(INT_MAX)
        first, second = list(self.a)[:2]
        if largest == first:
            self._do(Operation.RA)
        elif largest == second:
            self._do(Operation.RRA)
        first, second = list(self.a)[:2]
        if first > second:
            self._do(Operation.SA)

    def _sort_stack(self) -> None:
        length = len(self.a)
        if length > 3 and not self.a.is_sorted():
            self._do(Operation.PB)
        if length - 1 > 4 and not self.a.is_sorted():
            self._do(Operation.PB)
            self._do(Operation.PB)
        while len(self.a) > 3 and not self.a.is_sorted():
            self._push_cheapest()
        self._sort_three()
        while len(self.b):
            self._return_top_of_b()
        smallest = self.a.find_min_above(INT_MIN)
        if smallest is None:
            smallest = min(self.a)
        self._rotate_to(self.a, smallest, Operation.RA, Operation.RRA)

    def _choose_cheapest(self) -> tuple[int, int]:
        a_items = list(self.a)
        b_items = list(self.b)
        len_a = len(a_items)
        len_b = len(b_items)
        b_positions = {value: position for position, value in enumerate(b_items)}
        ranked = sorted(b_items)
        best: tuple[int, int] | None = None
        best_cost = 0
        for position, value in enumerate(a_items):
            target = _target_below(ranked, value)
            target_position = b_positions[target]
            cost = position if _above_middle(position, len_a) else len_a - position
            if target_position != position:
                if _above_middle(target_position, len_b):
                    cost += target_position
                else:
                    cost += len_a - target_position
            if best is None or cost < best_cost:
                best = (value, target)
                best_cost = cost
        assert best is not None
        return best

    def _push_cheapest(self) -> None:
        cheapest, target = self._choose_cheapest()
        a_up = self.a.above_middle(cheapest)
        b_up = self.b.above_middle(target)
        if a_up and b_up:
            while self.a.top() != cheapest and self.b.top() != target:
                self._do(Operation.RR)
        elif not a_up and not b_up:
            while self.a.top() != cheapest and self.b.top() != target:
                self._do(Operation.RRR)
        self._rotate_to(self.a, cheapest, Operation.RA, Operation.RRA)
        self._rotate_to(self.b, target, Operation.RB, Operation.RRB)
        self._do(Operation.PB)

    def _return_top_of_b(self) -> None:
        value = self.b.top()
        target = self.a.find_min_above(value)
        if target is None:
            target = self.a.find_min_above(INT_MIN)
        if target is None:
            target = min(self.a)
        self._rotate_to(self.a, target, Operation.RA, Operation.RRA)
        self._do(Operation.PA)


def sort_values(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values``."""
    return Sorter(values).sort()