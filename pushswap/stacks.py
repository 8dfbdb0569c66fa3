"""The two stacks of the puzzle and the operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Element:
    """One number on a stack, with its rank once ranks are assigned."""

    content: int
    index: int = 0


class Stacks:
    """Stacks ``a`` and ``b``; every operation performed is logged in order.

    ``a[0]`` and ``b[0]`` are the tops of the stacks.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[Element] = deque(Element(value) for value in values)
        self.b: deque[Element] = deque()
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a_values()}, b={self.b_values()})"

    @staticmethod
    def _swap(stack: deque[Element]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    def sa(self) -> None:
        """Swap the two top elements of ``a``; does nothing with fewer than two."""
        if self._swap(self.a):
            self.operations.append("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``; does nothing with fewer than two."""
        if self._swap(self.b):
            self.operations.append("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks at once."""
        self._swap(self.a)
        self._swap(self.b)
        self.operations.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self.b:
            self.a.appendleft(self.b.popleft())
        self.operations.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self.a:
            self.b.appendleft(self.a.popleft())
        self.operations.append("pb")

    def ra(self) -> None:
        """Rotate ``a`` so that its top element becomes the bottom one."""
        self.a.rotate(-1)
        self.operations.append("ra")

    def rb(self) -> None:
        """Rotate ``b`` so that its top element becomes the bottom one."""
        self.b.rotate(-1)
        self.operations.append("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards at once."""
        self.a.rotate(-1)
        self.b.rotate(-1)
        self.operations.append("rr")

    def rra(self) -> None:
        """Rotate ``a`` so that its bottom element becomes the top one."""
        self.a.rotate(1)
        self.operations.append("rra")

    def rrb(self) -> None:
        """Rotate ``b`` so that its bottom element becomes the top one."""
        self.b.rotate(1)
        self.operations.append("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards at once."""
        self.a.rotate(1)
        self.b.rotate(1)
        self.operations.append("rrr")

    def a_values(self) -> list[int]:
        """Numbers on ``a`` from top to bottom."""
        return [element.content for element in self.a]

    def b_values(self) -> list[int]:
        """Numbers on ``b`` from top to bottom."""
        return [element.content for element in self.b]

    def last_index_a(self) -> int:
        """Rank of the bottom element of ``a``; raises IndexError if ``a`` is empty."""
        if not self.a:
            raise IndexError("stack a is empty")
        return self.a[-1].index