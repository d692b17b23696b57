"""The two stacks and the eleven operations that rearrange them.

Stack tops are at index 0. Every operation writes its name and a newline to
the output stream, standard output by default, and is also recorded in
:attr:`Stacks.operations`.
"""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional, TextIO


@dataclass
class Element:
    """One number on a stack, with the bookkeeping the sorter fills in."""

    value: int
    index: int = 0
    pos: int = -1
    target_pos: int = -1
    cost_a: int = -1
    cost_b: int = -1


def _swap(stack: Deque[Element]) -> None:
    if len(stack) < 2:
        return
    stack[0], stack[1] = stack[1], stack[0]


def _push(src: Deque[Element], dest: Deque[Element]) -> None:
    if src:
        dest.appendleft(src.popleft())


def _rotate(stack: Deque[Element]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: Deque[Element]) -> None:
    stack.rotate(1)


class Stacks:
    """Stack A and stack B together with the operations on them."""

    def __init__(
        self,
        a: Optional[Iterable[Element]] = None,
        b: Optional[Iterable[Element]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.a: Deque[Element] = deque(a or ())
        self.b: Deque[Element] = deque(b or ())
        self.output = output
        self.operations: List[str] = []

    @classmethod
    def from_values(
        cls, values: Iterable[int], output: Optional[TextIO] = None
    ) -> "Stacks":
        """Build stacks with *values* on A, top first, and B empty."""
        return cls((Element(value) for value in values), output=output)

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        stream = sys.stdout if self.output is None else self.output
        stream.write(name + "\n")

    def sa(self) -> None:
        """Swap the two top elements of A."""
        _swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of B."""
        _swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the two top elements of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of B onto A."""
        _push(self.b, self.a)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of A onto B."""
        _push(self.a, self.b)
        self._emit("pb")

    def ra(self) -> None:
        """Send the top of A to its bottom."""
        _rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Send the top of B to its bottom."""
        _rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Bring the bottom of A to its top."""
        _reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Bring the bottom of B to its top."""
        _reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._emit("rrr")