"""Positions, targets and costs used to choose the next move."""

from __future__ import annotations

from typing import Iterable, List, Optional

from pushtalk.push_swap.moves import do_move
from pushtalk.push_swap.parsing import INT_MAX
from pushtalk.push_swap.stack import Element, Stacks


def _set_positions(elements: Iterable[Element]) -> List[Element]:
    items = list(elements)
    for pos, element in enumerate(items):
        element.pos = pos
    return items


def get_lowest_index_position(elements: Iterable[Element]) -> int:
    """Number the elements from the top and return where the lowest index sits."""
    items = _set_positions(elements)
    if not items:
        raise ValueError("cannot find the lowest index of an empty stack")
    return min(items, key=lambda element: element.index).pos


def _target(a: List[Element], b_index: int, fallback: int) -> int:
    """Position in A where an element with *b_index* belongs."""
    above = [e for e in a if b_index < e.index < INT_MAX]
    if above:
        return min(above, key=lambda element: element.index).pos
    candidates = [e for e in a if e.index < INT_MAX]
    if candidates:
        return min(candidates, key=lambda element: element.index).pos
    return fallback


def get_target_positions(stacks: Stacks) -> None:
    """Set every element's position, and for each in B its target position in A.

    The target is the position of the smallest index in A above the
    element's own; when there is none, the position of A's smallest index.
    """
    a = _set_positions(stacks.a)
    b = _set_positions(stacks.b)
    target: int = 0
    for element in b:
        target = _target(a, element.index, target)
        element.target_pos = target


def _rotation_cost(pos: int, size: int) -> int:
    """Rotations (positive) or reverse rotations (negative) to bring *pos* to the top."""
    if pos > size // 2:
        return -(size - pos)
    return pos


def get_costs(stacks: Stacks) -> None:
    """Set cost_b (to bring each B element to the top) and cost_a (to ready A)."""
    size_a = len(stacks.a)
    size_b = len(stacks.b)
    for element in stacks.b:
        element.cost_b = _rotation_cost(element.pos, size_b)
        element.cost_a = _rotation_cost(element.target_pos, size_a)


def do_cheapest_move(stacks: Stacks) -> None:
    """Move the B element with the smallest total cost into place on A."""
    cheapest: Optional[Element] = None
    best = abs(INT_MAX)
    for element in stacks.b:
        total = abs(element.cost_a) + abs(element.cost_b)
        if total < best:
            best = total
            cheapest = element
    if cheapest is None:
        raise ValueError("stack B holds no element to move")
    do_move(stacks, cheapest.cost_a, cheapest.cost_b)