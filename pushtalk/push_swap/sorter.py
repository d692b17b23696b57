"""Sorting stack A with the help of stack B."""

from __future__ import annotations

from typing import Iterable

from pushtalk.push_swap.planning import (
    do_cheapest_move,
    get_costs,
    get_lowest_index_position,
    get_target_positions,
)
from pushtalk.push_swap.stack import Element, Stacks


def is_sorted(elements: Iterable[Element]) -> bool:
    """True when the values never decrease from top to bottom."""
    items = list(elements)
    return all(upper.value <= lower.value for upper, lower in zip(items, items[1:]))


def tiny_sort(stacks: Stacks) -> None:
    """Sort a stack A of three elements by index in at most two operations."""
    if is_sorted(stacks.a):
        return
    a = stacks.a
    highest = max(element.index for element in a)
    if a[0].index == highest:
        stacks.ra()
    elif a[1].index == highest:
        stacks.rra()
    if a[0].index > a[1].index:
        stacks.sa()


def _push_all_save_three(stacks: Stacks) -> None:
    """Push everything but three elements to B, the smaller half first."""
    size = len(stacks.a)
    pushed = 0
    examined = 0
    while size > 6 and examined < size and pushed < size // 2:
        if stacks.a[0].index <= size // 2:
            stacks.pb()
            pushed += 1
        else:
            stacks.ra()
        examined += 1
    while size - pushed > 3:
        stacks.pb()
        pushed += 1


def _shift_stack(stacks: Stacks) -> None:
    """Rotate A the shorter way until its lowest index is on top."""
    size = len(stacks.a)
    lowest_pos = get_lowest_index_position(stacks.a)
    if lowest_pos > size // 2:
        for _ in range(size - lowest_pos):
            stacks.rra()
    else:
        for _ in range(lowest_pos):
            stacks.ra()


def sort(stacks: Stacks) -> None:
    """Sort a stack A of more than three elements."""
    _push_all_save_three(stacks)
    tiny_sort(stacks)
    while stacks.b:
        get_target_positions(stacks)
        get_costs(stacks)
        do_cheapest_move(stacks)
    if not is_sorted(stacks.a):
        _shift_stack(stacks)


def push_swap(stacks: Stacks) -> None:
    """Choose a sorting method by the size of A and sort it."""
    size = len(stacks.a)
    if size == 2 and not is_sorted(stacks.a):
        stacks.sa()
    elif size == 3:
        tiny_sort(stacks)
    elif size > 3 and not is_sorted(stacks.a):
        sort(stacks)