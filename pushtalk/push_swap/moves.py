"""Carry out a planned move of the top of B into place on A."""

from __future__ import annotations

from pushtalk.push_swap.stack import Stacks


def do_move(stacks: Stacks, cost_a: int, cost_b: int) -> None:
    """Rotate A by *cost_a* and B by *cost_b*, then push B's top onto A.

    A positive cost means that many rotations, a negative one that many
    reverse rotations. When both costs have the same sign the stacks turn
    together with rr or rrr for as long as both still need it.
    """
    while cost_a < 0 and cost_b < 0:
        cost_a += 1
        cost_b += 1
        stacks.rrr()
    while cost_a > 0 and cost_b > 0:
        cost_a -= 1
        cost_b -= 1
        stacks.rr()
    while cost_a > 0:
        stacks.ra()
        cost_a -= 1
    while cost_a < 0:
        stacks.rra()
        cost_a += 1
    while cost_b > 0:
        stacks.rb()
        cost_b -= 1
    while cost_b < 0:
        stacks.rrb()
        cost_b += 1
    stacks.pa()