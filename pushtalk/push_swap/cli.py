"""Command that prints the operations sorting the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushtalk.push_swap.parsing import (
    InputError,
    assign_index,
    fill_stack_values,
    is_correct_input,
)
from pushtalk.push_swap.sorter import push_swap
from pushtalk.push_swap.stack import Stacks


def _error() -> int:
    sys.stderr.write("Error\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the arguments, sort them and print each operation used."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    if not is_correct_input(args):
        return _error()
    try:
        elements = fill_stack_values(args)
    except InputError:
        return _error()
    stacks = Stacks(elements)
    assign_index(stacks.a)
    push_swap(stacks)
    return 0


if __name__ == "__main__":
    sys.exit(main())