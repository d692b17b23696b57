"""Checking, parsing and ranking the numbers given to the sorter."""

from __future__ import annotations

from itertools import permutations, takewhile
from typing import Iterable, List, Sequence

from pushtalk.push_swap.stack import Element

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class InputError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def _cstr(s: str) -> str:
    return s.partition("\0")[0]


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_sign(ch: str) -> bool:
    return ch in ("+", "-")


def arg_is_number(arg: str) -> bool:
    """True when *arg* is digits with at most one leading sign.

    A lone sign is not a number; an empty argument counts as one.
    """
    text = _cstr(arg)
    body = text[1:] if len(text) > 1 and _is_sign(text[0]) else text
    return all(_is_digit(ch) for ch in body)


def arg_is_zero(arg: str) -> bool:
    """True when *arg* is nothing but zeros after an optional sign (0, +000, -00)."""
    text = _cstr(arg)
    if text and _is_sign(text[0]):
        text = text[1:]
    return all(ch == "0" for ch in text)


def nbstr_cmp(s1: str, s2: str) -> int:
    """Compare two number strings, ignoring a '+' that only one of them has.

    Returns zero when they are equal, otherwise the code difference of the
    first characters that differ, so ``+123`` equals ``123`` but ``-123``
    does not.
    """
    a, b = _cstr(s1), _cstr(s2)
    if a[:1] == "+":
        if b[:1] != "+":
            a = a[1:]
    elif b[:1] == "+":
        b = b[1:]
    for x, y in zip(a + "\0", b + "\0"):
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            break
    return 0


def is_correct_input(args: Sequence[str]) -> bool:
    """True when every argument is a number, at most one is zero, and none repeat."""
    if not all(arg_is_number(arg) for arg in args):
        return False
    if sum(arg_is_zero(arg) for arg in args) > 1:
        return False
    return not any(nbstr_cmp(x, y) == 0 for x, y in permutations(args, 2))


def parse_long(s: str) -> int:
    """Parse an optional sign followed by digits; stop at the first non-digit.

    No blanks are skipped. Text without leading digits gives zero.
    """
    text = _cstr(s)
    sign = 1
    if text[:1] == "+":
        text = text[1:]
    elif text[:1] == "-":
        sign = -1
        text = text[1:]
    digits = "".join(takewhile(_is_digit, text))
    return sign * int(digits) if digits else 0


def fill_stack_values(args: Iterable[str]) -> List[Element]:
    """Turn the arguments into stack elements, top first.

    Raises InputError for a value outside the 32-bit signed range.
    """
    elements = []
    for arg in args:
        number = parse_long(arg)
        if number > INT_MAX or number < INT_MIN:
            raise InputError(f"{arg!r} is outside the integer range")
        elements.append(Element(number))
    return elements


def assign_index(elements: Iterable[Element]) -> None:
    """Give each element its rank by value, from 1 for the smallest to n.

    Among equal values the earlier element gets the higher rank; every
    element holding the smallest possible integer gets rank 1.
    """
    items = list(elements)
    size = len(items)
    others = []
    for position, element in enumerate(items):
        if element.value == INT_MIN:
            element.index = 1
        else:
            others.append((element.value, -position, element))
    others.sort(key=lambda entry: (entry[0], entry[1]), reverse=True)
    for offset, (_, _, element) in enumerate(others):
        element.index = size - offset