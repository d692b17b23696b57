import io
import random
from itertools import permutations

import pytest

from pushtalk.push_swap.parsing import assign_index
from pushtalk.push_swap.sorter import is_sorted, push_swap, sort, tiny_sort
from pushtalk.push_swap.stack import Element, Stacks


def _make(values):
    stacks = Stacks.from_values(values, output=io.StringIO())
    assign_index(stacks.a)
    return stacks


def _values(stack):
    return [element.value for element in stack]


def _replay(values, operations):
    stacks = _make(values)
    for name in operations:
        getattr(stacks, name)()
    return stacks


def test_is_sorted_true_for_ascending():
    assert is_sorted([Element(1), Element(2), Element(3)])


def test_is_sorted_false_for_descending():
    assert not is_sorted([Element(2), Element(1)])


def test_is_sorted_accepts_equal_neighbours_and_empty():
    assert is_sorted([Element(4), Element(4)])
    assert is_sorted([])


def test_two_elements_swapped():
    stacks = _make([2, 1])
    push_swap(stacks)
    assert stacks.operations == ["sa"]
    assert _values(stacks.a) == [1, 2]


def test_worked_example_from_tiny_sort():
    stacks = _make([0, 9, 2])
    tiny_sort(stacks)
    assert stacks.operations == ["rra", "sa"]
    assert _values(stacks.a) == [0, 2, 9]


def test_sorted_input_needs_no_operations():
    stacks = _make([1, 2, 3, 4, 5])
    push_swap(stacks)
    assert stacks.operations == []
    assert stacks.output.getvalue() == ""


@pytest.mark.parametrize("values", list(permutations([5, -3, 7])))
def test_three_elements_at_most_two_operations(values):
    stacks = _make(values)
    push_swap(stacks)
    assert _values(stacks.a) == sorted(values)
    assert len(stacks.operations) <= 2


@pytest.mark.parametrize("size", [4, 5, 6])
def test_all_small_permutations_sorted(size):
    for values in permutations(range(size)):
        stacks = _make(values)
        push_swap(stacks)
        assert _values(stacks.a) == sorted(values)
        assert not stacks.b


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_large_random_input_sorted_and_replayable(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-1000, 1000), 100)
    stacks = _make(values)
    push_swap(stacks)
    assert _values(stacks.a) == sorted(values)
    assert not stacks.b
    replayed = _replay(values, stacks.operations)
    assert _values(replayed.a) == sorted(values)


def test_output_matches_recorded_operations():
    values = [3, 8, -1, 4, 0, 12, 7, 2]
    stacks = _make(values)
    sort(stacks)
    lines = stacks.output.getvalue().splitlines()
    assert lines == stacks.operations
    assert _values(stacks.a) == sorted(values)