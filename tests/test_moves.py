import io

from pushtalk.push_swap.moves import do_move
from pushtalk.push_swap.stack import Element, Stacks


def make(a_values, b_values):
    return Stacks(
        (Element(v) for v in a_values),
        (Element(v) for v in b_values),
        output=io.StringIO(),
    )


def values(stack):
    return [e.value for e in stack]


def test_zero_costs_only_push():
    stacks = make([1, 2], [5, 6])
    do_move(stacks, 0, 0)
    assert stacks.operations == ["pa"]
    assert values(stacks.a) == [5, 1, 2]
    assert values(stacks.b) == [6]


def test_positive_costs_share_rotations():
    stacks = make([1, 2, 3, 4], [10, 20, 30])
    do_move(stacks, 2, 1)
    assert stacks.operations == ["rr", "ra", "pa"]
    assert values(stacks.a) == [20, 3, 4, 1, 2]
    assert values(stacks.b) == [30, 10]


def test_negative_costs_share_reverse_rotations():
    stacks = make([1, 2, 3, 4], [10, 20, 30])
    do_move(stacks, -1, -2)
    assert stacks.operations == ["rrr", "rrb", "pa"]
    assert values(stacks.a) == [20, 4, 1, 2, 3]
    assert values(stacks.b) == [30, 10]


def test_mixed_signs_rotate_separately():
    stacks = make([1, 2, 3], [7, 8, 9])
    do_move(stacks, 1, -1)
    assert stacks.operations == ["ra", "rrb", "pa"]
    assert values(stacks.a) == [9, 2, 3, 1]


def test_output_matches_operations():
    out = io.StringIO()
    stacks = Stacks(
        (Element(v) for v in [1, 2, 3]), (Element(v) for v in [4, 5]), output=out
    )
    do_move(stacks, -1, 1)
    assert out.getvalue() == "".join(op + "\n" for op in stacks.operations)
    assert stacks.operations[-1] == "pa"


def test_move_preserves_all_elements():
    stacks = make([1, 2, 3, 4, 5], [6, 7, 8])
    do_move(stacks, -2, 2)
    assert sorted(values(stacks.a) + values(stacks.b)) == [1, 2, 3, 4, 5, 6, 7, 8]
    assert len(stacks.a) == 6
    assert len(stacks.operations) == 5