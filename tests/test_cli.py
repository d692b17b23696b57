import pytest

from pushtalk.push_swap.cli import main
from pushtalk.push_swap.stack import Stacks


def _apply(values, operations):
    stacks = Stacks.from_values(values, output=_Sink())
    for name in operations:
        getattr(stacks, name)()
    return [element.value for element in stacks.a], list(stacks.b)


class _Sink:
    def write(self, text):
        return len(text)


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_two_values_swapped(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_single_value_needs_nothing(capsys):
    assert main(["5"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [
        ["1", "a"],
        ["1", "+1"],
        ["0", "-0"],
        ["2147483648"],
        ["-2147483649", "3"],
        ["-"],
    ],
)
def test_invalid_input_reports_error(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_output_sorts_input(capsys):
    args = ["42", "-7", "13", "0", "99", "5", "-100", "8"]
    assert main(args) == 0
    operations = capsys.readouterr().out.splitlines()
    values = [int(arg) for arg in args]
    a, b = _apply(values, operations)
    assert a == sorted(values)
    assert b == []


def test_limits_accepted(capsys):
    args = ["2147483647", "-2147483648", "0"]
    assert main(args) == 0
    operations = capsys.readouterr().out.splitlines()
    a, _ = _apply([int(arg) for arg in args], operations)
    assert a == [-2147483648, 0, 2147483647]