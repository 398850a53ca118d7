import pytest

from pushswap.cli import main
from pushswap.stacks import PushSwap


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_empty_single_argument_prints_nothing(capsys):
    assert main([""]) == 0
    assert capsys.readouterr() == ("", "")


def test_single_string_is_split(capsys):
    main(["2 1"])
    assert capsys.readouterr().out == "sa\n"


def test_sorted_input_prints_nothing(capsys):
    main(["1", "2", "3"])
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["   "], ["3", "abc"], ["2147483648"], ["1 2 2"], ["+"]],
)
def test_bad_input_reports_error(capsys, args):
    assert main(args) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_printed_moves_sort_the_input(capsys):
    values = [9, -4, 17, 3, 0, 8, -11, 5]
    main([str(v) for v in values])
    moves = capsys.readouterr().out.split()
    state = PushSwap(values)
    state.run(moves)
    assert list(state.a) == sorted(values)
    assert not state.b