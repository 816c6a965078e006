import io

from pushswap.cli import format_stack, main, run
from pushswap.stacks import Pair

MOVES = {"pa", "pb", "ra", "sa", "rra"}


def test_format_stack_lists_top_first():
    assert format_stack([Pair(1), Pair(2)]) == "2 1 \n"


def test_format_empty_stack():
    assert format_stack([]) == "\n"


def test_run_prints_stack_before_and_after():
    out = io.StringIO()
    assert run(["3 1 2"], out) == 0
    lines = out.getvalue().splitlines()
    assert lines[0] == "3 1 2 "
    assert lines[-1] == "1 2 3 "
    assert set(lines[1:-1]) <= MOVES


def test_run_large_input_ends_sorted():
    numbers = [str(n) for n in (40, -3, 17, 8, 99, 0, -50, 23)]
    out = io.StringIO()
    assert run(numbers, out) == 0
    lines = out.getvalue().splitlines()
    assert lines[0] == " ".join(numbers) + " "
    expected = sorted(int(n) for n in numbers)
    assert lines[-1] == " ".join(map(str, expected)) + " "
    assert set(lines[1:-1]) <= MOVES


def test_run_without_arguments_prints_nothing():
    out = io.StringIO()
    assert run([], out) == 0
    assert out.getvalue() == ""


def test_run_already_sorted_prints_nothing():
    out = io.StringIO()
    assert run(["1", "2", "3"], out) == 0
    assert out.getvalue() == ""


def test_run_reports_error(capsys):
    out = io.StringIO()
    assert run(["1 1"], out) == 1
    assert out.getvalue() == ""
    assert capsys.readouterr().err == "Error\n"


def test_main_swaps_two_numbers(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "2 1 \nsa\n1 2 \n"


def test_main_rejects_bad_number(capsys):
    assert main(["x"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""