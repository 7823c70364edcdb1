import io
import random
import sys

import pytest

from pushswap.checker import (
    InstructionError,
    apply_instruction,
    check_result,
    main,
    run_checker,
)
from pushswap.sorter import push_swap
from pushswap.stacks import Stacks


def _prepared():
    stacks = Stacks([5, 4, 3, 2, 1], record=False)
    stacks.pb()
    stacks.pb()
    return stacks


@pytest.mark.parametrize(
    "name, reference",
    [
        ("sa", "sa"),
        ("sb", "sa"),
        ("ss", "ss"),
        ("rr", "rr"),
        ("pa", "pa"),
        ("pb", "pb"),
        ("ra", "ra"),
        ("rb", "rb"),
        ("rra", "rra"),
        ("rrb", "rrb"),
        ("rrr", "rrr"),
    ],
)
def test_apply_instruction_matches_operation(name, reference):
    stacks = _prepared()
    expected = _prepared()
    getattr(expected, reference)()
    assert apply_instruction(stacks, name + "\n") == name
    assert list(stacks.a) == list(expected.a)
    assert list(stacks.b) == list(expected.b)


@pytest.mark.parametrize(
    "line, name",
    [("s", "sa"), ("r", "rr"), ("p", "pa"), ("rr", "rr"), ("rrr", "rrr"), ("rra", "rra")],
)
def test_prefixes_select_first_match(line, name):
    assert apply_instruction(Stacks([1, 2, 3], record=False), line) == name


@pytest.mark.parametrize("line", ["xx\n", "sa \n", "\n", "rrrr\n", "sax\n"])
def test_unknown_instruction(line):
    with pytest.raises(InstructionError):
        apply_instruction(Stacks([1, 2], record=False), line)


def test_check_result_ok():
    assert check_result(Stacks([1, 2, 3], record=False)) == "OK"


def test_check_result_ko_when_b_not_empty():
    stacks = Stacks([1, 2, 3], record=False)
    stacks.pb()
    assert check_result(stacks) == "KO"


def test_check_result_ko_when_unsorted():
    assert check_result(Stacks([2, 1], record=False)) == "KO"


def test_run_checker():
    assert run_checker([2, 1], ["sa\n"]) == "OK"
    assert run_checker([2, 1], []) == "KO"


@pytest.mark.parametrize("seed", [11, 12])
def test_round_trip_with_sorter(seed):
    values = random.Random(seed).sample(range(1000, 100000), 60)
    lines = [move + "\n" for move in push_swap(values)]
    assert run_checker(values, lines) == "OK"


def test_main_ok(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("sa\n"))
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_bad_instruction(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("nope\n"))
    assert main(["2", "1"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_duplicates(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["1", "1"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_invalid_number(capsys):
    assert main(["1", "z"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_no_arguments():
    assert main([]) == 1