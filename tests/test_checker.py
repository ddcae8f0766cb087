import io
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.checker import KO, OK, all_digits, main, run_commands
from pushswap.sorter import sort_values
from pushswap.stack import InputError


def _feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


@pytest.mark.parametrize(
    "words, expected",
    [
        (["+12", "-3", "4"], True),
        (["-"], True),
        ([], True),
        (["1a"], False),
        (["--1"], False),
        (["1", " 2"], False),
    ],
)
def test_all_digits(words, expected):
    assert all_digits(words) is expected


def test_run_commands_sorts():
    assert run_commands([2, 1], ["sa\n"]) is True


def test_run_commands_with_value_left_in_b():
    assert run_commands([1, 2], ["pb\n"]) is False


def test_run_commands_empty_stack_is_ko():
    assert run_commands([], []) is False


@pytest.mark.parametrize("line", ["xx\n", "sa", "\n", "sa \n"])
def test_run_commands_rejects_bad_lines(line):
    with pytest.raises(InputError):
        run_commands([1, 2], [line])


def test_main_ok(monkeypatch, capsys):
    _feed(monkeypatch, "sa\n")
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "\033[0;32mOK\033[0m\n"


def test_main_ko(monkeypatch, capsys):
    _feed(monkeypatch, "")
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == KO


@pytest.mark.parametrize("argv", [[], [""], ["1", "x"], ["1 a"]])
def test_main_rejects_arguments(argv, monkeypatch, capsys):
    _feed(monkeypatch, "sa\n")
    assert main(argv) == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_duplicate_reports_error_then_ko(monkeypatch, capsys):
    _feed(monkeypatch, "")
    assert main(["1", "1"]) == 0
    assert capsys.readouterr().out == "Error\n" + KO


def test_main_bad_command(monkeypatch, capsys):
    _feed(monkeypatch, "sa\nbogus\n")
    assert main(["2", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@given(
    st.lists(
        st.integers(min_value=-2147483647, max_value=2147483646),
        unique=True,
        min_size=1,
        max_size=30,
    )
)
def test_sorter_output_is_accepted(values):
    lines = [f"{operation.value}\n" for operation in sort_values(values)]
    assert run_commands(values, lines) is True


def test_main_accepts_sorter_output(monkeypatch, capsys):
    values = [5, -1, 8, 3, 0, 2]
    _feed(monkeypatch, "".join(f"{op.value}\n" for op in sort_values(values)))
    assert main([str(v) for v in values]) == 0
    assert capsys.readouterr().out == OK