import pytest

from checker import check_answer, parse_answer
from models import EquationProblem

BALANCE_EASY = EquationProblem(a=2, b=5, c=13, solution=4)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("4", 4),
        (" 4 ", 4),
        ("+4", 4),
        ("-3", -3),
        ("4.0", 4),
        ("4.00", 4),
        ("4.5", None),
        ("abc", None),
        ("4abc", None),
        ("", None),
        ("   ", None),
        (None, None),
        ("1" * 101, None),
        ("4" + " " * 100, None),
    ],
)
def test_parse_answer(raw, expected):
    assert parse_answer(raw) == expected


def test_balance_easy_end_to_end():
    assert check_answer("4", BALANCE_EASY).correct is True
    assert check_answer("3", BALANCE_EASY).correct is False
    assert check_answer("4.0", BALANCE_EASY).correct is True
    assert check_answer("four", BALANCE_EASY).correct is False


def test_malformed_input_is_just_incorrect():
    res = check_answer("x = 4", BALANCE_EASY)
    assert res.correct is False and res.answer is None


def test_perimeter_answer_in_metres():
    problem = EquationProblem(a=2, b=20, c=34, solution=7)
    assert check_answer("7", problem).correct


def test_fruit_stall_medium_total():
    problem = EquationProblem(a=4, b=10, c=42, solution=8)
    assert problem.c == 42
    assert check_answer("8", problem).correct


def test_unbalanced_problem_cannot_be_built():
    with pytest.raises(ValueError):
        EquationProblem(a=2, b=5, c=14, solution=4)
