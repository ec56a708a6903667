import pytest

from solver import formatter
from solver.equations import EquationKind
from solver.errors import ArityMismatch
from solver.outcome import InfiniteSolutions, NoSolution, Singular, Unique


@pytest.mark.parametrize(
    "outcome,expected",
    [
        (Unique((1.5, -2.0)), "x = 1.5000, y = -2.0000"),
        (Unique((3.0,)), "x = 3.0000"),
        (Unique((1 / 3, 2 / 3, -1.0)), "x = 0.3333, y = 0.6667, z = -1.0000"),
        (NoSolution(), "No solution"),
        (InfiniteSolutions(), "Infinite solutions"),
        (Singular(), "No unique solution (Singular matrix)"),
    ],
)
def test_format_outcome_literals(outcome, expected) -> None:
    assert formatter.format_outcome(outcome) == expected


def test_negative_zero_prints_as_zero() -> None:
    assert formatter.format_outcome(Unique((-0.0, 1.0))) == "x = 0.0000, y = 1.0000"


def test_format_alias() -> None:
    assert formatter.format is formatter.format_outcome


def test_format_error_prefix() -> None:
    exc = ArityMismatch(EquationKind.TWO_VARIABLE_SYSTEM, 6, 2)
    assert formatter.format_error(exc) == (
        "Error: Two Variable System expects 6 coefficients, got 2."
    )


def test_rejects_non_outcomes() -> None:
    with pytest.raises(TypeError):
        formatter.format_outcome("x = 1")
    with pytest.raises(ValueError):
        formatter.format_outcome(Unique((1.0, 2.0, 3.0, 4.0)))


@pytest.mark.parametrize(
    "value,expected",
    [(7.0, "7"), (2.5, "2.5"), (-0.0, "0"), (3.0000000000001, "3"), (float("inf"), "inf"),
     (1e-14, "1e-14"), (-2.5e-09, "-2.5e-09")],
)
def test_fmt_num(value, expected) -> None:
    assert formatter._fmt_num(value) == expected


def test_outcome_tags() -> None:
    assert Unique((1,)).tag == "unique"
    assert Unique([1, 2]).values == (1.0, 2.0)
    assert NoSolution().tag == "no_solution"
    assert InfiniteSolutions().tag == "infinite_solutions"
    assert Singular().tag == "singular"
