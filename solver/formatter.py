"""Render solve outcomes and input errors as display strings."""

import math

from solver.outcome import InfiniteSolutions, NoSolution, Singular, Unique

_VARIABLE_NAMES = ("x", "y", "z")

NO_SOLUTION_TEXT = "No solution"
INFINITE_SOLUTIONS_TEXT = "Infinite solutions"
SINGULAR_TEXT = "No unique solution (Singular matrix)"


def _fmt_fixed(value: float, decimals: int = 4) -> str:
    # + 0.0 turns -0.0 into 0.0 so an exact zero never prints as "-0.0000"
    return f"{value + 0.0:.{decimals}f}"


def _fmt_num(value: float, max_decimals: int = 10) -> str:
    """Short decimal form for step trails: ``7`` not ``7.0``, ``2.5`` not ``2.5000``."""
    if not math.isfinite(value) or abs(value) >= 1e15:
        return f"{value:g}"
    # tiny non-zero values must not collapse to "0"
    if value != 0 and abs(value) < 1e-6:
        return f"{value:g}"
    if abs(value - round(value)) < 1e-12:
        return str(int(round(value)))
    return f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")


def format_outcome(outcome) -> str:
    """Return the display string for an Outcome.

    >>> format_outcome(Unique((1.5, -2.0)))
    'x = 1.5000, y = -2.0000'
    """
    if isinstance(outcome, Unique):
        if not 1 <= len(outcome.values) <= len(_VARIABLE_NAMES):
            raise ValueError(
                f"Expected 1 to 3 solution values, got {len(outcome.values)}"
            )
        return ", ".join(
            f"{name} = {_fmt_fixed(v)}"
            for name, v in zip(_VARIABLE_NAMES, outcome.values)
        )
    if isinstance(outcome, NoSolution):
        return NO_SOLUTION_TEXT
    if isinstance(outcome, InfiniteSolutions):
        return INFINITE_SOLUTIONS_TEXT
    if isinstance(outcome, Singular):
        return SINGULAR_TEXT
    raise TypeError(f"Not a solve outcome: {outcome!r}")


def format_error(exc: Exception) -> str:
    return f"Error: {exc}"


format = format_outcome
