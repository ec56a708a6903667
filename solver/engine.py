"""
Closed-form linear solver for 1, 2 or 3 unknowns.

``solve`` maps an equation kind and its coefficient vector to an Outcome.
``explain`` runs the same solve and also returns a step-by-step trail
(matrix, determinants, Cramer ratios, substitution check) for display.
"""

import logging
import time
from datetime import datetime

import numpy as np

from solver.cramer import build_system, cramer, determinant, replace_column
from solver.equations import EquationKind, spec_for, validate_coefficients
from solver.formatter import _fmt_num, format_outcome
from solver.outcome import InfiniteSolutions, NoSolution, Singular, Unique

logger = logging.getLogger(__name__)

# Relative tolerance for the substitution check in explain()
_RESIDUAL_TOL = 1e-9


# ── Solving ─────────────────────────────────────────────────────────────

def _solve_single(coeffs: tuple):
    a, b = coeffs
    if a == 0:
        if b == 0:
            return InfiniteSolutions()
        return NoSolution()
    return Unique((-b / a,))


def _solve_matrix(arity: int, coeffs: tuple):
    A, B = build_system(arity, coeffs)
    _, X = cramer(A, B)
    if X is None:
        return Singular()
    return Unique(X)


def solve(kind, coeffs):
    """
    Solve the system described by *kind* and *coeffs*.

    - Single Variable, ``[a, b]``:  a·x + b = 0
    - Two Variable System, ``[a..f]``:  a·x + b·y = c,  d·x + e·y = f
    - Three Variable System, ``[a..i]``:  rows [a,b,c], [d,e,f], [g,h,i]
      with right-hand side [c, f, i]

    Returns Unique, NoSolution, InfiniteSolutions or Singular.  Raises
    ArityMismatch / InvalidCoefficient for malformed vectors.
    """
    spec = spec_for(kind)
    values = validate_coefficients(spec.kind, coeffs)
    logger.debug("Solving %s with %d coefficients", spec.kind.value, spec.arity)

    if spec.kind is EquationKind.SINGLE_VARIABLE:
        outcome = _solve_single(values)
    else:
        outcome = _solve_matrix(spec.arity, values)

    if not isinstance(outcome, Unique):
        logger.info("%s: %s", spec.kind.value, format_outcome(outcome))
    return outcome


def residuals(kind, coeffs, values) -> tuple:
    """Return ``lhs - rhs`` of every equation after substituting *values*."""
    spec = spec_for(kind)
    coeffs = validate_coefficients(spec.kind, coeffs)
    X = np.asarray(values, dtype=np.float64)
    if X.shape != (len(spec.variables),):
        raise ValueError(
            f"{spec.kind.value} has {len(spec.variables)} unknowns, "
            f"got {X.shape[0] if X.ndim else 0} values"
        )
    if spec.kind is EquationKind.SINGLE_VARIABLE:
        a, b = coeffs
        return (float(a * X[0] + b),)
    A, B = build_system(spec.arity, coeffs)
    return tuple(float(r) for r in A @ X - B)


# ── Step trail ──────────────────────────────────────────────────────────

def _format_matrix(A: np.ndarray) -> str:
    rows = []
    for row in A:
        rows.append("[" + ", ".join(_fmt_num(v) for v in row) + "]")
    return "[" + ", ".join(rows) + "]"


def _single_steps(coeffs: tuple, outcome) -> list:
    a, b = coeffs
    steps = [{
        "description": "Starting with the equation",
        "expression": f"{_fmt_num(a)}·x + {_fmt_num(b)} = 0",
        "explanation": (
            "The equation has the form a·x + b = 0 with "
            f"a = {_fmt_num(a)} and b = {_fmt_num(b)}."
        ),
    }]
    if isinstance(outcome, InfiniteSolutions):
        steps.append({
            "description": "The variable cancels — identity",
            "expression": "0 = 0",
            "explanation": (
                "Both a and b are 0, so the equation reads 0 = 0 "
                "(always true). Every real number is a solution."
            ),
        })
    elif isinstance(outcome, NoSolution):
        steps.append({
            "description": "The variable cancels — contradiction",
            "expression": f"{_fmt_num(b)} = 0",
            "explanation": (
                f"a is 0 but b is {_fmt_num(b)}, so the equation reads "
                f"{_fmt_num(b)} = 0 (never true). There is no solution."
            ),
        })
    else:
        x = outcome.values[0]
        steps.append({
            "description": "Compute x = −b ÷ a",
            "expression": f"x = −({_fmt_num(b)}) ÷ {_fmt_num(a)}  =  {_fmt_num(x)}",
            "explanation": "Move b to the right side and divide by a.",
        })
    return steps


def _matrix_steps(spec, coeffs: tuple, outcome) -> list:
    A, B = build_system(spec.arity, coeffs)
    det_A = determinant(A)
    steps = [{
        "description": "Build coefficient matrix and constant vector",
        "expression": (
            f"A = {_format_matrix(A)}\n"
            f"B = [{', '.join(_fmt_num(v) for v in B)}]"
        ),
        "explanation": (
            "Write the system in matrix form A·X = B"
            + (", using the third coefficient of each row as its right-hand side."
               if spec.arity == 9 else ".")
        ),
    }, {
        "description": "Compute the determinant of A",
        "expression": f"det(A) = {_fmt_num(det_A)}",
        "explanation": (
            "a·e − b·d for a 2×2 matrix."
            if spec.arity == 6 else
            "Cofactor expansion along the first row."
        ),
    }]
    if isinstance(outcome, Singular):
        steps.append({
            "description": "Singular matrix — no unique solution",
            "expression": "det(A) = 0",
            "explanation": (
                "The determinant is zero, so the equations are dependent or "
                "inconsistent and Cramer's rule does not apply."
            ),
        })
        return steps

    for k, (name, value) in enumerate(zip(spec.variables, outcome.values)):
        det_k = determinant(replace_column(A, k, B))
        steps.append({
            "description": f"Cramer's rule for {name}",
            "expression": (
                f"{name} = det(A{name}) ÷ det(A) = "
                f"{_fmt_num(det_k)} ÷ {_fmt_num(det_A)}  =  {_fmt_num(value)}"
            ),
            "explanation": (
                f"Replace column {k + 1} of A with B and divide its "
                "determinant by det(A)."
            ),
        })
    return steps


def _verification_steps(spec, coeffs: tuple, outcome) -> tuple:
    """Return ``(steps, ok)`` for the substitution check of a unique solution."""
    if not isinstance(outcome, Unique):
        return [], True
    res = residuals(spec.kind, coeffs, outcome.values)
    scale = (max(1.0, max(abs(c) for c in coeffs))
             * max(1.0, max(abs(v) for v in outcome.values)))
    steps = []
    all_ok = True
    for i, r in enumerate(res):
        ok = abs(r) <= _RESIDUAL_TOL * scale
        all_ok = all_ok and ok
        steps.append({
            "description": f"Equation ({i + 1})",
            "expression": f"LHS − RHS = {_fmt_num(r)}  →  {'✓' if ok else '✗'}",
            "explanation": (
                "Substituting the solution balances the equation."
                if ok else "Sides differ beyond floating-point tolerance."
            ),
        })
    return steps, all_ok


def explain(kind, coeffs) -> dict:
    """
    Solve and return a JSON-ready trail of the work.

    Keys: kind, coefficients, outcome, values, final_answer, steps,
    verification_steps, summary.
    """
    t_start = time.perf_counter()
    spec = spec_for(kind)
    values = validate_coefficients(spec.kind, coeffs)
    outcome = solve(spec.kind, values)

    if spec.kind is EquationKind.SINGLE_VARIABLE:
        steps = _single_steps(values, outcome)
    else:
        steps = _matrix_steps(spec, values, outcome)
    verification_steps, ok = _verification_steps(spec, values, outcome)
    if not ok:
        logger.warning("Residual check failed for %s %r", spec.kind.value, values)

    for i, s in enumerate(steps, 1):
        s["step_number"] = i
    for i, s in enumerate(verification_steps, 1):
        s["step_number"] = i

    t_end = time.perf_counter()
    return {
        "kind": spec.kind.value,
        "coefficients": dict(zip(spec.labels, values)),
        "outcome": outcome.tag,
        "values": (dict(zip(spec.variables, outcome.values))
                   if isinstance(outcome, Unique) else {}),
        "final_answer": format_outcome(outcome),
        "steps": steps,
        "verification_steps": verification_steps,
        "summary": {
            "runtime_ms": round((t_end - t_start) * 1000, 2),
            "total_steps": len(steps),
            "verification_steps": len(verification_steps),
            "validation_status": "pass" if ok else "fail",
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "library": f"NumPy {np.__version__}",
        },
    }
