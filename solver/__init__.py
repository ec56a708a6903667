from solver.engine import explain, residuals, solve
from solver.equations import (
    EquationKind,
    EquationSpec,
    all_specs,
    spec_for,
    validate_coefficients,
)
from solver.errors import (
    ArityMismatch,
    InvalidCoefficient,
    SolverInputError,
    UnknownEquationKind,
)
from solver.formatter import format, format_error, format_outcome
from solver.outcome import InfiniteSolutions, NoSolution, Outcome, Singular, Unique

__all__ = [
    "solve",
    "explain",
    "residuals",
    "format",
    "format_outcome",
    "format_error",
    "EquationKind",
    "EquationSpec",
    "spec_for",
    "all_specs",
    "validate_coefficients",
    "Outcome",
    "Unique",
    "NoSolution",
    "InfiniteSolutions",
    "Singular",
    "SolverInputError",
    "ArityMismatch",
    "InvalidCoefficient",
    "UnknownEquationKind",
]
