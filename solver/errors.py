"""Exceptions raised when a caller hands the solver malformed input.

Degenerate systems (no solution, infinitely many, singular matrix) are not
errors; they come back from ``solve`` as Outcome values.
"""


class SolverInputError(ValueError):
    """Base class for contract violations by the caller."""


class UnknownEquationKind(SolverInputError):
    def __init__(self, value) -> None:
        self.value = value
        super().__init__(
            f"Unknown equation type: {value!r}. Expected one of "
            "'Single Variable', 'Two Variable System', 'Three Variable System'."
        )


class ArityMismatch(SolverInputError):
    def __init__(self, kind, expected: int, received: int) -> None:
        self.kind = kind
        self.expected = expected
        self.received = received
        super().__init__(
            f"{kind.value} expects {expected} coefficients, got {received}."
        )


class InvalidCoefficient(SolverInputError):
    def __init__(self, label: str, value) -> None:
        self.label = label
        self.value = value
        super().__init__(
            f"Coefficient '{label}' must be a finite number, got {value!r}."
        )
