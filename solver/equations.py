"""
Equation kinds and their coefficient layouts.

Each kind maps to a fixed-size coefficient vector.  The layout table below
is what the input forms are built from, so the position of every
coefficient means the same thing in the GUI, the HTTP API and the solver.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum

from solver.errors import ArityMismatch, InvalidCoefficient, UnknownEquationKind

logger = logging.getLogger(__name__)


class EquationKind(Enum):
    SINGLE_VARIABLE = "Single Variable"
    TWO_VARIABLE_SYSTEM = "Two Variable System"
    THREE_VARIABLE_SYSTEM = "Three Variable System"

    @classmethod
    def from_label(cls, value) -> "EquationKind":
        """Resolve a dropdown label (or member name) to an EquationKind.

        Accepts ``"Two Variable System"``, ``"two_variable_system"`` or an
        EquationKind instance.  Matching ignores case and surrounding spaces.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value.lower(), member.name.lower()):
                    return member
        raise UnknownEquationKind(value)


@dataclass(frozen=True)
class EquationSpec:
    """Static description of one equation kind.

    - arity: number of coefficients expected
    - variables: names of the unknowns, in solution order
    - labels: one input label per coefficient, in positional order
    - rows: coefficient labels grouped by equation
    - form: readable template of the equation(s)
    """
    kind: EquationKind
    arity: int
    variables: tuple
    labels: tuple
    rows: tuple
    form: str


_SPECS = {
    EquationKind.SINGLE_VARIABLE: EquationSpec(
        kind=EquationKind.SINGLE_VARIABLE,
        arity=2,
        variables=("x",),
        labels=("a (coefficient)", "b (constant)"),
        rows=(("a", "b"),),
        form="a·x + b = 0",
    ),
    EquationKind.TWO_VARIABLE_SYSTEM: EquationSpec(
        kind=EquationKind.TWO_VARIABLE_SYSTEM,
        arity=6,
        variables=("x", "y"),
        labels=("a", "b", "c", "d", "e", "f"),
        rows=(("a", "b", "c"), ("d", "e", "f")),
        form="a·x + b·y = c\nd·x + e·y = f",
    ),
    # The right-hand side of each row is its own third coefficient.
    EquationKind.THREE_VARIABLE_SYSTEM: EquationSpec(
        kind=EquationKind.THREE_VARIABLE_SYSTEM,
        arity=9,
        variables=("x", "y", "z"),
        labels=("a", "b", "c", "d", "e", "f", "g", "h", "i"),
        rows=(("a", "b", "c"), ("d", "e", "f"), ("g", "h", "i")),
        form="a·x + b·y + c·z = c\nd·x + e·y + f·z = f\ng·x + h·y + i·z = i",
    ),
}


def spec_for(kind) -> EquationSpec:
    """Return the layout entry for *kind* (enum or label)."""
    return _SPECS[EquationKind.from_label(kind)]


def all_specs() -> list[EquationSpec]:
    return [_SPECS[k] for k in EquationKind]


def validate_coefficients(kind, coeffs) -> tuple:
    """Check *coeffs* against the layout of *kind* and return them as floats.

    Raises ArityMismatch when the length is wrong and InvalidCoefficient
    when an entry is not a finite real number.  Nothing is truncated or
    padded.
    """
    spec = spec_for(kind)
    values = list(coeffs)
    if len(values) != spec.arity:
        logger.warning("Arity mismatch for %s: expected %d, got %d",
                       spec.kind.value, spec.arity, len(values))
        raise ArityMismatch(spec.kind, spec.arity, len(values))

    result = []
    for label, raw in zip(spec.labels, values):
        # bool is an int subclass but never a meaningful coefficient
        if isinstance(raw, bool):
            logger.warning("Boolean coefficient %s=%r", label, raw)
            raise InvalidCoefficient(label, raw)
        try:
            value = float(raw)
        except (TypeError, ValueError):
            logger.warning("Non-numeric coefficient %s=%r", label, raw)
            raise InvalidCoefficient(label, raw) from None
        if not math.isfinite(value):
            logger.warning("Non-finite coefficient %s=%r", label, raw)
            raise InvalidCoefficient(label, raw)
        result.append(value)
    return tuple(result)
