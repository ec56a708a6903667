"""Tagged result of a solve attempt."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Unique:
    values: tuple
    tag: str = field(default="unique", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))


@dataclass(frozen=True)
class NoSolution:
    tag: str = field(default="no_solution", init=False)


@dataclass(frozen=True)
class InfiniteSolutions:
    tag: str = field(default="infinite_solutions", init=False)


@dataclass(frozen=True)
class Singular:
    tag: str = field(default="singular", init=False)


Outcome = Unique | NoSolution | InfiniteSolutions | Singular
