"""Name-based lookup of the distribution functions.

Lets callers (the CLI, config-driven runs) pick a distribution by name and
pass its parameters as strings or numbers.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Union

from crandom.distributions import finite, infinite
from crandom.errors import UnknownDistributionError
from crandom.sources.base import UniformSource

Number = Union[int, float]


@dataclass(frozen=True)
class DistributionSpec:
    """A named distribution with its parameter shape and moments."""

    name: str
    func: Callable[..., Number]
    params: tuple[tuple[str, type], ...]
    support: str  # "finite" or "infinite"
    mean: Callable[..., float]
    variance: Callable[..., float]

    @property
    def param_names(self) -> list[str]:
        return [name for name, _ in self.params]

    def convert(self, *params: Any) -> list[Number]:
        """Convert raw parameters (e.g. CLI strings) to the declared types.

        Raises:
            ValueError: If the parameter count is wrong or a value does not
                convert
        """
        if len(params) != len(self.params):
            raise ValueError(
                f"{self.name} takes {len(self.params)} parameter(s) "
                f"({', '.join(self.param_names)}), got {len(params)}"
            )
        return [kind(value) for (_, kind), value in zip(self.params, params)]


def _student_mean(n: int) -> float:
    return 0.0 if n > 1 else math.nan


def _student_variance(n: int) -> float:
    return n / (n - 2) if n > 2 else math.nan


_SPECS = [
    DistributionSpec(
        "bernoulli", finite.bernoulli, (("p", float),), "finite",
        mean=lambda p: 1.0 - p,
        variance=lambda p: p * (1.0 - p),
    ),
    DistributionSpec(
        "binomial", finite.binomial, (("n", int), ("p", float)), "finite",
        mean=lambda n, p: n * (1.0 - p),
        variance=lambda n, p: n * p * (1.0 - p),
    ),
    DistributionSpec(
        "equilikely", finite.equilikely, (("a", int), ("b", int)), "finite",
        mean=lambda a, b: (a + b) / 2.0,
        variance=lambda a, b: ((b - a + 1) ** 2 - 1) / 12.0,
    ),
    DistributionSpec(
        "geometric", finite.geometric, (("p", float),), "finite",
        mean=lambda p: p / (1.0 - p),
        variance=lambda p: p / (1.0 - p) ** 2,
    ),
    DistributionSpec(
        "pascal", finite.pascal, (("n", int), ("p", float)), "finite",
        mean=lambda n, p: n * p / (1.0 - p),
        variance=lambda n, p: n * p / (1.0 - p) ** 2,
    ),
    DistributionSpec(
        "poisson", finite.poisson, (("m", float),), "finite",
        mean=lambda m: 1.0,
        variance=lambda m: 1.0,
    ),
    DistributionSpec(
        "uniform", infinite.uniform, (("a", float), ("b", float)), "infinite",
        mean=lambda a, b: (a + b) / 2.0,
        variance=lambda a, b: (b - a) ** 2 / 12.0,
    ),
    DistributionSpec(
        "exponential", infinite.exponential, (("m", float),), "infinite",
        mean=lambda m: m,
        variance=lambda m: m * m,
    ),
    DistributionSpec(
        "erlang", infinite.erlang, (("n", int), ("b", float)), "infinite",
        mean=lambda n, b: n * b,
        variance=lambda n, b: n * b * b,
    ),
    DistributionSpec(
        "normal", infinite.normal, (("m", float), ("s", float)), "infinite",
        mean=lambda m, s: m,
        variance=lambda m, s: s * s,
    ),
    DistributionSpec(
        "lognormal", infinite.lognormal, (("a", float), ("b", float)), "infinite",
        mean=lambda a, b: math.exp(a + b * b / 2.0),
        variance=lambda a, b: (math.exp(b * b) - 1.0) * math.exp(2.0 * a + b * b),
    ),
    DistributionSpec(
        "chisquare", infinite.chisquare, (("n", int),), "infinite",
        mean=lambda n: float(n),
        variance=lambda n: 2.0 * n,
    ),
    DistributionSpec(
        "student", infinite.student, (("n", int),), "infinite",
        mean=_student_mean,
        variance=_student_variance,
    ),
]

DISTRIBUTIONS: dict[str, DistributionSpec] = {spec.name: spec for spec in _SPECS}


def get_distribution(name: str) -> DistributionSpec:
    """Look up a distribution by name (case-insensitive).

    Raises:
        UnknownDistributionError: If no distribution has that name
    """
    spec = DISTRIBUTIONS.get(name.strip().lower())
    if spec is None:
        raise UnknownDistributionError(
            f"Unknown distribution: {name}. Known: {sorted(DISTRIBUTIONS)}"
        )
    return spec


def draw(source: UniformSource, name: str, *params: Any) -> Number:
    """Draw one sample of the named distribution."""
    spec = get_distribution(name)
    return spec.func(source, *spec.convert(*params))


def draw_many(source: UniformSource, name: str, count: int, *params: Any) -> list[Number]:
    """Draw ``count`` samples of the named distribution from one stream."""
    spec = get_distribution(name)
    args = spec.convert(*params)
    func = spec.func
    return [func(source, *args) for _ in range(count)]
