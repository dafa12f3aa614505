"""Random variate generators built on a uniform source.

Every function takes the source first, then the distribution parameters,
and returns one sample. No function keeps state of its own.
"""

from .contracts import contract_checks_enabled, set_contract_checks
from .finite import bernoulli, binomial, equilikely, geometric, pascal, poisson
from .infinite import (
    chisquare,
    erlang,
    exponential,
    lognormal,
    normal,
    standard_normal_idf,
    student,
    uniform,
)
from .registry import DISTRIBUTIONS, DistributionSpec, draw, draw_many, get_distribution

__all__ = [
    "bernoulli",
    "binomial",
    "equilikely",
    "geometric",
    "pascal",
    "poisson",
    "uniform",
    "exponential",
    "erlang",
    "normal",
    "lognormal",
    "chisquare",
    "student",
    "standard_normal_idf",
    "DISTRIBUTIONS",
    "DistributionSpec",
    "draw",
    "draw_many",
    "get_distribution",
    "contract_checks_enabled",
    "set_contract_checks",
]
