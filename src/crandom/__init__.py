"""
crandom - Random variate generators over a pluggable uniform source.

A UniformSource produces doubles in [0, 1); the distribution functions turn
that stream into samples of Bernoulli, binomial, equilikely, geometric,
Pascal, Poisson, uniform, exponential, Erlang, normal, lognormal,
chi-square and Student-t variates. A fixed seed and a fixed sequence of
calls always give the same samples.
"""

__version__ = "1.0.0"

from .config import ConfigManager
from .distributions import (
    DISTRIBUTIONS,
    DistributionSpec,
    bernoulli,
    binomial,
    chisquare,
    contract_checks_enabled,
    draw,
    draw_many,
    equilikely,
    erlang,
    exponential,
    geometric,
    get_distribution,
    lognormal,
    normal,
    pascal,
    poisson,
    set_contract_checks,
    student,
    uniform,
)
from .errors import (
    ContractViolationError,
    CRandomError,
    ResourceExhaustionError,
    SeedError,
    SourceReleasedError,
    UnknownDistributionError,
)
from .histogram import Histogram, sample_histogram
from .sources import (
    MersenneTwisterSource,
    PCG64Source,
    ScriptedSource,
    SourceFactory,
    UniformSource,
    create_source,
    new_default,
    new_from_array,
    new_from_seed,
    release,
    source_from_config,
)

__all__ = [
    "ConfigManager",
    "DISTRIBUTIONS",
    "DistributionSpec",
    "bernoulli",
    "binomial",
    "chisquare",
    "contract_checks_enabled",
    "draw",
    "draw_many",
    "equilikely",
    "erlang",
    "exponential",
    "geometric",
    "get_distribution",
    "lognormal",
    "normal",
    "pascal",
    "poisson",
    "set_contract_checks",
    "student",
    "uniform",
    "ContractViolationError",
    "CRandomError",
    "ResourceExhaustionError",
    "SeedError",
    "SourceReleasedError",
    "UnknownDistributionError",
    "Histogram",
    "sample_histogram",
    "MersenneTwisterSource",
    "PCG64Source",
    "ScriptedSource",
    "SourceFactory",
    "UniformSource",
    "create_source",
    "new_default",
    "new_from_array",
    "new_from_seed",
    "release",
    "source_from_config",
]
