"""Distributions with infinite (real) support.

Based on the random variate generators of Park & Geyer (rvgs).
"""

import math

from crandom.distributions.contracts import require_ordered, require_positive
from crandom.sources.base import UniformSource

# Odeh & Evans rational approximation of the normal idf,
# J. Applied Statistics, 1974, vol 23, pp 96-97.
P0 = 0.322232431088
P1 = 1.0
P2 = 0.342242088547
P3 = 0.204231210245e-1
P4 = 0.453642210148e-4

Q0 = 0.099348462606
Q1 = 0.588581570495
Q2 = 0.531103462366
Q3 = 0.103537752850
Q4 = 0.385607006340e-2


def uniform(source: UniformSource, a: float, b: float) -> float:
    """Return a uniformly distributed real number between a and b.

    Range:    a <= x < b
    Mean:     (a + b) / 2
    Variance: (b - a) ** 2 / 12
    """
    require_ordered(a, b)
    return a + (b - a) * source.next()


def exponential(source: UniformSource, m: float) -> float:
    """Return an exponentially distributed positive real number.

    Range:    0 < x
    Mean:     m
    Variance: m ** 2
    """
    require_positive("m", m)
    return -m * math.log(1.0 - source.next())


def erlang(source: UniformSource, n: int, b: float) -> float:
    """Return an Erlang distributed positive real number.

    Sum of n exponential(b) draws.

    Range:    0 < x
    Mean:     n * b
    Variance: n * b ** 2
    """
    require_positive("n", n)
    require_positive("b", b)

    x = 0.0
    for _ in range(n):
        x -= b * math.log(1.0 - source.next())
    return x


def standard_normal_idf(u: float) -> float:
    """Approximate inverse CDF of N(0, 1) at u, 0 <= u < 1.

    Odeh & Evans approximation. Returns -inf for u == 0.
    """
    if u < 0.5:
        if u <= 0.0:
            return -math.inf
        t = math.sqrt(-2.0 * math.log(u))
    else:
        t = math.sqrt(-2.0 * math.log(1.0 - u))

    p = P0 + t * (P1 + t * (P2 + t * (P3 + t * P4)))
    q = Q0 + t * (Q1 + t * (Q2 + t * (Q3 + t * Q4)))

    if u < 0.5:
        return (p / q) - t
    return t - (p / q)


def normal(source: UniformSource, m: float, s: float) -> float:
    """Return a normal (Gaussian) distributed real number.

    Inverse-CDF sampling from one uniform draw.

    Range:    all x
    Mean:     m
    Variance: s ** 2
    """
    require_positive("s", s)
    return m + s * standard_normal_idf(source.next())


def lognormal(source: UniformSource, a: float, b: float) -> float:
    """Return a lognormal distributed positive real number.

    Range:    0 < x
    Mean:     exp(a + b ** 2 / 2)
    Variance: (exp(b ** 2) - 1) * exp(2 * a + b ** 2)
    """
    require_positive("b", b)
    return math.exp(a + b * normal(source, 0.0, 1.0))


def chisquare(source: UniformSource, n: int) -> float:
    """Return a chi-square distributed positive real number.

    Sum of n squared standard normal draws.

    Range:    0 < x
    Mean:     n
    Variance: 2 * n
    """
    require_positive("n", n)

    x = 0.0
    for _ in range(n):
        z = normal(source, 0.0, 1.0)
        x += z * z
    return x


def student(source: UniformSource, n: int) -> float:
    """Return a Student-t distributed real number.

    Range:    all x
    Mean:     0           (when n > 1)
    Variance: n / (n - 2) (when n > 2)
    """
    require_positive("n", n)
    return normal(source, 0.0, 1.0) / math.sqrt(chisquare(source, n) / n)
