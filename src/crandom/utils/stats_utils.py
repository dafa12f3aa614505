"""Summary statistics over drawn samples."""

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np


@dataclass
class SampleMoments:
    """Empirical moments of a batch of samples."""

    count: int
    mean: float
    variance: float
    minimum: float
    maximum: float


def sample_moments(values: Sequence[Union[int, float]]) -> SampleMoments:
    """Compute count, mean, (population) variance, min and max.

    Args:
        values: Non-empty sequence of samples

    Returns:
        SampleMoments for the batch

    Raises:
        ValueError: If values is empty
    """
    data = np.asarray(values, dtype=np.float64)
    if data.size == 0:
        raise ValueError("Cannot compute moments of an empty sample")

    return SampleMoments(
        count=int(data.size),
        mean=float(data.mean()),
        variance=float(data.var()),
        minimum=float(data.min()),
        maximum=float(data.max()),
    )


def relative_error(observed: float, expected: float) -> float:
    """Relative deviation of observed from expected (absolute when expected is 0)."""
    if expected == 0:
        return abs(observed)
    return abs(observed - expected) / abs(expected)
