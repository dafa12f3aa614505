"""Fixed-bin histograms of drawn samples.

Samples outside [lower, upper] are clamped onto the nearest bound before
binning, so the two edge bins also collect the tails. There are
``bins + 1`` counters: the last one only receives values equal to
``upper``.
"""

import logging
import math
from typing import Any, Iterable, Sequence

import numpy as np

from crandom.distributions.registry import get_distribution
from crandom.sources.base import UniformSource
from crandom.utils import clamp

logger = logging.getLogger(__name__)


class Histogram:
    """Counts samples into equal-width bins over [lower, upper]."""

    def __init__(self, lower: float, upper: float, bins: int):
        """Initialize histogram.

        Args:
            lower: Lower bound (samples below are clamped to it)
            upper: Upper bound (samples above are clamped to it)
            bins: Number of bins across [lower, upper]

        Raises:
            ValueError: If lower >= upper or bins <= 0
        """
        if not lower < upper:
            raise ValueError(f"lower must be less than upper, got {lower} >= {upper}")
        if bins <= 0:
            raise ValueError(f"bins must be positive, got {bins}")

        self.lower = float(lower)
        self.upper = float(upper)
        self.bins = int(bins)
        self.counts = np.zeros(self.bins + 1, dtype=np.int64)

    @property
    def width(self) -> float:
        """Width of one bin."""
        return (self.upper - self.lower) / self.bins

    @property
    def total(self) -> int:
        """Number of samples added."""
        return int(self.counts.sum())

    def bin_index(self, x: float) -> int:
        """Bin that x falls into after clamping."""
        x = clamp(x, self.lower, self.upper)
        return math.floor(self.bins * (x - self.lower) / (self.upper - self.lower))

    def add(self, x: float) -> None:
        """Count one sample."""
        self.counts[self.bin_index(x)] += 1

    def extend(self, values: Iterable[float]) -> None:
        """Count many samples at once."""
        data = np.clip(np.fromiter(values, dtype=np.float64), self.lower, self.upper)
        if data.size == 0:
            return
        idx = np.floor(self.bins * (data - self.lower) / (self.upper - self.lower)).astype(np.int64)
        self.counts += np.bincount(idx, minlength=self.bins + 1)

    def left_edge(self, index: int) -> float:
        """Left edge of bin ``index``."""
        return self.lower + index * (self.upper - self.lower) / self.bins

    def density(self) -> list[tuple[float, float]]:
        """Return (left_edge, density) for every non-empty bin.

        Densities are normalised so that a histogram of a continuous
        distribution approximates its pdf.
        """
        total = self.total
        if total == 0:
            return []

        scale = self.bins / (total * (self.upper - self.lower))
        return [
            (self.left_edge(i), int(count) * scale)
            for i, count in enumerate(self.counts)
            if count
        ]

    def format_rows(self) -> list[str]:
        """Density rows as ``"<edge> <density>"`` text lines."""
        return [f"{edge:.3f} {value:.3f}" for edge, value in self.density()]


def standard_normal_pdf(x: float) -> float:
    """Density of N(0, 1) at x."""
    return math.exp(-0.5 * x * x) / math.sqrt(2.0 * math.pi)


def sample_histogram(
    source: UniformSource,
    name: str,
    params: Sequence[Any],
    draws: int,
    lower: float,
    upper: float,
    bins: int,
    chunk_size: int = 100_000,
) -> Histogram:
    """Fill a histogram with ``draws`` samples of a named distribution.

    Args:
        source: Uniform source to draw from
        name: Distribution name (see ``DISTRIBUTIONS``)
        params: Distribution parameters
        draws: Number of samples
        lower: Histogram lower bound
        upper: Histogram upper bound
        bins: Number of bins
        chunk_size: Samples binned per batch

    Returns:
        Filled histogram
    """
    spec = get_distribution(name)
    args = spec.convert(*params)
    func = spec.func
    histogram = Histogram(lower, upper, bins)

    logger.info(
        "Sampling %d %s%s draws into %d bins over [%s, %s]",
        draws, spec.name, tuple(args), bins, lower, upper,
    )

    remaining = draws
    while remaining > 0:
        n = min(chunk_size, remaining)
        histogram.extend(func(source, *args) for _ in range(n))
        remaining -= n

    return histogram
