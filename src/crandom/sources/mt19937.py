"""Mersenne Twister uniform source (reference engine).

Wraps numpy's legacy ``RandomState``, which keeps the classic MT19937
seeding routines: an integer seed goes through ``init_genrand`` and a key
array through ``init_by_array``.
"""

import logging
from typing import Optional

import numpy as np

from crandom.errors import ResourceExhaustionError
from crandom.sources.buffered import BufferedSource, SeedLike

logger = logging.getLogger(__name__)


class MersenneTwisterSource(BufferedSource):
    """MT19937 stream seeded by a 32-bit integer or an array of integers."""

    engine = "mt19937"

    def __init__(
        self,
        seed: SeedLike,
        buffer_size: int = BufferedSource.DEFAULT_BUFFER_SIZE,
    ):
        """Initialize the generator.

        Args:
            seed: Integer seed (reduced modulo 2**32) or a sequence of
                integer keys (each reduced modulo 2**32)
            buffer_size: Number of doubles drawn from the engine per refill

        Raises:
            SeedError: If ``seed`` is not an integer or a non-empty
                sequence of integers
            ResourceExhaustionError: If the engine state cannot be allocated
        """
        super().__init__(seed, buffer_size)

        try:
            self._state: Optional[np.random.RandomState] = np.random.RandomState(self.seed)
        except MemoryError as e:
            raise ResourceExhaustionError("Could not allocate MT19937 state") from e

        logger.debug("Created mt19937 source (seed=%s)", self.seed)

    def _draw_block(self, size: int) -> np.ndarray:
        return self._state.random_sample(size)

    def _release(self) -> None:
        super()._release()
        self._state = None
