"""PCG64 uniform source, an alternative engine to MT19937."""

import logging
from typing import Optional

import numpy as np

from crandom.errors import ResourceExhaustionError
from crandom.sources.buffered import BufferedSource, SeedLike

logger = logging.getLogger(__name__)


class PCG64Source(BufferedSource):
    """PCG64 stream from ``numpy.random.Generator``.

    Integer and array seeds are both fed through numpy's ``SeedSequence``,
    so neighbouring seeds give well separated streams.
    """

    engine = "pcg64"

    def __init__(
        self,
        seed: SeedLike,
        buffer_size: int = BufferedSource.DEFAULT_BUFFER_SIZE,
    ):
        super().__init__(seed, buffer_size)

        try:
            self._generator: Optional[np.random.Generator] = np.random.Generator(
                np.random.PCG64(self.seed)
            )
        except MemoryError as e:
            raise ResourceExhaustionError("Could not allocate PCG64 state") from e

        logger.debug("Created pcg64 source (seed=%s)", self.seed)

    def _draw_block(self, size: int) -> np.ndarray:
        return self._generator.random(size)

    def _release(self) -> None:
        super()._release()
        self._generator = None
