"""Block-buffered sources backed by numpy bit generators."""

from abc import abstractmethod
from typing import Any, Iterable, Union

import numpy as np

from crandom.errors import ResourceExhaustionError, SeedError, SourceReleasedError
from crandom.sources.base import UniformSource

SeedLike = Union[int, Iterable[int]]

UINT32_MASK = 0xFFFFFFFF


def is_integer(value: Any) -> bool:
    """True for Python and numpy integers (bools excluded)."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def to_uint32(seed: int) -> int:
    """Reduce an integer seed modulo 2**32, as a C int to uint32 cast does."""
    return int(seed) & UINT32_MASK


def to_uint32_keys(keys: Iterable[int]) -> list[int]:
    """Reduce every key of a seed array modulo 2**32.

    Raises:
        SeedError: If the array is empty or holds a non-integer key
    """
    reduced = []
    for key in keys:
        if not is_integer(key):
            raise SeedError(f"Seed array keys must be integers, got {key!r}")
        reduced.append(to_uint32(key))
    if not reduced:
        raise SeedError("Seed array must contain at least one key")
    return reduced


class BufferedSource(UniformSource):
    """Uniform source that pulls doubles from its engine a block at a time.

    Draws are handed out in stream order, so the values seen through
    ``next()`` are the same as drawing one double per call from the engine.
    """

    DEFAULT_BUFFER_SIZE = 1024

    def __init__(self, seed: SeedLike, buffer_size: int = DEFAULT_BUFFER_SIZE):
        """Initialize the buffer and normalise the seed.

        Args:
            seed: Integer seed or a sequence of integer keys
            buffer_size: Number of doubles drawn from the engine per refill

        Raises:
            SeedError: If the seed is neither an integer nor a non-empty
                sequence of integers
            ValueError: If buffer_size is not positive
        """
        super().__init__()
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.seed = self.normalize_seed(seed)
        self.buffer_size = int(buffer_size)
        self._buffer: list[float] = []
        self._pos = 0

    @staticmethod
    def normalize_seed(seed: SeedLike) -> Union[int, list[int]]:
        """Reduce an integer seed, or each key of a seed array, to 32 bits.

        Raises:
            SeedError: For strings, bytes, non-integer scalars, empty arrays
                or arrays with non-integer keys
        """
        if is_integer(seed):
            return to_uint32(seed)
        if isinstance(seed, (str, bytes, bytearray)):
            raise SeedError(f"Seed must be an integer or a sequence of integers, got {seed!r}")
        try:
            keys = list(seed)
        except TypeError as e:
            raise SeedError(
                f"Seed must be an integer or a sequence of integers, got {type(seed).__name__}"
            ) from e
        return to_uint32_keys(keys)

    @abstractmethod
    def _draw_block(self, size: int) -> np.ndarray:
        """Draw ``size`` doubles in [0, 1) from the engine."""

    def _refill(self) -> None:
        try:
            self._buffer = self._draw_block(self.buffer_size).tolist()
        except MemoryError as e:
            raise ResourceExhaustionError(
                f"Could not allocate a block of {self.buffer_size} draws"
            ) from e
        self._pos = 0

    def _next(self) -> float:
        if self._pos >= len(self._buffer):
            self._refill()
        value = self._buffer[self._pos]
        self._pos += 1
        return value

    def fill(self, count: int) -> list[float]:
        if self._released:
            raise SourceReleasedError(f"{self.engine} source used after release")

        values: list[float] = []
        while len(values) < count:
            if self._pos >= len(self._buffer):
                self._refill()
            take = min(count - len(values), len(self._buffer) - self._pos)
            values.extend(self._buffer[self._pos:self._pos + take])
            self._pos += take
        return values

    def _release(self) -> None:
        self._buffer = []
        self._pos = 0
