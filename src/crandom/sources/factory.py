"""Factory for creating uniform sources."""

import logging
import time
from typing import TYPE_CHECKING, Iterable, Optional

from crandom.errors import SeedError
from crandom.sources.base import UniformSource
from crandom.sources.buffered import BufferedSource, is_integer, to_uint32
from crandom.sources.mt19937 import MersenneTwisterSource
from crandom.sources.pcg64 import PCG64Source

if TYPE_CHECKING:
    from crandom.config import ConfigManager

logger = logging.getLogger(__name__)


class SourceFactory:
    """Factory for uniform sources.

    Supports multiple engine backends:
    - mt19937: Mersenne Twister with classic integer/array seeding (default)
    - pcg64: PCG64 seeded through numpy's SeedSequence

    Every call returns a new, independently owned source. There is no
    shared default generator.
    """

    ENGINES = {
        "mt19937": MersenneTwisterSource,
        "pcg64": PCG64Source,
    }

    SUPPORTED_ENGINES = list(ENGINES)

    DEFAULT_ENGINE = "mt19937"

    @classmethod
    def create(
        cls,
        engine: str = DEFAULT_ENGINE,
        seed: Optional[int] = None,
        seed_array: Optional[Iterable[int]] = None,
        buffer_size: int = BufferedSource.DEFAULT_BUFFER_SIZE,
    ) -> UniformSource:
        """Create a uniform source.

        Args:
            engine: Engine name ("mt19937" or "pcg64")
            seed: 32-bit integer seed
            seed_array: Sequence of integer keys; takes precedence over seed
            buffer_size: Engine draws per refill

        If neither seed nor seed_array is given, a time-derived seed is
        used and the run is not reproducible unless ``source.seed`` is kept.

        Returns:
            New uniform source

        Raises:
            ValueError: If the engine is not supported
            SeedError: If the seed is not an integer or seed_array is not
                a non-empty sequence of integers
            ResourceExhaustionError: If engine state cannot be allocated
        """
        source_cls = cls.ENGINES.get(engine)
        if source_cls is None:
            raise ValueError(
                f"Unknown engine: {engine}. "
                f"Supported: {cls.SUPPORTED_ENGINES}"
            )

        if seed_array is not None:
            if is_integer(seed_array):
                raise SeedError(f"seed_array must be a sequence of integers, got {seed_array!r}")
            seed_value = seed_array
        elif seed is not None:
            seed_value = seed
        else:
            seed_value = default_seed()
            logger.debug("No seed given, using time-derived seed %d", seed_value)

        logger.debug("Creating %s source", engine)
        return source_cls(seed_value, buffer_size=buffer_size)


def default_seed() -> int:
    """Derive a 32-bit seed from the wall clock."""
    return to_uint32(time.time_ns())


def new_default(engine: str = SourceFactory.DEFAULT_ENGINE) -> UniformSource:
    """Create a source seeded from the wall clock (not reproducible)."""
    return SourceFactory.create(engine)


def new_from_seed(seed: int, engine: str = SourceFactory.DEFAULT_ENGINE) -> UniformSource:
    """Create a source from a 32-bit integer seed."""
    return SourceFactory.create(engine, seed=seed)


def new_from_array(keys: Iterable[int], engine: str = SourceFactory.DEFAULT_ENGINE) -> UniformSource:
    """Create a source from an array of integer keys.

    Prefer this when seeding many sources: give each one a distinct slice
    of a master key array to keep their streams uncorrelated.
    """
    return SourceFactory.create(engine, seed_array=keys)


def create_source(
    engine: str = SourceFactory.DEFAULT_ENGINE,
    seed: Optional[int] = None,
    seed_array: Optional[Iterable[int]] = None,
    buffer_size: int = BufferedSource.DEFAULT_BUFFER_SIZE,
) -> UniformSource:
    """Create a source (convenience function)."""
    return SourceFactory.create(engine, seed=seed, seed_array=seed_array, buffer_size=buffer_size)


def source_from_config(config: "ConfigManager") -> UniformSource:
    """Create a source from the ``source`` section of a configuration.

    Args:
        config: Loaded configuration

    Returns:
        New uniform source
    """
    section = config.source
    return SourceFactory.create(
        section.get("engine", SourceFactory.DEFAULT_ENGINE),
        seed=section.get("seed"),
        seed_array=section.get("seed_array"),
        buffer_size=section.get("buffer_size", BufferedSource.DEFAULT_BUFFER_SIZE),
    )
