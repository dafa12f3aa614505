"""Abstract uniform source of pseudorandom doubles in [0, 1)."""

import logging
from abc import ABC, abstractmethod

from crandom.errors import SourceReleasedError

logger = logging.getLogger(__name__)


class UniformSource(ABC):
    """Stream of uniformly distributed doubles in the half-open range [0, 1).

    A source is a single mutable stream cursor: each call to ``next()``
    advances it. Sources are owned by whoever created them and must not be
    shared between threads without external serialisation.

    Subclasses implement ``_next()`` and ``_release()``. The public methods
    take care of use-after-release detection.

    Sources are context managers; leaving the ``with`` block releases them::

        with new_from_seed(42) as source:
            x = normal(source, 0.0, 1.0)
    """

    #: Engine name used by the factory and in log messages
    engine = "abstract"

    def __init__(self):
        self._released = False

    @property
    def released(self) -> bool:
        """True once ``release()`` has been called."""
        return self._released

    def next(self) -> float:
        """Return the next uniform double, 0 <= x < 1.

        Raises:
            SourceReleasedError: If the source was released
        """
        if self._released:
            raise SourceReleasedError(f"{self.engine} source used after release")
        return self._next()

    def fill(self, count: int) -> list[float]:
        """Return the next ``count`` doubles of the stream.

        Equivalent to calling ``next()`` ``count`` times.
        """
        return [self.next() for _ in range(count)]

    def release(self) -> None:
        """Free the engine state. Further draws raise SourceReleasedError.

        Releasing an already released source does nothing.
        """
        if self._released:
            return
        self._release()
        self._released = True
        logger.debug("Released %s source", self.engine)

    @abstractmethod
    def _next(self) -> float:
        """Draw the next double from the engine."""

    @abstractmethod
    def _release(self) -> None:
        """Drop engine state."""

    def __enter__(self) -> "UniformSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else "active"
        return f"<{type(self).__name__} engine={self.engine} {state}>"


def release(source: UniformSource) -> None:
    """Release a source. Same as ``source.release()``."""
    source.release()
