"""Scripted uniform source for deterministic tests of the algorithms."""

from typing import Iterable

from crandom.sources.base import UniformSource


class ScriptedSource(UniformSource):
    """Replays a fixed list of uniform values.

    Useful to check exactly what a distribution does with given draws.
    Raises IndexError when the script runs out, which also makes it easy to
    assert how many draws an algorithm consumed.
    """

    engine = "scripted"

    def __init__(self, values: Iterable[float]):
        super().__init__()
        self._values = [float(v) for v in values]
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Scripted values must lie in [0, 1), got {v}")
        self._pos = 0

    @property
    def consumed(self) -> int:
        """Number of values handed out so far."""
        return self._pos

    @property
    def remaining(self) -> int:
        """Number of values not yet handed out."""
        return len(self._values) - self._pos

    def _next(self) -> float:
        if self._pos >= len(self._values):
            raise IndexError(f"Scripted source exhausted after {self._pos} draws")
        value = self._values[self._pos]
        self._pos += 1
        return value

    def _release(self) -> None:
        self._values = []
