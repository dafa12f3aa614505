"""Uniform sources: the stream of doubles in [0, 1) every distribution draws from."""

from .base import UniformSource, release
from .buffered import BufferedSource
from .factory import (
    SourceFactory,
    create_source,
    new_default,
    new_from_array,
    new_from_seed,
    source_from_config,
)
from .mt19937 import MersenneTwisterSource
from .pcg64 import PCG64Source
from .scripted import ScriptedSource

__all__ = [
    "UniformSource",
    "BufferedSource",
    "MersenneTwisterSource",
    "PCG64Source",
    "ScriptedSource",
    "SourceFactory",
    "create_source",
    "new_default",
    "new_from_array",
    "new_from_seed",
    "source_from_config",
    "release",
]
