"""Shared utility functions.

No dependencies on the sources or distributions, so any module can use
them without circular imports.
"""

from .math_utils import clamp
from .stats_utils import SampleMoments, relative_error, sample_moments

__all__ = [
    "clamp",
    "SampleMoments",
    "relative_error",
    "sample_moments",
]
