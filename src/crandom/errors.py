"""Exception types raised by crandom."""


class CRandomError(Exception):
    """Base class for all crandom errors."""
    pass


class ResourceExhaustionError(CRandomError, MemoryError):
    """Raised when a uniform source cannot allocate its engine state."""
    pass


class SeedError(CRandomError, ValueError):
    """Raised when a seed cannot initialise an engine (e.g. empty key array)."""
    pass


class ContractViolationError(CRandomError, ValueError):
    """Raised when a distribution parameter is outside its domain."""
    pass


class SourceReleasedError(CRandomError, RuntimeError):
    """Raised when a released uniform source is used again."""
    pass


class UnknownDistributionError(CRandomError, KeyError):
    """Raised when a distribution name is not in the registry."""
    pass
