"""Parameter preconditions for the distribution functions.

Checks are on by default and raise ContractViolationError. They can be
switched off for tight sampling loops, in which case out-of-domain
parameters produce unspecified results (NaN, inf, math domain errors).
"""

import os

from crandom.errors import ContractViolationError

_ENV_VAR = "CRANDOM_CONTRACTS"

_checks_enabled = os.environ.get(_ENV_VAR, "1").strip().lower() not in ("0", "false", "no", "off")


def set_contract_checks(enabled: bool) -> None:
    """Enable or disable parameter checks for all distribution functions."""
    global _checks_enabled
    _checks_enabled = bool(enabled)


def contract_checks_enabled() -> bool:
    """Return True if parameter checks are active."""
    return _checks_enabled


def require_probability(p: float) -> None:
    if _checks_enabled and not (0.0 < p < 1.0):
        raise ContractViolationError(f"p must satisfy 0 < p < 1, got {p!r}")


def require_positive(name: str, value: float) -> None:
    if _checks_enabled and not (0 < value):
        raise ContractViolationError(f"{name} must be > 0, got {value!r}")


def require_ordered(a: float, b: float) -> None:
    if _checks_enabled and not (a < b):
        raise ContractViolationError(f"a must be less than b, got a={a!r}, b={b!r}")
