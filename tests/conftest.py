"""Shared fixtures for the crandom test suite."""

import sys
from pathlib import Path

import pytest

# Add src to path so the tests run from a plain checkout
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from crandom import new_from_seed, set_contract_checks  # noqa: E402


@pytest.fixture(autouse=True)
def contract_checks_on():
    """Every test starts (and ends) with parameter checks enabled."""
    set_contract_checks(True)
    yield
    set_contract_checks(True)


@pytest.fixture
def source():
    """Seeded Mersenne Twister source, released after the test."""
    with new_from_seed(20090101) as src:
        yield src
