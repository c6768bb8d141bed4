"""
Pytest configuration for nat_numeral tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE)
- Fresh symbol / notation tables per test, with nat declared
"""

import os

import pytest

from nat_numeral import bootstrap
from nat_numeral.config import DATATYPES_PATH, ENV_DEV, ENV_PATH

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# NOTE: Do NOT set database=None - that DISABLES the database. Omit to use default.

try:
    from hypothesis import settings

    settings.register_profile(
        "default",
        print_blob=True,
        derandomize=False,
    )

    settings.register_profile(
        "ci",
        print_blob=True,
        derandomize=True,
    )

    settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))

except ImportError:
    pass  # hypothesis not installed, skip configuration


# =============================================================================
# Shared fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def _clean_resolution_env(monkeypatch):
    """Tests must not inherit a path override from the outer shell."""
    monkeypatch.delenv(ENV_PATH, raising=False)
    monkeypatch.delenv(ENV_DEV, raising=False)


@pytest.fixture
def env():
    """nat declared under the permanent path, numerals installed."""
    return bootstrap(DATATYPES_PATH)


@pytest.fixture
def codec(env):
    return env.codec
