"""Pytest configuration and fixtures.

Pins verdict's ambient configuration for every test. All fixtures here are
autouse unless noted.
"""

from __future__ import annotations

import pytest

from verdict.config import DEFAULT_CONFIG, config_scope

# =============================================================================
# Configuration Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def default_verdict_config():
    """Run each test under the default config so scopes cannot leak."""
    with config_scope(DEFAULT_CONFIG) as cfg:
        yield cfg


# =============================================================================
# Config Toggles
# =============================================================================


@pytest.fixture
def validating_chain():
    """Enable ``validate_chain`` for the duration of a test."""
    with config_scope(validate_chain=True) as cfg:
        yield cfg
