"""
Pytest configuration and shared fixtures for instruction forge tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_address = _common.make_address
make_address_text = _common.make_address_text
make_keypair = _common.make_keypair


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def keypair():
    """Provide the RFC 8032 test-vector keypair."""
    return make_keypair()


@pytest.fixture
def alice():
    """Provide a non-default address."""
    return make_address(1)


@pytest.fixture
def bob():
    """Provide a second non-default address."""
    return make_address(2)


@pytest.fixture
def carol():
    """Provide a third non-default address."""
    return make_address(3)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Run each test with no FORGE_* env vars and no config file in cwd."""
    from core.config import runtime

    for name in ("FORGE_HOST", "FORGE_PORT", "FORGE_RELOAD", "FORGE_LOG_LEVEL",
                 "FORGE_CORS_ORIGINS", "FORGE_SECRET", "FORGE_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    runtime.set_default_config(None)
    yield
    runtime.set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
