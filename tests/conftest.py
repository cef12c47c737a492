"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

import pytest

# Add project root to path for `src.` imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# Environment Variable Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Clear connection environment variables."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("CONNECTION_REJECT_EMPTY_URL", raising=False)


@pytest.fixture
def reject_empty_url_env(monkeypatch):
    """Enable empty-url rejection."""
    monkeypatch.setenv("CONNECTION_REJECT_EMPTY_URL", "true")


# =============================================================================
# Connection Singleton Reset
# =============================================================================

@pytest.fixture(autouse=True)
def reset_connection_singletons():
    """Reset connection registry and config before and after each test."""
    from src.connection import reset_connection_config, reset_connection_registry

    reset_connection_registry()
    reset_connection_config()

    yield

    reset_connection_registry()
    reset_connection_config()


# =============================================================================
# Payment Fixtures
# =============================================================================

@pytest.fixture
def order_details():
    """Sample order record."""
    return {
        "name": "Earphones ZC01",
        "category": "electronics",
        "subCategory": "Wearable Audio Device",
    }
