"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and beacon/),
making its fixtures available to centralized tests AND colocated tests.
"""

import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables must be set before any beacon module import
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("ANALYTICS_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_sink():
    """Fake AnalyticsSink that records identify/group calls."""
    from beacon.adapters.analytics.fake import FakeAnalyticsSink

    return FakeAnalyticsSink()


@pytest.fixture
def ctx():
    """Request context for the default tenant, no identity."""
    from beacon.core.context import DEFAULT_TENANT_ID, RequestContext

    return RequestContext(DEFAULT_TENANT_ID)
