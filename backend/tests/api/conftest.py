"""API test fixtures — per-test apps with a chosen fault configuration.

Invariants:
    - Every test gets a fresh app, so stores and id counters start empty
    - raise_app_exceptions=False: unhandled errors are asserted as 500 responses

Design Decisions:
    - make_client factory fixture instead of one client: fault sets vary per test
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from faultapi.config import Settings
from faultapi.main import create_app


@pytest.fixture
def make_client():
    """Return an async context manager factory: make_client(*issues, catalog=None)."""

    @asynccontextmanager
    async def _make(*issues: str, catalog=None):
        settings = Settings(_env_file=None, enabled_issues=list(issues))
        app = create_app(settings, catalog)
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as c:
            yield c

    return _make


@pytest.fixture
async def client(make_client):
    """Client with the default fault set (invalid_payload only)."""
    async with make_client("invalid_payload") as c:
        yield c
