"""Service test fixtures — FastAPI test client over ASGI.

Invariants:
    - Every test talks to the real app object (routes, handlers, error handlers)
    - No network: httpx ASGITransport calls the app in-process

Design Decisions:
    - Lifespan is not run by ASGITransport; lru_cached table/handler make
      startup order irrelevant for request handling
"""

import pytest
from httpx import ASGITransport, AsyncClient

from continent_api.core.continent_table import build_continent_table
from continent_api.main import app
from continent_api.services.lookup_continent import ContinentLookupHandler


@pytest.fixture
async def client():
    """FastAPI test client bound to the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def lookup_handler():
    """Handler over a freshly built table (not the process-wide cached one)."""
    return ContinentLookupHandler(build_continent_table())
