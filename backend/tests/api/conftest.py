"""API test fixtures — FastAPI test client wired to the in-memory fake store.

Invariants:
    - Route tests override get_store/get_invalidator; the lifespan never runs
    - Overrides are cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_invalidator, get_store
from app.main import app


@pytest.fixture
async def client(fake_store, invalidator):
    """FastAPI test client wired to the fake store."""
    app.dependency_overrides[get_store] = lambda: fake_store
    app.dependency_overrides[get_invalidator] = lambda: invalidator

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
