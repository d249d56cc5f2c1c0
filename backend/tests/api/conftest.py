"""API test fixtures - FastAPI test client with a pinned clock.

Invariants:
    - get_today overridden so date rules see the root `today` fixture
    - dependency_overrides cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.clock import get_today
from app.main import app


@pytest.fixture
async def client(today):
    """FastAPI test client with the clock dependency overridden."""
    app.dependency_overrides[get_today] = lambda: today

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
