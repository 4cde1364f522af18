"""API test fixtures — FastAPI app over httpx's ASGI transport.

Design Decisions:
    - ASGITransport skips lifespan: routes are tested without touching root logging
"""

import pytest
from httpx import ASGITransport, AsyncClient

from distress.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
