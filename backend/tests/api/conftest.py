"""API test infrastructure: async httpx client against the in-process app."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from solar_app.services.design_service import design_cache


# ---------------------------------------------------------------------------
# FastAPI app with a fresh design cache
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def app():
    from solar_app.main import create_app

    application = create_app()

    design_cache.clear()
    design_cache.hits = 0
    design_cache.misses = 0

    yield application

    design_cache.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
