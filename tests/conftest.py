"""
Shared test fixtures.

Every API test gets a freshly built app (and so a fresh ride session store)
with the booking delay switched off and a seeded random source.
"""

import random
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ridemock.api.app import create_app
from ridemock.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(booking_delay_seconds=0, status_policy="call_count")


@pytest.fixture
def app(settings: Settings):
    return create_app(settings, rng=random.Random(42))


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
