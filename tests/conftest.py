from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from gravatarkit.config import config
from gravatarkit.main import app


@pytest.fixture
async def test_client() -> AsyncGenerator[AsyncClient]:
    original_forwarded = config.TRUST_FORWARDED_PROTO
    config.TRUST_FORWARDED_PROTO = False

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    config.TRUST_FORWARDED_PROTO = original_forwarded


@pytest.fixture
async def secure_client() -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="https://test") as client:
        yield client
