"""Shared test fixtures.

Every test runs against the in-memory backend with fresh repository
singletons. The `client` fixture drives the FastAPI app through httpx.
"""

from __future__ import annotations

from typing import AsyncIterator, Generator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from infrastructure.persistence.factory import reset_repositories


@pytest.fixture(autouse=True)
def _inmemory_backend(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Force the in-memory backend and reset singletons around each test."""
    monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")
    for name in ("DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "SYSTEM_USER_ID"):
        monkeypatch.delenv(name, raising=False)
    reset_repositories()
    yield
    reset_repositories()


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """HTTP client bound to the ASGI app (no network)."""
    from app import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
