"""End-to-end tests for /me, /health and /version."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_version(client: AsyncClient) -> None:
    from app import APP_VERSION

    resp = await client.get("/version")

    assert resp.json() == {"version": APP_VERSION}


@pytest.mark.asyncio
async def test_me_without_header_is_default_admin(client: AsyncClient) -> None:
    resp = await client.get("/me")

    assert resp.status_code == 200
    assert resp.json() == {
        "id": "admin",
        "name": "Admin User",
        "email": "admin@example.com",
        "role": "admin",
    }


@pytest.mark.asyncio
async def test_me_resolves_acting_user(client: AsyncClient) -> None:
    created = await client.post(
        "/users",
        json={
            "email": "hanako@example.com",
            "role": "user",
            "firstName": "花子",
            "lastName": "佐藤",
        },
    )
    user_id = created.json()["id"]

    resp = await client.get("/me", headers={"X-User-Id": user_id})

    assert resp.json() == {
        "id": user_id,
        "name": "佐藤 花子",
        "email": "hanako@example.com",
        "role": "user",
    }
