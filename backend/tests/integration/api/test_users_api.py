"""End-to-end tests for the /users endpoints (in-memory backend)."""

from typing import Any, Dict, Optional

import pytest
from httpx import AsyncClient


def user_body(
    email: str = "taro@example.com",
    role: str = "user",
    first_name: str = "太郎",
    last_name: str = "山田",
    gender: Optional[str] = "male",
) -> Dict[str, Any]:
    return {
        "email": email,
        "role": role,
        "firstName": first_name,
        "lastName": last_name,
        "gender": gender,
    }


async def create(client: AsyncClient, **kwargs: Any) -> Dict[str, Any]:
    resp = await client.post("/users", json=user_body(**kwargs), headers={"X-User-Id": "admin1"})
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.mark.asyncio
async def test_create_returns_camel_case_user(client: AsyncClient) -> None:
    body = await create(client, email="  Taro@Example.COM ")

    assert body["email"] == "taro@example.com"
    assert body["firstName"] == "太郎"
    assert body["lastName"] == "山田"
    assert body["fullName"] == "山田 太郎"
    assert body["gender"] == "male"
    assert body["createdBy"] == "admin1"
    assert body["updatedBy"] == "admin1"
    assert body["createdAt"] == body["updatedAt"]
    assert body["deletedAt"] is None
    assert body["id"]


@pytest.mark.asyncio
async def test_create_without_actor_header_uses_system_user(client: AsyncClient) -> None:
    resp = await client.post("/users", json=user_body())

    assert resp.status_code == 201
    assert resp.json()["createdBy"] == "system"


@pytest.mark.asyncio
async def test_create_duplicate_email_conflicts(client: AsyncClient) -> None:
    await create(client)

    resp = await client.post("/users", json=user_body(email="TARO@example.com"))

    assert resp.status_code == 409
    assert resp.json() == {
        "error": "conflict",
        "message": "This email address is already registered",
    }


@pytest.mark.asyncio
async def test_create_invalid_email_is_bad_request(client: AsyncClient) -> None:
    resp = await client.post("/users", json=user_body(email="not-an-email"))

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "validation_error"
    assert body["field"] == "email"


@pytest.mark.asyncio
async def test_create_unknown_role_is_unprocessable(client: AsyncClient) -> None:
    resp = await client.post("/users", json=user_body(role="superuser"))

    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_get_unknown_user_is_not_found(client: AsyncClient) -> None:
    resp = await client.get("/users/missing")

    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


@pytest.mark.asyncio
async def test_update_replaces_fields(client: AsyncClient) -> None:
    created = await create(client)

    resp = await client.put(
        f"/users/{created['id']}",
        json=user_body(email="hanako@example.com", role="admin", first_name="花子", gender=None),
        headers={"X-User-Id": "admin2"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["email"] == "hanako@example.com"
    assert body["role"] == "admin"
    assert body["firstName"] == "花子"
    assert body["gender"] is None
    assert body["createdBy"] == "admin1"
    assert body["updatedBy"] == "admin2"


@pytest.mark.asyncio
async def test_update_to_taken_email_conflicts(client: AsyncClient) -> None:
    await create(client, email="a@example.com")
    second = await create(client, email="b@example.com")

    resp = await client.put(f"/users/{second['id']}", json=user_body(email="a@example.com"))

    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_delete_hides_user(client: AsyncClient) -> None:
    created = await create(client)

    resp = await client.delete(f"/users/{created['id']}", headers={"X-User-Id": "admin2"})

    assert resp.status_code == 200
    assert resp.json()["deletedBy"] == "admin2"
    assert resp.json()["deletedAt"] is not None
    assert (await client.get(f"/users/{created['id']}")).status_code == 404
    assert (await client.delete(f"/users/{created['id']}")).status_code == 404
    assert (await client.get("/users")).json()["total"] == 0


@pytest.mark.asyncio
async def test_list_paginates_newest_first(client: AsyncClient) -> None:
    for i in range(5):
        await create(client, email=f"user{i}@example.com")

    resp = await client.get("/users", params={"page": 2, "pageSize": 2})

    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 5
    assert body["page"] == 2
    assert body["pageSize"] == 2
    assert [u["email"] for u in body["users"]] == ["user2@example.com", "user1@example.com"]


@pytest.mark.asyncio
async def test_list_uses_configured_default_page_size(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "3")
    for i in range(4):
        await create(client, email=f"user{i}@example.com")

    body = (await client.get("/users")).json()

    assert body["page"] == 1
    assert body["pageSize"] == 3
    assert len(body["users"]) == 3
    assert body["total"] == 4


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"pageSize": 101}, {"pageSize": 0}, {"page": 0}])
async def test_list_rejects_bad_pagination(client: AsyncClient, params: Dict[str, int]) -> None:
    resp = await client.get("/users", params=params)

    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_search_by_text_role_and_gender(client: AsyncClient) -> None:
    await create(client, email="taro@example.com", role="admin")
    await create(client, email="jiro@example.com", first_name="次郎", gender=None)
    await create(client, email="hanako@example.com", last_name="佐藤", gender="female")

    by_text = await client.get("/users/search/detail", params={"search": "山田"})
    by_role = await client.get("/users/search/detail", params={"role": "admin"})
    genderless = await client.get("/users/search/detail", params={"gender": "null"})

    assert {u["email"] for u in by_text.json()["users"]} == {
        "taro@example.com",
        "jiro@example.com",
    }
    assert [u["email"] for u in by_role.json()["users"]] == ["taro@example.com"]
    assert [u["email"] for u in genderless.json()["users"]] == ["jiro@example.com"]


@pytest.mark.asyncio
async def test_search_by_id_list(client: AsyncClient) -> None:
    first = await create(client, email="a@example.com")
    await create(client, email="b@example.com")
    third = await create(client, email="c@example.com")

    resp = await client.get(
        "/users/search/detail", params={"id": f"{first['id']}, {third['id']}"}
    )

    assert resp.json()["total"] == 2
    assert {u["id"] for u in resp.json()["users"]} == {first["id"], third["id"]}


@pytest.mark.asyncio
async def test_search_rejects_unknown_gender(client: AsyncClient) -> None:
    resp = await client.get("/users/search/detail", params={"gender": "unknown"})

    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_export_returns_every_match_unpaginated(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "2")
    for i in range(5):
        await create(client, email=f"user{i}@example.com", role="admin" if i % 2 else "user")

    everything = await client.get("/users/export")
    admins = await client.get("/users/export", params={"role": "admin"})

    assert everything.status_code == 200
    assert len(everything.json()) == 5
    assert [u["email"] for u in admins.json()] == ["user3@example.com", "user1@example.com"]
