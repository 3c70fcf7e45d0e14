"""Test bearer authentication middleware"""

import pytest
from fastapi import status


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "Basic dXNlcjpwYXNz"},
        {"Authorization": "bearer mysecrettoken"},
        {"Authorization": "Bearer wrongtoken"},
        {"Authorization": "Bearer "},
    ],
)
async def test_rejects_missing_or_invalid_credentials(client, headers):
    """Test every failure mode answers 401 with a plain text body"""
    response = await client.get("/items", headers=headers)

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.text == "Unauthorized"
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_root_requires_auth(client):
    response = await client.get("/")

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
async def test_rejected_request_does_not_touch_store(client, item_store):
    """Test unauthenticated writes never reach the handler"""
    item_store.add("a")

    await client.post("/items", params={"item": "b"})
    await client.put("/items/0", params={"updatedItem": "z"})
    await client.delete("/items/0", headers={"Authorization": "Bearer nope"})

    assert item_store.list_items() == ["a"]


@pytest.mark.asyncio
async def test_token_is_trimmed(client):
    response = await client.get("/items", headers={"Authorization": "Bearer  mysecrettoken  "})

    assert response.status_code == status.HTTP_200_OK


@pytest.mark.asyncio
async def test_custom_token_from_settings():
    """Test the verifier uses the configured secret"""
    from httpx import ASGITransport, AsyncClient

    from core.config import Settings
    from main import create_app

    app = create_app(Settings(_env_file=None, api_token="rotated"))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        old = await ac.get("/items", headers={"Authorization": "Bearer mysecrettoken"})
        new = await ac.get("/items", headers={"Authorization": "Bearer rotated"})

    assert old.status_code == status.HTTP_401_UNAUTHORIZED
    assert new.status_code == status.HTTP_200_OK
