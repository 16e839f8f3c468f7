from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import status
from httpx import ASGITransport, AsyncClient

from task_manager.core.security import JWTService
from task_manager.main import create_app

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def live_client(document_store: None) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=create_app(manage_document_store=False), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client


async def _register(client: AsyncClient, username: str, password: str) -> None:
    response = await client.post("/api/register", json={"username": username, "password": password})
    assert response.status_code == status.HTTP_201_CREATED, response.text


async def test_password_with_surrounding_spaces_logs_in_verbatim(live_client: AsyncClient, settings) -> None:
    await _register(live_client, "spacey", "  correct horse  ")

    response = await live_client.post("/api/login", json={"username": "spacey", "password": "  correct horse  "})

    assert response.status_code == status.HTTP_200_OK
    claims = JWTService.from_settings(settings).decode_jwt(response.json()["token"])
    assert claims.sub == "spacey"


async def test_trimmed_password_is_a_different_password(live_client: AsyncClient) -> None:
    await _register(live_client, "spacey", "  correct horse  ")

    response = await live_client.post("/api/login", json={"username": "spacey", "password": "correct horse"})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["message"] == "Invalid username or password."


async def test_username_is_trimmed_on_register_and_login(live_client: AsyncClient) -> None:
    response = await live_client.post("/api/register", json={"username": " alice ", "password": "password123"})
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["username"] == "alice"

    response = await live_client.post("/api/login", json={"username": " alice", "password": "password123"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["token"]


async def test_registered_user_reads_tasks_but_cannot_create_them(live_client: AsyncClient) -> None:
    await _register(live_client, "reader", "password123")
    login = await live_client.post("/api/login", json={"username": "reader", "password": "password123"})
    headers = {"Authorization": f"Bearer {login.json()['token']}"}

    listing = await live_client.get("/api/tasks", headers=headers)
    creation = await live_client.post("/api/tasks", json={"title": "Nope"}, headers=headers)

    assert listing.status_code == status.HTTP_200_OK
    assert listing.json() == []
    assert creation.status_code == status.HTTP_403_FORBIDDEN


async def test_duplicate_registration_conflicts(live_client: AsyncClient) -> None:
    await _register(live_client, "alice", "password123")

    response = await live_client.post("/api/register", json={"username": "alice", "password": "password456"})

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["code"] == "duplicate_record"
