from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from task_manager.core.config import Settings, get_settings
from task_manager.core.security import JWTService
from task_manager.db import close_document_store, init_document_store
from task_manager.deps import get_task_usecase, get_user_usecase
from task_manager.main import create_app
from task_manager.usecases import TaskUseCase, UserUseCase


@pytest.fixture(autouse=True)
def settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[Settings]:
    monkeypatch.setenv("TASK_MANAGER_ENVIRONMENT", "test")
    monkeypatch.setenv("TASK_MANAGER_JWT_SECRET_KEY", "test-secret")
    monkeypatch.setenv("TASK_MANAGER_MONGO_DATABASE", "task_manager_test")
    get_settings.cache_clear()
    try:
        yield get_settings()
    finally:
        get_settings.cache_clear()


@pytest_asyncio.fixture
async def document_store() -> AsyncIterator[None]:
    await init_document_store(client=AsyncMongoMockClient(), force=True)
    try:
        yield
    finally:
        await close_document_store()


@pytest.fixture
def task_usecase() -> AsyncMock:
    return AsyncMock(spec=TaskUseCase)


@pytest.fixture
def user_usecase() -> AsyncMock:
    return AsyncMock(spec=UserUseCase)


@pytest.fixture
def app(task_usecase: AsyncMock, user_usecase: AsyncMock) -> Iterator[FastAPI]:
    application = create_app(manage_document_store=False)
    application.dependency_overrides[get_task_usecase] = lambda: task_usecase
    application.dependency_overrides[get_user_usecase] = lambda: user_usecase
    try:
        yield application
    finally:
        application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client


@pytest.fixture
def jwt_service(settings: Settings) -> JWTService:
    return JWTService.from_settings(settings)


@pytest.fixture
def user_headers(jwt_service: JWTService) -> dict[str, str]:
    return {"Authorization": f"Bearer {jwt_service.generate_jwt('alice', 'user')}"}


@pytest.fixture
def admin_headers(jwt_service: JWTService) -> dict[str, str]:
    return {"Authorization": f"Bearer {jwt_service.generate_jwt('root', 'admin')}"}
