"""MongoDB client lifecycle and beanie initialisation."""

from __future__ import annotations

import asyncio
import logging

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from ..core.config import get_settings
from .documents import DOCUMENT_MODELS, UserDocument

logger = logging.getLogger(__name__)

USERNAME_INDEX_NAME = "users_username_unique"

_client: AsyncIOMotorClient | None = None
_database: AsyncIOMotorDatabase | None = None
_initialized = False
_lock = asyncio.Lock()


def set_mongo_client(client: AsyncIOMotorClient | None) -> None:
    """Inject a custom motor client instance (primarily for tests)."""

    global _client, _database, _initialized
    _client = client
    _database = None
    _initialized = False


async def _ensure_indexes() -> None:
    collection = UserDocument.get_motor_collection()
    await collection.create_index(
        [("username", ASCENDING)],
        name=USERNAME_INDEX_NAME,
        unique=True,
    )


async def init_document_store(*, client: AsyncIOMotorClient | None = None, force: bool = False) -> None:
    """Connect to MongoDB and register the task and user documents with beanie."""

    global _client, _database, _initialized

    async with _lock:
        if client is not None:
            set_mongo_client(client)

        if _initialized and not force:
            return

        settings = get_settings()
        if _client is None:
            _client = AsyncIOMotorClient(settings.mongo_url, tz_aware=True, uuidRepresentation="standard")
        _database = _client[settings.mongo_database]

        await init_beanie(database=_database, document_models=DOCUMENT_MODELS)
        await _ensure_indexes()
        _initialized = True
        logger.info("Document store initialised", extra={"database": settings.mongo_database})


async def close_document_store() -> None:
    """Dispose the MongoDB client."""

    global _client, _database, _initialized
    client = _client
    if client is not None:
        client.close()
    _client = None
    _database = None
    _initialized = False


__all__ = [
    "USERNAME_INDEX_NAME",
    "close_document_store",
    "init_document_store",
    "set_mongo_client",
]
