"""Document store helpers."""

from __future__ import annotations

from .documents import TaskDocument, UserDocument
from .mongo import close_document_store, init_document_store, set_mongo_client

__all__ = [
    "TaskDocument",
    "UserDocument",
    "close_document_store",
    "init_document_store",
    "set_mongo_client",
]
