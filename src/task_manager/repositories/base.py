"""Shared helpers for beanie-backed repositories."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from beanie import Document, PydanticObjectId
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..errors import DuplicateRecordError, NotFoundError, RepositoryError

logger = logging.getLogger(__name__)

DocumentType = TypeVar("DocumentType", bound=Document)


@contextmanager
def translate_driver_errors(action: str, *, duplicate_message: str | None = None) -> Iterator[None]:
    """Re-raise ``pymongo`` failures as repository errors."""

    try:
        yield
    except DuplicateKeyError as exc:
        raise DuplicateRecordError(duplicate_message) from exc
    except PyMongoError as exc:
        logger.error("Document store failure while trying to %s", action, exc_info=exc)
        raise RepositoryError(f"Failed to {action}.") from exc


class BaseRepository(Generic[DocumentType]):
    """Provide identifier parsing and lookups for a document type."""

    entity_name = "Record"

    def __init__(self, document_type: type[DocumentType]) -> None:
        self._document_type = document_type

    def _not_found(self, entity_id: str) -> NotFoundError:
        return NotFoundError(
            f"{self.entity_name} not found.",
            details={"id": entity_id},
        )

    async def _get_document(self, entity_id: str) -> DocumentType:
        """Return the document stored under ``entity_id`` or raise ``NotFoundError``."""

        if not isinstance(entity_id, str) or not ObjectId.is_valid(entity_id):
            raise self._not_found(str(entity_id))
        with translate_driver_errors(f"load {self.entity_name.lower()}"):
            document = await self._document_type.get(PydanticObjectId(entity_id))
        if document is None:
            raise self._not_found(entity_id)
        return document


__all__ = ["BaseRepository", "translate_driver_errors"]
