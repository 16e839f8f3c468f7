"""Repository for user documents."""

from __future__ import annotations

from ..db.documents import UserDocument
from ..errors import NotFoundError
from ..models import User
from .base import BaseRepository, translate_driver_errors


class UserRepository(BaseRepository[UserDocument]):
    """MongoDB persistence for ``User`` entities."""

    entity_name = "User"

    def __init__(self) -> None:
        super().__init__(UserDocument)

    async def register(self, user: User) -> User:
        """Insert ``user`` as given; the caller supplies the hashed password."""
        document = UserDocument(username=user.username, password=user.password, role=user.role)
        with translate_driver_errors("register user", duplicate_message="Username is already registered."):
            await document.insert()
        return document.to_domain()

    async def find_by_username(self, username: str) -> User:
        with translate_driver_errors("load user"):
            document = await UserDocument.find_one(UserDocument.username == username)
        if document is None:
            raise NotFoundError("User not found.", details={"username": username})
        return document.to_domain()

    async def get_users(self) -> list[User]:
        with translate_driver_errors("list users"):
            documents = await UserDocument.find_all().to_list()
        return [document.to_domain() for document in documents]


__all__ = ["UserRepository"]
