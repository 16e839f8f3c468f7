"""Beanie documents persisted in MongoDB."""

from __future__ import annotations

from beanie import Document
from pydantic import Field

from ..models import Task, User, UserRole


class TaskDocument(Document):
    """Stored representation of a ``Task``."""

    title: str = Field(max_length=255)
    description: str = ""

    class Settings:
        name = "tasks"

    def to_domain(self) -> Task:
        return Task(id=str(self.id), title=self.title, description=self.description)


class UserDocument(Document):
    """Stored representation of a ``User``; ``password`` holds the hash."""

    username: str
    password: str
    role: UserRole = UserRole.USER

    class Settings:
        name = "users"

    def to_domain(self) -> User:
        return User(id=str(self.id), username=self.username, password=self.password, role=self.role)


DOCUMENT_MODELS: list[type[Document]] = [TaskDocument, UserDocument]

__all__ = ["DOCUMENT_MODELS", "TaskDocument", "UserDocument"]
