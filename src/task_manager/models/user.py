"""User domain model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class UserRole(str, Enum):
    """Roles supported by the authentication system."""

    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    """A registered account.

    ``password`` carries the plaintext only on its way into registration.
    Every ``User`` returned by a repository holds the password hash.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str | None = None
    username: str
    password: str = ""
    role: UserRole = UserRole.USER


__all__ = ["User", "UserRole"]
