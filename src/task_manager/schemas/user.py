"""User-facing Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ..models import UserRole


class UserPublic(BaseModel):
    """Public representation of a user, without the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    role: UserRole


__all__ = ["UserPublic"]
