"""Domain models shared by the use cases, repositories and routers."""

from __future__ import annotations

from .task import Task
from .user import User, UserRole

__all__ = ["Task", "User", "UserRole"]
