"""Use cases orchestrating repositories and security services."""

from __future__ import annotations

from .tasks import TaskUseCase
from .users import UserUseCase

__all__ = ["TaskUseCase", "UserUseCase"]
