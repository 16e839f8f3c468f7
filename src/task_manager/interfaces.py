"""Structural contracts between the use cases and their collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .models import Task, User

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from .schemas.auth import TokenClaims

__all__ = [
    "PasswordHasher",
    "TaskRepositoryProtocol",
    "TaskUseCaseProtocol",
    "TokenIssuer",
    "UserRepositoryProtocol",
    "UserUseCaseProtocol",
]


@runtime_checkable
class TaskRepositoryProtocol(Protocol):
    """Persistence operations for ``Task`` entities."""

    async def get_tasks(self) -> list[Task]:  # pragma: no cover - interface definition
        """Return every stored task."""

    async def get_task_by_id(self, task_id: str) -> Task:  # pragma: no cover - interface definition
        """Return the task with ``task_id`` or raise ``NotFoundError``."""

    async def create_task(self, task: Task) -> Task:  # pragma: no cover - interface definition
        """Store ``task`` and return the stored record."""

    async def update_task(self, task_id: str, task: Task) -> Task:  # pragma: no cover - interface definition
        """Replace the fields of task ``task_id`` or raise ``NotFoundError``."""

    async def delete_task(self, task_id: str) -> None:  # pragma: no cover - interface definition
        """Remove task ``task_id`` or raise ``NotFoundError``."""


@runtime_checkable
class UserRepositoryProtocol(Protocol):
    """Persistence operations for ``User`` entities."""

    async def register(self, user: User) -> User:  # pragma: no cover - interface definition
        """Store ``user`` and return the stored record."""

    async def find_by_username(self, username: str) -> User:  # pragma: no cover - interface definition
        """Return the user named ``username`` or raise ``NotFoundError``."""

    async def get_users(self) -> list[User]:  # pragma: no cover - interface definition
        """Return every registered user."""


@runtime_checkable
class PasswordHasher(Protocol):
    """One-way hashing of plaintext credentials."""

    def hash_password(self, password: str) -> str:  # pragma: no cover - interface definition
        """Return the hash of ``password`` or raise ``HashingError``."""

    def check_password_hash(self, hashed_password: str, password: str) -> None:  # pragma: no cover
        """Return if ``password`` matches ``hashed_password``, else raise ``AuthenticationError``."""


@runtime_checkable
class TokenIssuer(Protocol):
    """Issues and reads signed identity tokens."""

    def generate_jwt(self, username: str, role: str) -> str:  # pragma: no cover - interface definition
        """Return a signed token for ``(username, role)`` or raise ``TokenError``."""

    def decode_jwt(self, token: str) -> "TokenClaims":  # pragma: no cover - interface definition
        """Return the verified claims of ``token`` or raise ``TokenError``."""


@runtime_checkable
class TaskUseCaseProtocol(Protocol):
    """Task operations exposed to the HTTP layer."""

    async def get_tasks(self) -> list[Task]:  # pragma: no cover - interface definition
        ...

    async def get_task_by_id(self, task_id: str) -> Task:  # pragma: no cover - interface definition
        ...

    async def create_task(self, task: Task) -> Task:  # pragma: no cover - interface definition
        ...

    async def update_task(self, task_id: str, task: Task) -> Task:  # pragma: no cover - interface definition
        ...

    async def delete_task(self, task_id: str) -> None:  # pragma: no cover - interface definition
        ...


@runtime_checkable
class UserUseCaseProtocol(Protocol):
    """User account operations exposed to the HTTP layer."""

    async def register(self, user: User) -> User:  # pragma: no cover - interface definition
        ...

    async def login(self, username: str, password: str) -> str:  # pragma: no cover - interface definition
        ...

    async def get_users(self) -> list[User]:  # pragma: no cover - interface definition
        ...
