"""User use case: registration, login and account listing."""

from __future__ import annotations

import logging

from ..errors import AuthenticationError, NotFoundError
from ..interfaces import PasswordHasher, TokenIssuer, UserRepositoryProtocol
from ..models import User

logger = logging.getLogger(__name__)


class UserUseCase:
    """Orchestrate the user repository, password hashing and token issuance."""

    def __init__(
        self,
        repository: UserRepositoryProtocol,
        password_service: PasswordHasher,
        jwt_service: TokenIssuer,
    ) -> None:
        self._repository = repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(self, user: User) -> User:
        """Hash the plaintext password of ``user`` and store the account.

        A hashing failure propagates before the repository is touched, so a
        plaintext password can never be persisted.
        """
        hashed_password = self._password_service.hash_password(user.password)
        stored = await self._repository.register(user.model_copy(update={"password": hashed_password}))
        logger.info("User registered", extra={"username": stored.username, "role": stored.role.value})
        return stored

    async def login(self, username: str, password: str) -> str:
        """Return a signed token for ``username`` if ``password`` matches.

        Raises ``NotFoundError`` for an unknown username and
        ``AuthenticationError`` for a wrong password; the token service is only
        reached once both checks have passed.
        """
        try:
            user = await self._repository.find_by_username(username)
            self._password_service.check_password_hash(user.password, password)
        except (NotFoundError, AuthenticationError) as exc:
            logger.warning("Login rejected", extra={"username": username, "reason": exc.code})
            raise

        token = self._jwt_service.generate_jwt(user.username, user.role.value)
        logger.info("User logged in", extra={"username": user.username})
        return token

    async def get_users(self) -> list[User]:
        return await self._repository.get_users()


__all__ = ["UserUseCase"]
