"""Password hashing and JWT services used by the user workflows."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Sequence
from uuid import uuid4

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from ..errors import AuthenticationError, HashingError, TokenError
from ..schemas.auth import TokenClaims
from .config import Settings

logger = logging.getLogger(__name__)


class PasswordService:
    """Hash and verify plaintext passwords with ``passlib``."""

    def __init__(self, schemes: Sequence[str] = ("bcrypt",)) -> None:
        self._context = CryptContext(schemes=list(schemes), deprecated="auto")

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordService":
        return cls(schemes=[settings.password_hash_scheme])

    def hash_password(self, password: str) -> str:
        """Return a salted one-way hash of ``password``."""

        try:
            return self._context.hash(password)
        except (TypeError, ValueError) as exc:
            raise HashingError() from exc

    def check_password_hash(self, hashed_password: str, password: str) -> None:
        """Raise ``AuthenticationError`` unless ``password`` matches ``hashed_password``."""

        try:
            matches = self._context.verify(password, hashed_password)
        except (TypeError, ValueError) as exc:
            # Unrecognised or corrupt stored hash.
            logger.warning("Stored password hash could not be verified", extra={"error": str(exc)})
            raise AuthenticationError() from exc
        if not matches:
            raise AuthenticationError()


class JWTService:
    """Issue and decode signed, time-bound identity tokens."""

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(minutes=60),
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_delta = expires_delta

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTService":
        return cls(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
        )

    def generate_jwt(self, username: str, role: str) -> str:
        """Return a signed token asserting ``username`` and ``role``."""

        now = datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "sub": username,
            "role": role.value if isinstance(role, Enum) else role,
            "iat": now,
            "exp": now + self._expires_delta,
            "jti": uuid4().hex,
        }
        try:
            return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        except JWTError as exc:
            raise TokenError("Failed to issue access token.") from exc

    def decode_jwt(self, token: str) -> TokenClaims:
        """Verify ``token`` and return its claims."""

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError as exc:
            raise TokenError("Access token has expired.", status_code=401) from exc
        except JWTError as exc:
            raise TokenError("Invalid access token.", status_code=401) from exc

        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as exc:
            raise TokenError("Invalid access token.", status_code=401) from exc


__all__ = ["JWTService", "PasswordService"]
