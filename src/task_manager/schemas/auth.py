"""Schemas describing authentication payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Credentials(BaseModel):
    """Username and password pair.

    Usernames are trimmed so ``" alice"`` and ``"alice"`` name the same
    account. Passwords are hashed and verified byte for byte and never trimmed.
    """

    username: str
    password: str

    @field_validator("username", mode="before")
    @classmethod
    def _strip_username(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


class RegisterRequest(_Credentials):
    """Incoming payload for registering a new user."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "alice", "password": "s3cret-pass"}},
    )

    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=8, max_length=72)


class LoginRequest(_Credentials):
    """Credentials submitted to obtain an access token."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    """Access token returned after a successful login."""

    token: str


class TokenClaims(BaseModel):
    """Validated JWT payload."""

    model_config = ConfigDict(extra="ignore")

    sub: str
    role: str
    exp: datetime
    iat: datetime
    jti: str


__all__ = ["LoginRequest", "LoginResponse", "RegisterRequest", "TokenClaims"]
