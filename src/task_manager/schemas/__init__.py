"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .auth import LoginRequest, LoginResponse, RegisterRequest, TokenClaims
from .system import ErrorResponse, HealthCheckResponse, MessageResponse, RootResponse
from .task import TaskRead, TaskWrite
from .user import UserPublic

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "RootResponse",
    "TaskRead",
    "TaskWrite",
    "TokenClaims",
    "UserPublic",
]
