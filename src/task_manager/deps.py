"""Reusable FastAPI dependencies."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .core.config import Settings, get_settings
from .core.context import bind_subject
from .core.security import JWTService, PasswordService
from .errors import AuthenticationError, AuthorizationError, TokenError
from .interfaces import TaskUseCaseProtocol, TokenIssuer, UserUseCaseProtocol
from .models import UserRole
from .repositories import TaskRepository, UserRepository
from .schemas.auth import TokenClaims
from .usecases import TaskUseCase, UserUseCase

SettingsDependency = Annotated[Settings, Depends(get_settings)]

_bearer_scheme = HTTPBearer(auto_error=False)


def get_password_service(settings: SettingsDependency) -> PasswordService:
    return PasswordService.from_settings(settings)


def get_jwt_service(settings: SettingsDependency) -> JWTService:
    return JWTService.from_settings(settings)


def get_task_usecase() -> TaskUseCaseProtocol:
    """Build the task use case over the MongoDB repository."""

    return TaskUseCase(TaskRepository())


def get_user_usecase(
    password_service: Annotated[PasswordService, Depends(get_password_service)],
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> UserUseCaseProtocol:
    """Build the user use case over the MongoDB repository."""

    return UserUseCase(UserRepository(), password_service, jwt_service)


TaskUseCaseDependency = Annotated[TaskUseCaseProtocol, Depends(get_task_usecase)]
UserUseCaseDependency = Annotated[UserUseCaseProtocol, Depends(get_user_usecase)]


def _role_satisfied(user_role: str, required: UserRole) -> bool:
    if required == UserRole.USER:
        return user_role in {UserRole.USER.value, UserRole.ADMIN.value}
    if required == UserRole.ADMIN:
        return user_role == UserRole.ADMIN.value
    return False


def require_current_user(required_role: UserRole = UserRole.USER) -> Callable[..., Awaitable[TokenClaims]]:
    """Return a dependency enforcing bearer authentication and a minimum role."""

    async def _dependency(
        request: Request,
        credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
        jwt_service: TokenIssuer = Depends(get_jwt_service),
    ) -> TokenClaims:
        if credentials is None or credentials.scheme.lower() != "bearer":
            raise AuthenticationError("Authorization header is required.")
        try:
            claims = jwt_service.decode_jwt(credentials.credentials)
        except TokenError as exc:
            raise AuthenticationError(exc.message) from exc
        request.state.subject = claims.sub
        bind_subject(claims.sub)
        if not _role_satisfied(claims.role, required_role):
            raise AuthorizationError()
        return claims

    return _dependency


CurrentUserDependency = Annotated[TokenClaims, Depends(require_current_user())]
AdminUserDependency = Annotated[TokenClaims, Depends(require_current_user(UserRole.ADMIN))]


__all__ = [
    "AdminUserDependency",
    "CurrentUserDependency",
    "SettingsDependency",
    "TaskUseCaseDependency",
    "UserUseCaseDependency",
    "get_jwt_service",
    "get_password_service",
    "get_task_usecase",
    "get_user_usecase",
    "require_current_user",
]
