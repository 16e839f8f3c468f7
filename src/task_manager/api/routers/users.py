"""Routes handling registration, login and account listing."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import AdminUserDependency, UserUseCaseDependency
from ...errors import AuthenticationError, NotFoundError
from ...models import User, UserRole
from ...schemas import LoginRequest, LoginResponse, RegisterRequest, UserPublic

router = APIRouter(tags=["users"])


def _map_user(user: User) -> UserPublic:
    return UserPublic.model_validate(user)


@router.post(
    "/register",
    response_model=UserPublic,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
)
async def register(payload: RegisterRequest, usecase: UserUseCaseDependency) -> UserPublic:
    user = await usecase.register(
        User(username=payload.username, password=payload.password, role=UserRole.USER)
    )
    return _map_user(user)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Exchange a username and password for an access token",
)
async def login(payload: LoginRequest, usecase: UserUseCaseDependency) -> LoginResponse:
    try:
        token = await usecase.login(payload.username, payload.password)
    except (NotFoundError, AuthenticationError) as exc:
        # Unknown usernames and wrong passwords are indistinguishable to clients.
        raise AuthenticationError("Invalid username or password.") from exc
    return LoginResponse(token=token)


@router.get("/users", response_model=list[UserPublic], summary="List registered users")
async def get_users(usecase: UserUseCaseDependency, _: AdminUserDependency) -> list[UserPublic]:
    users = await usecase.get_users()
    return [_map_user(user) for user in users]
