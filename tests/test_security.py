from __future__ import annotations

from datetime import timedelta

import pytest
from jose import jwt

from task_manager.core.security import JWTService, PasswordService
from task_manager.errors import AuthenticationError, HashingError, TokenError
from task_manager.interfaces import PasswordHasher, TokenIssuer
from task_manager.models import UserRole


@pytest.fixture(scope="module")
def password_service() -> PasswordService:
    return PasswordService()


def test_services_satisfy_collaborator_protocols(password_service: PasswordService) -> None:
    assert isinstance(password_service, PasswordHasher)
    assert isinstance(JWTService(secret_key="secret"), TokenIssuer)


def test_hash_password_never_returns_plaintext(password_service: PasswordService) -> None:
    hashed = password_service.hash_password("StrongPass123!")

    assert hashed != "StrongPass123!"
    assert hashed.startswith("$2")
    password_service.check_password_hash(hashed, "StrongPass123!")


def test_check_password_hash_rejects_mismatch(password_service: PasswordService) -> None:
    hashed = password_service.hash_password("StrongPass123!")

    with pytest.raises(AuthenticationError):
        password_service.check_password_hash(hashed, "wrong-password")


def test_check_password_hash_rejects_unrecognised_hash(password_service: PasswordService) -> None:
    with pytest.raises(AuthenticationError):
        password_service.check_password_hash("not-a-hash", "StrongPass123!")


def test_hash_password_wraps_backend_failures(password_service: PasswordService) -> None:
    with pytest.raises(HashingError):
        password_service.hash_password(None)  # type: ignore[arg-type]


def test_generate_jwt_round_trips_claims() -> None:
    service = JWTService(secret_key="secret", expires_delta=timedelta(minutes=5))

    token = service.generate_jwt("alice", UserRole.ADMIN)
    claims = service.decode_jwt(token)

    assert claims.sub == "alice"
    assert claims.role == "admin"
    assert claims.exp - claims.iat == timedelta(minutes=5)
    assert claims.jti


def test_tokens_are_unique_per_issue() -> None:
    service = JWTService(secret_key="secret")

    assert service.generate_jwt("alice", "user") != service.generate_jwt("alice", "user")


def test_decode_jwt_rejects_expired_token() -> None:
    service = JWTService(secret_key="secret", expires_delta=timedelta(seconds=-1))
    token = service.generate_jwt("alice", "user")

    with pytest.raises(TokenError) as exc_info:
        service.decode_jwt(token)

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Access token has expired."


def test_decode_jwt_rejects_foreign_signature() -> None:
    token = JWTService(secret_key="other-secret").generate_jwt("alice", "user")

    with pytest.raises(TokenError) as exc_info:
        JWTService(secret_key="secret").decode_jwt(token)

    assert exc_info.value.status_code == 401


def test_decode_jwt_rejects_missing_claims() -> None:
    token = jwt.encode({"sub": "alice"}, "secret", algorithm="HS256")

    with pytest.raises(TokenError):
        JWTService(secret_key="secret").decode_jwt(token)


def test_from_settings_uses_configured_expiry(settings) -> None:
    settings.access_token_expire_minutes = 15
    service = JWTService.from_settings(settings)

    claims = service.decode_jwt(service.generate_jwt("alice", "user"))

    assert claims.exp - claims.iat == timedelta(minutes=15)
