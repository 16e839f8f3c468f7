from __future__ import annotations

from task_manager.core.config import Settings


def test_environment_profiles_apply_defaults() -> None:
    dev = Settings(environment="development")
    assert dev.environment == "development"
    assert dev.log_level == "DEBUG"
    assert dev.reload is True

    test_profile = Settings(environment="test")
    assert test_profile.environment == "test"
    assert test_profile.log_level == "WARNING"
    assert test_profile.reload is False

    ci_profile = Settings(environment="ci")
    assert ci_profile.environment == "ci"
    assert ci_profile.log_level == "INFO"
    assert ci_profile.reload is False


def test_environment_aliases_are_normalised() -> None:
    alias = Settings(environment="DEV")
    assert alias.environment == "development"


def test_environment_profile_respects_explicit_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TASK_MANAGER_LOG_LEVEL", "error")
    overridden = Settings(environment="test")
    assert overridden.log_level == "ERROR"

    monkeypatch.delenv("TASK_MANAGER_LOG_LEVEL", raising=False)
    monkeypatch.setenv("TASK_MANAGER_RELOAD", "true")
    reloading = Settings(environment="test")
    assert reloading.reload is True


def test_cors_origins_accept_comma_separated_values(monkeypatch) -> None:
    monkeypatch.setenv("TASK_MANAGER_CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")
    settings = Settings()
    assert settings.cors_allow_origins == ["https://a.example", "https://b.example"]


def test_token_expiry_is_clamped_to_one_minute() -> None:
    assert Settings(access_token_expire_minutes=0).access_token_expire_minutes == 1
    assert Settings(access_token_expire_minutes="15").access_token_expire_minutes == 15


def test_router_prefix_is_normalised() -> None:
    assert Settings(api_prefix="api/").router_prefix == "/api"
    assert Settings(api_prefix="/").router_prefix == ""
