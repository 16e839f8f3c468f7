"""Application settings powered by ``pydantic-settings``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Literal, Sequence

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .. import __version__ as package_version

PROJECT_ROOT = Path(__file__).resolve().parents[3]

EnvironmentName = Literal["development", "test", "ci"]

_ENVIRONMENT_ALIASES: dict[str, EnvironmentName] = {
    "development": "development",
    "dev": "development",
    "test": "test",
    "testing": "test",
    "ci": "ci",
}

_ENVIRONMENT_PROFILES: dict[EnvironmentName, dict[str, Any]] = {
    "development": {
        "log_level": "DEBUG",
        "reload": True,
    },
    "test": {
        "log_level": "WARNING",
        "reload": False,
    },
    "ci": {
        "log_level": "INFO",
        "reload": False,
    },
}


class Settings(BaseSettings):
    """Runtime configuration for the task manager service."""

    model_config = SettingsConfigDict(
        env_prefix="TASK_MANAGER_",
        env_file=(PROJECT_ROOT / ".env",),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Task Manager API"
    environment: EnvironmentName = "development"
    api_prefix: str = "/api"
    version: str = package_version
    mongo_url: str = "mongodb://localhost:27017"
    mongo_database: str = "task_manager"
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
    )
    cors_allow_credentials: bool = True
    cors_allow_methods: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])
    cors_allow_headers: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])
    app_host: str = "0.0.0.0"
    app_port: int = 8080
    log_level: str = "INFO"
    reload: bool = False

    jwt_secret_key: str = "change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    password_hash_scheme: str = "bcrypt"

    admin_username: str = "admin"
    admin_password: str = "change-me-admin"

    @field_validator("environment", mode="before")
    @classmethod
    def _normalise_environment(cls, value: object) -> EnvironmentName:
        normalized = value.strip().lower() if isinstance(value, str) else ""
        return _ENVIRONMENT_ALIASES.get(normalized, "development")

    @field_validator(
        "cors_allow_origins",
        "cors_allow_methods",
        "cors_allow_headers",
        mode="before",
    )
    @classmethod
    def _coerce_comma_separated(cls, value: object) -> list[str]:
        """Allow comma separated strings for CORS configuration."""

        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, Sequence):
            return [str(item) for item in value if str(item).strip()]
        return []

    @field_validator("access_token_expire_minutes", mode="before")
    @classmethod
    def _ensure_positive_expiry(cls, value: object) -> int:
        try:
            minutes = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 60
        return max(minutes, 1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        if not isinstance(value, str):
            return "INFO"
        return value.upper()

    @model_validator(mode="after")
    def _apply_environment_profile(self) -> "Settings":
        profile = _ENVIRONMENT_PROFILES[self.environment]
        fields_set = set(self.model_fields_set)
        for field_name, value in profile.items():
            if field_name not in fields_set:
                setattr(self, field_name, value)
        return self

    @property
    def router_prefix(self) -> str:
        """Return ``api_prefix`` normalised to ``/segment`` form, or ``""``."""

        prefix = self.api_prefix.strip()
        if prefix and not prefix.startswith("/"):
            prefix = f"/{prefix}"
        prefix = prefix.rstrip("/")
        return prefix


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings()


__all__ = ["EnvironmentName", "PROJECT_ROOT", "Settings", "get_settings"]
