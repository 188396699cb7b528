"""Pennywise settings.

Values come from, highest priority first:
1. the process environment
2. the file named by ``PENNYWISE_ENV_FILE``
3. ``config/.env.dev`` (local runs)
4. ``config/.env`` (containers)
5. the defaults below

Missing secrets fail at startup with a pydantic ``ValidationError``.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "PENNYWISE_ENV_FILE"
ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    return Path.cwd()


def get_config_dir() -> Path:
    """Directory holding the ``.env`` files."""
    return _project_root() / "config"


def _discover_env_file() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _project_root() / path
        if path.exists():
            return path

    for name in ENV_FILE_CANDIDATES:
        candidate = get_config_dir() / name
        if candidate.exists():
            return candidate
    return None


class Settings(BaseSettings):
    """Runtime configuration for the API, the CLI and the auth services.

    Field names map to upper-case environment variables
    (``jwt_access_secret_key`` reads ``JWT_ACCESS_SECRET_KEY``).
    """

    model_config = SettingsConfigDict(
        env_file=_discover_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required secrets
    jwt_access_secret_key: SecretStr
    jwt_refresh_secret_key: SecretStr
    postgres_password: SecretStr

    app_name: str = "Pennywise"
    debug: bool = False

    # PostgreSQL connection parts
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "pennywise"
    # Full SQLAlchemy URL; wins over the POSTGRES_* parts (e.g. sqlite+aiosqlite:///./dev.db)
    database_dsn: str | None = None

    # HTTP server
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_debug: bool = False
    api_cors_origins: str = ""

    # Token lifetimes
    jwt_access_token_expire_minutes: int = 15
    jwt_refresh_token_expire_days: int = 7

    # argon2id cost parameters
    password_hash_time_cost: int = 3
    password_hash_memory_cost: int = 65536  # KiB
    password_hash_parallelism: int = 4

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value) if value else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL: ``database_dsn`` or an asyncpg URL."""
        if self.database_dsn:
            return self.database_dsn
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.api_cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Load the settings once per process."""
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Forget the loaded settings so the next ``get_settings`` reloads them."""
    get_settings.cache_clear()
