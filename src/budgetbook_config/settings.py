"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. BUDGETBOOK_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path.cwd()


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. BUDGETBOOK_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("BUDGETBOOK_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Security (MUST be set - app fails without it)
    jwt_secret_key: SecretStr  # Secret for signing JWT tokens

    # Application
    app_name: str = "budgetbook"
    debug: bool = False
    currency: str = "Rs."  # Display only, one currency per ledger

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/budgetbook.db"
    database_echo: bool = False

    # API (API_ prefix)
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # Empty = no CORS allowed

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Ensure cors_origins is stored as comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    # JWT
    jwt_access_token_expire_hours: int = 1
    jwt_refresh_token_expire_days: int = 7

    # Password hashing
    bcrypt_rounds: int = Field(default=12, ge=4, le=16)

    # Ledger posting (LEDGER_ prefix)
    ledger_max_attempts: int = Field(default=3, ge=1, le=10)
    ledger_retry_wait_seconds: float = Field(default=0.05, ge=0.0)
    ledger_post_timeout_seconds: float = Field(default=10.0, gt=0.0)
    ledger_max_amount: Decimal = Decimal("1000000000")

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @property
    def database_type(self) -> str:
        """Database backend name derived from the URL (sqlite, postgresql)."""
        return self.database_url.split(":", 1)[0].split("+", 1)[0]


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    The required jwt_secret_key must be provided via environment
    variables or .env file.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
