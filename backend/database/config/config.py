"""
Configuration: Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed configuration for the admin backend using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Missing required fields raise a `ConfigurationError` from `load_settings`.
- `extra="ignore"`: unknown env vars are ignored (not an error).
- `BASE_URL` always ends with `/`; `ADMIN_URL` is derived from it.

Usage
-----
from backend.database.config.config import load_settings

settings = load_settings()
db_host = settings.DB_HOST
admin_url = settings.ADMIN_URL

Security
--------
- Never commit secrets or the `.env` file to source control.
- Prefer runtime environment variables in production.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.database.config.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Instances are passed explicitly to the components
    that need them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DB_HOST: str = Field(..., description="Hostname or IP address of the database server.")
    DB_DATABASE_NAME: str = Field(..., description="Name of the shop database (or file path for sqlite).")
    DB_USERNAME: str = Field(..., description="Database username credential.")
    DB_PASSWORD: str = Field(..., description="Database password credential.")
    DB_DRIVER_NAME: str = Field("mysql+pymysql", description="SQLAlchemy driver name (e.g., `mysql+pymysql`, `sqlite`).")
    DB_PORT: Optional[int] = Field(None, description="Database server port; driver default when unset.")
    DB_CONNECT_TIMEOUT: int = Field(10, description="Seconds to wait for a new connection.")
    DB_POOL_SIZE: int = Field(5, description="Connections kept open in the pool.")
    DB_MAX_OVERFLOW: int = Field(10, description="Connections allowed beyond the pool size.")
    DB_POOL_RECYCLE: int = Field(1800, description="Seconds before a pooled connection is recycled.")
    BASE_URL: str = Field(..., description="Public base URL of the shop, used for link generation.")
    ADMIN_PATH: str = Field("admin", description="Path segment of the admin panel below `BASE_URL`.")
    APP_TIMEZONE: str = Field("Asia/Dubai", description="IANA timezone used for application timestamps.")
    LOG_LEVEL: str = Field("DEBUG", description="Root log level (`DEBUG` reports everything).")

    @field_validator("BASE_URL")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("BASE_URL must not be empty")
        return value if value.endswith("/") else value + "/"

    @field_validator("ADMIN_PATH")
    @classmethod
    def _strip_admin_path(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value:
            raise ValueError("ADMIN_PATH must not be empty")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level {value!r}")
        return value

    @property
    def ADMIN_URL(self) -> str:
        """URL of the admin panel: `BASE_URL` + `ADMIN_PATH` + `/`."""
        return self.BASE_URL + self.ADMIN_PATH + "/"


def load_settings(**overrides) -> Settings:
    """
    Build a `Settings` instance.

    Parameters
    ----------
    **overrides
        Field values that take precedence over the environment and `.env`.
        `_env_file=None` disables `.env` loading.

    Returns
    -------
    Settings
        Validated settings.

    Raises
    ------
    ConfigurationError
        If a required value is missing or a value fails validation.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise ConfigurationError(
            f"Invalid configuration for: {', '.join(fields)}", fields=fields
        ) from e


@lru_cache
def get_settings() -> Settings:
    """Settings for the application entry point, loaded once."""
    return load_settings()
