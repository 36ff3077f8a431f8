"""
Configuration — Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed configuration for the data layer using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Missing required fields raise a validation error at import time.
- `extra="ignore"`: unknown env vars are ignored (not an error).

Usage
-----
from webstudio.database.config.config import settings

db_host = settings.DB_HOST
level = settings.LOG_LEVEL

Security
--------
- Never commit the `.env` file to source control.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Data layer settings loaded from environment variables or a `.env` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DB_DRIVER_NAME: str = Field(..., description="SQLAlchemy driver name (e.g., `postgresql+psycopg2`, `sqlite`).")
    DB_DATABASE_NAME: str = Field(..., description="Name of the database (or file path / `:memory:` for SQLite).")
    DB_USERNAME: Optional[str] = Field(None, description="Database username credential.")
    DB_PASSWORD: Optional[str] = Field(None, description="Database password credential.")
    DB_HOST: Optional[str] = Field(None, description="Hostname or IP address of the database server.")
    DB_PORT: Optional[int] = Field(None, description="Port of the database server.")
    DB_ECHO: bool = Field(False, description="Log every emitted SQL statement.")
    DB_POOL_PRE_PING: bool = Field(True, description="Test pooled connections before handing them out.")
    LOG_LEVEL: str = Field("INFO", description="Level for the `webstudio` loggers (e.g., `DEBUG`, `INFO`).")


settings = Settings()
"""Singleton Settings instance shared across the package."""
