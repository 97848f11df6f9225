"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field

MEMORY_STORAGE = ":memory:"


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model.

    The connection is described either by a dialect plus a storage location, or
    by a full SQLAlchemy ``url`` which then takes precedence.
    """

    dialect: Literal["sqlite", "postgresql"] = Field(
        default="sqlite", description="Database dialect identifier"
    )
    storage: str = Field(
        default="./database.sqlite",
        description="Storage location; a file path or ':memory:' for sqlite",
    )
    url: str | None = Field(
        default=None, description="Full database URL, overrides dialect and storage"
    )
    echo: bool = Field(default=False, description="Echo emitted SQL statements")

    @property
    def connection_string(self) -> str:
        """Construct the SQLAlchemy connection string."""
        if self.url:
            return self.url

        if self.dialect == "sqlite":
            if self.storage == MEMORY_STORAGE:
                return "sqlite://"
            return f"sqlite:///{self.storage}"

        # Non-file dialects need a network location, e.g. "user:pw@host:5432/db"
        if not self.storage or self.storage == MEMORY_STORAGE:
            raise ValueError(f"Dialect '{self.dialect}' requires a storage location")
        logger.debug("Building {} connection string from storage location", self.dialect)
        return f"{self.dialect}://{self.storage}"

    @property
    def is_sqlite(self) -> bool:
        return self.connection_string.startswith("sqlite")

    @property
    def is_memory(self) -> bool:
        return self.connection_string in ("sqlite://", "sqlite:///:memory:")


class BootstrapConfig(BaseModel):
    """Bootstrap sequence configuration model."""

    on_startup: bool = Field(
        default=False, description="Run the bootstrap sequence when the API starts"
    )
    seed: bool = Field(default=True, description="Insert the seed records")


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    bootstrap: BootstrapConfig = Field(
        default_factory=BootstrapConfig, description="Bootstrap configuration"
    )
