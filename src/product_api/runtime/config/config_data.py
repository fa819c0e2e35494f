"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field
from sqlalchemy.engine import make_url


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(
        default=None, description="Log file path (no file sink when empty)"
    )
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./product.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    timeout: int = Field(default=20, description="SQLite lock timeout in seconds")

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        """Whether the configured backend is SQLite."""
        return make_url(self.url).get_backend_name() == "sqlite"

    @computed_field
    @property
    def is_memory(self) -> bool:
        """Whether the configured database lives only in memory."""
        database = make_url(self.url).database
        return self.is_sqlite and database in (None, "", ":memory:")

    @computed_field
    @property
    def connection_string(self) -> str:
        """Connection string handed to the engine."""
        return str(make_url(self.url))


class ApiConfig(BaseModel):
    """HTTP API behaviour."""

    error_format: Literal["envelope", "plain"] = Field(
        default="envelope",
        description="Render errors as the JSON envelope or as a plain-text body",
    )


class ProductsConfig(BaseModel):
    """Product repository behaviour."""

    upsert_on_update: bool = Field(
        default=True,
        description="Insert a new row when updating an identifier that does not exist",
    )
    auto_timestamps: bool = Field(
        default=True,
        description="Populate created_at/updated_at on writes",
    )


class AppConfig(BaseModel):
    """Application configuration model."""

    name: str = Field(default="product-api", description="Service name")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="0.0.0.0", description="Application host")
    port: int = Field(default=8080, description="Application port")


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    api: ApiConfig = Field(default_factory=ApiConfig, description="API configuration")
    products: ProductsConfig = Field(
        default_factory=ProductsConfig, description="Product repository configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
