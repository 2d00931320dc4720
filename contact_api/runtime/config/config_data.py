"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class JWTConfig(BaseModel):
    """Bearer token signing and validation configuration."""

    secret_key: str | None = Field(
        default=None,
        description="Base64-encoded symmetric key material used to sign tokens",
    )
    expiration_time_ms: int = Field(
        default=3_600_000, description="Token lifetime in milliseconds"
    )
    algorithm: Literal["HS256"] = Field(
        default="HS256", description="Signing algorithm"
    )
    clock_skew: int = Field(default=0, description="Clock skew tolerance in seconds")

    @computed_field
    @property
    def expiration_time_seconds(self) -> int:
        """Token lifetime rounded down to whole seconds (JWT timestamps are seconds)."""
        return self.expiration_time_ms // 1000


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
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./contacts.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def is_in_memory(self) -> bool:
        """True for SQLite URLs that point at a private in-memory database."""
        return self.is_sqlite and (
            self.url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in self.url
        )


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="0.0.0.0", description="Application host")
    port: int = Field(default=8080, description="Application port")
    seed_roles_on_startup: bool = Field(
        default=True, description="Create tables and seed roles during app startup"
    )


class SecurityConfig(BaseModel):
    """Password hashing configuration."""

    bcrypt_rounds: int = Field(
        default=12, ge=4, le=31, description="bcrypt cost factor for password hashes"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    jwt: JWTConfig = Field(
        default_factory=JWTConfig, description="Bearer token configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    security: SecurityConfig = Field(
        default_factory=SecurityConfig, description="Security configuration"
    )
