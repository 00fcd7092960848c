"""Centralized configuration management with environment-aware defaults.

This module implements the configuration system using Pydantic Settings,
providing type-safe configuration with validation and environment variable
support.

Configuration sources (in order of precedence):
1. Environment variables
2. .env file in project root
3. Default values in model definitions

Nested groups are read with the ``__`` delimiter, for example
``DATABASE_CONFIG__MONGO_URI``.
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogConfig(BaseModel):
    """Logging configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_formatter_type: Literal["console", "json"] | None = Field(
        default=None,
        description="Log output formatter. Auto-detected if not specified.",
    )
    excluded_paths: list[str] = Field(
        default_factory=lambda: ["/live", "/ready"],
        description="Paths to exclude from request logging",
    )
    slow_request_threshold_ms: int = Field(
        default=1000,
        gt=0,
        description="Threshold for slow request warnings (milliseconds)",
    )


class DatabaseConfig(BaseModel):
    """Document store connection settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/solar-system",
        description="MongoDB connection string (mongodb:// or mongodb+srv://)",
    )
    mongo_username: str | None = Field(
        default=None,
        description="Username used to authenticate against the store",
    )
    mongo_password: str | None = Field(
        default=None,
        description="Password used to authenticate against the store",
    )
    database_name: str = Field(
        default="solar-system",
        description="Database holding the planets collection",
    )
    collection_name: str = Field(
        default="planets",
        description="Collection holding planet records",
    )
    server_selection_timeout_ms: int = Field(
        default=5000,
        gt=0,
        le=60000,
        description="How long the driver waits for a reachable server",
    )

    @field_validator("mongo_uri", mode="after")
    @classmethod
    def validate_mongo_uri(cls, v: str) -> str:
        """Validate the connection string uses a MongoDB scheme."""
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            msg = "Mongo URI must use the mongodb:// or mongodb+srv:// scheme"
            raise ValueError(msg)
        return v

    @field_validator("mongo_username", "mongo_password", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for credentials."""
        if v == "":
            return None
        return v


class StaticConfig(BaseModel):
    """Locations of the files served from disk."""

    static_dir: str = Field(
        default="static",
        description="Directory holding the landing page and public assets",
    )
    index_file: str = Field(
        default="index.html",
        description="Landing page returned by GET /",
    )
    api_docs_file: str = Field(
        default="oas.json",
        description="API descriptor returned by GET /api-docs",
    )


class Settings(BaseSettings):
    """Main settings class for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Application settings
    app_name: str = Field(default="Solar System API", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Literal["development", "test", "staging", "production"] = Field(
        default="development",
        description="Environment the application is running in",
    )
    debug: bool = Field(default=False, description="Debug mode flag")

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API host")  # noqa: S104
    api_port: int = Field(default=8000, gt=0, le=65535, description="API port")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to make cross-origin requests",
    )

    log_config: LogConfig = Field(
        default_factory=LogConfig, description="Logging configuration"
    )
    database_config: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    static_config: StaticConfig = Field(
        default_factory=StaticConfig, description="Static file configuration"
    )

    def model_post_init(self, __context: object) -> None:
        """Post initialization to set environment-based defaults."""
        super().model_post_init(__context)

        if self.log_config.log_formatter_type is None:
            self.log_config.log_formatter_type = (
                "console" if self.environment in ("development", "test") else "json"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
