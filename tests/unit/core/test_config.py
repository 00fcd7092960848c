"""Unit tests for src/core/config.py module."""

import pytest
from pydantic import ValidationError

from src.core.config import (
    DatabaseConfig,
    LogConfig,
    Settings,
    StaticConfig,
    get_settings,
)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default configuration values."""

    def test_application_defaults(self) -> None:
        """Settings without environment variables use the documented defaults."""
        settings = Settings()

        assert settings.app_name == "Solar System API"
        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.api_port == 8000
        assert settings.cors_origins == ["*"]

    def test_nested_defaults(self) -> None:
        """Nested configuration groups are populated."""
        settings = Settings()

        assert settings.database_config.collection_name == "planets"
        assert settings.database_config.mongo_username is None
        assert settings.static_config.index_file == "index.html"
        assert settings.static_config.api_docs_file == "oas.json"
        assert settings.log_config.excluded_paths == ["/live", "/ready"]

    @pytest.mark.parametrize(
        ("environment", "expected_formatter"),
        [
            ("development", "console"),
            ("test", "console"),
            ("staging", "json"),
            ("production", "json"),
        ],
    )
    def test_formatter_auto_detection(
        self, environment: str, expected_formatter: str
    ) -> None:
        """The log formatter follows the environment when not configured."""
        settings = Settings(environment=environment)

        assert settings.log_config.log_formatter_type == expected_formatter

    def test_explicit_formatter_is_kept(self) -> None:
        """A configured formatter is not overridden."""
        settings = Settings(
            environment="production",
            log_config=LogConfig(log_formatter_type="console"),
        )

        assert settings.log_config.log_formatter_type == "console"


@pytest.mark.unit
class TestEnvironmentOverrides:
    """Test reading configuration from environment variables."""

    def test_top_level_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Top-level settings come from plain environment variables."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("API_PORT", "9000")

        settings = Settings()

        assert settings.environment == "production"
        assert settings.api_port == 9000

    def test_nested_database_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Nested settings use the __ delimiter."""
        monkeypatch.setenv(
            "DATABASE_CONFIG__MONGO_URI", "mongodb+srv://cluster.example.net/solar"
        )
        monkeypatch.setenv("DATABASE_CONFIG__MONGO_USERNAME", "reader")
        monkeypatch.setenv("DATABASE_CONFIG__MONGO_PASSWORD", "hunter2")

        settings = Settings()

        assert settings.database_config.mongo_uri == (
            "mongodb+srv://cluster.example.net/solar"
        )
        assert settings.database_config.mongo_username == "reader"
        assert settings.database_config.mongo_password == "hunter2"

    def test_invalid_environment_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Unknown environment names fail validation."""
        monkeypatch.setenv("ENVIRONMENT", "moon")

        with pytest.raises(ValidationError):
            Settings()


@pytest.mark.unit
class TestDatabaseConfig:
    """Test DatabaseConfig validation."""

    @pytest.mark.parametrize(
        "uri",
        ["mongodb://localhost:27017", "mongodb+srv://cluster.example.net/db"],
    )
    def test_valid_uri_schemes(self, uri: str) -> None:
        """Both MongoDB schemes are accepted."""
        assert DatabaseConfig(mongo_uri=uri).mongo_uri == uri

    def test_invalid_uri_scheme(self) -> None:
        """Non-MongoDB connection strings are rejected."""
        with pytest.raises(ValidationError, match="mongodb://"):
            DatabaseConfig(mongo_uri="postgresql://localhost/db")

    def test_empty_credentials_become_none(self) -> None:
        """Empty credential strings are treated as unset."""
        config = DatabaseConfig(mongo_username="", mongo_password="")

        assert config.mongo_username is None
        assert config.mongo_password is None

    def test_timeout_must_be_positive(self) -> None:
        """A zero server selection timeout is rejected."""
        with pytest.raises(ValidationError):
            DatabaseConfig(server_selection_timeout_ms=0)


@pytest.mark.unit
class TestGetSettings:
    """Test the cached settings accessor."""

    def test_returns_cached_instance(self) -> None:
        """Repeated calls return the same object."""
        assert get_settings() is get_settings()

    def test_static_config_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Static file locations can be moved through the environment."""
        monkeypatch.setenv("STATIC_CONFIG__STATIC_DIR", "/srv/public")

        assert get_settings().static_config == StaticConfig(static_dir="/srv/public")
