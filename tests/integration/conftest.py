"""Shared fixtures for integration tests.

The application runs in-process behind ``httpx.ASGITransport``. The document
store is replaced by overriding ``get_planet_repository``, so no database is
needed.
"""

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import orjson
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.main import create_app
from src.core.config import Settings, StaticConfig, get_settings
from src.infrastructure.database.dependencies import get_planet_repository
from tests.integration.fakes import API_DESCRIPTOR, PLANETS, InMemoryPlanetRepository


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None]:
    """Clear settings cache before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """A static directory with a landing page, stylesheet and descriptor.

    Returns:
        Path: The directory.
    """
    (tmp_path / "index.html").write_text(
        "<!DOCTYPE html><title>Solar System</title>", encoding="utf-8"
    )
    (tmp_path / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    (tmp_path / "oas.json").write_bytes(
        orjson.dumps(API_DESCRIPTOR, option=orjson.OPT_INDENT_2)
    )
    return tmp_path


@pytest.fixture
def test_settings(static_dir: Path) -> Settings:
    """Settings pointing at the temporary static directory.

    Returns:
        Settings: Test settings.
    """
    return Settings(
        environment="test",
        static_config=StaticConfig(static_dir=str(static_dir)),
    )


@pytest.fixture
def planet_repository() -> InMemoryPlanetRepository:
    """In-memory repository seeded with a few planets.

    Returns:
        InMemoryPlanetRepository: The repository.
    """
    return InMemoryPlanetRepository(PLANETS)


@pytest.fixture
def app(
    test_settings: Settings, planet_repository: InMemoryPlanetRepository
) -> FastAPI:
    """Application wired to the in-memory repository.

    Returns:
        FastAPI: The application.
    """
    application = create_app(test_settings)
    application.dependency_overrides[get_planet_repository] = lambda: (
        planet_repository
    )
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create test client for API testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
