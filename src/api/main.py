"""FastAPI application initialization and configuration module.

This module handles:
- Application lifecycle (store client creation and cleanup)
- Middleware and exception handler registration
- Router registration and static file serving

The document store client is created in the lifespan and kept on
``app.state``; handlers reach it through dependency injection.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger

from src.api.middleware.error_handler import register_exception_handlers
from src.api.middleware.request_logging import RequestLoggingMiddleware
from src.api.routes import pages, planets, system
from src.api.utils.responses import ORJSONResponse
from src.core.config import Settings, get_settings
from src.core.logging import setup_logging
from src.infrastructure.assets import static_dir
from src.infrastructure.database.client import MongoManager


@asynccontextmanager
async def lifespan(app_instance: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    A store that cannot be reached at startup is logged and tolerated, so
    probes and static pages keep working; lookups fail with 500 until the
    store comes back.

    Args:
        app_instance: The FastAPI application instance.

    Yields:
        None: Nothing is yielded, this is just a lifespan context.
    """
    settings: Settings = app_instance.state.settings
    manager = MongoManager(settings.database_config)
    app_instance.state.mongo = manager

    is_healthy, error_msg = await manager.ping()
    if is_healthy:
        logger.info("Document store connection successful")
    else:
        logger.error("Document store connection failed during startup: {}", error_msg)

    logger.info(
        "Application startup complete - {} v{}",
        app_instance.title,
        app_instance.version,
    )

    yield

    logger.info("Application shutdown initiated")
    await manager.close()
    logger.info("Application shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings instance. If not provided, will use
            get_settings(). When provided, it also replaces the settings
            injected into route handlers.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()
    app_settings = settings

    setup_logging(settings)

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.dependency_overrides[get_settings] = lambda: app_settings

    # Register exception handlers BEFORE middleware
    register_exception_handlers(application)

    # Middleware are executed in reverse order of registration
    application.add_middleware(RequestLoggingMiddleware, log_config=settings.log_config)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(pages.router)
    application.include_router(planets.router)
    application.include_router(system.router)

    # Mounted after the routers so explicit routes take precedence
    public_dir = static_dir(settings.static_config)
    if public_dir.is_dir():
        application.mount("/", StaticFiles(directory=public_dir), name="static")
    else:
        logger.warning("Static directory {} not found, not serving files", public_dir)

    return application


app = create_app()
