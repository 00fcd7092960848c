"""Main entry point for running the Solar System API."""

import os

import uvicorn
from loguru import logger

from src.api.main import app
from src.core.config import get_settings
from src.core.logging import setup_logging, uvicorn_log_config


def main() -> None:
    """Start Uvicorn on ``PORT`` when set, otherwise on the configured port."""
    settings = get_settings()
    setup_logging(settings)

    port = int(os.environ.get("PORT", settings.api_port))
    logger.info("Server successfully running on port - {}", port)

    # Reload needs the app as an import string
    target = "src.api.main:app" if settings.debug else app
    uvicorn.run(
        target,
        host=settings.api_host,
        port=port,
        reload=settings.debug,
        log_config=uvicorn_log_config(settings.log_config.log_level),
    )


if __name__ == "__main__":
    main()
