"""Files served from disk.

The API descriptor is read and parsed on every call so edits on disk show up
without a restart. File I/O runs in the thread pool to keep the event loop
free.
"""

from pathlib import Path
from typing import Any

import orjson
from loguru import logger
from starlette.concurrency import run_in_threadpool

from src.core.config import StaticConfig
from src.core.exceptions import AssetReadError


def _read_json(path: Path) -> Any:  # noqa: ANN401 - any JSON document
    return orjson.loads(path.read_bytes())


async def read_api_descriptor(path: Path) -> Any:  # noqa: ANN401 - any JSON document
    """Read and parse the API descriptor file.

    Args:
        path: Location of the descriptor file.

    Returns:
        Any: The parsed JSON document, unchanged.

    Raises:
        AssetReadError: If the file is missing, unreadable or not valid JSON.
    """
    try:
        return await run_in_threadpool(_read_json, path)
    except (OSError, orjson.JSONDecodeError) as e:
        logger.error("Error reading file {}: {}", path, e)
        raise AssetReadError(
            "Error reading file", context={"file_path": str(path)}, cause=e
        ) from e


def static_dir(config: StaticConfig) -> Path:
    """Directory holding the landing page and public assets."""
    return Path(config.static_dir)


def index_path(config: StaticConfig) -> Path:
    """Location of the landing page."""
    return static_dir(config) / config.index_file


def api_docs_path(config: StaticConfig) -> Path:
    """Location of the API descriptor file."""
    return static_dir(config) / config.api_docs_file
