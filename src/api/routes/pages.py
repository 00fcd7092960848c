"""Landing page and API descriptor endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from src.core.config import Settings, get_settings
from src.infrastructure.assets import api_docs_path, index_path, read_api_descriptor

router = APIRouter(tags=["pages"])


@router.get("/", response_class=FileResponse)
async def landing_page(
    settings: Annotated[Settings, Depends(get_settings)],
) -> FileResponse:
    """Serve the landing page."""
    return FileResponse(index_path(settings.static_config))


@router.get("/api-docs")
async def api_docs(
    settings: Annotated[Settings, Depends(get_settings)],
) -> Any:  # noqa: ANN401 - the descriptor is returned as parsed
    """Return the API descriptor file as JSON.

    The file is read on every request.

    Raises:
        AssetReadError: If the file is missing or not valid JSON.
    """
    return await read_api_descriptor(api_docs_path(settings.static_config))
