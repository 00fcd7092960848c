"""Diagnostic and probe endpoints.

``/live`` and ``/ready`` return fixed answers and never touch the document
store, so orchestration keeps routing traffic to static pages even while the
store is down.
"""

import socket
from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.schemas.system import HostInfo, ProbeStatus
from src.core.config import Settings, get_settings

router = APIRouter(tags=["system"])


@router.get("/os")
async def host_info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HostInfo:
    """Report the host name and environment the process runs in."""
    return HostInfo(os=socket.gethostname(), env=settings.environment)


@router.get("/live")
async def live() -> ProbeStatus:
    """Liveness probe."""
    return ProbeStatus(status="live")


@router.get("/ready")
async def ready() -> ProbeStatus:
    """Readiness probe."""
    return ProbeStatus(status="ready")
