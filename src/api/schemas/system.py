"""Response models for diagnostic and probe endpoints."""

from typing import Literal

from pydantic import BaseModel, Field


class HostInfo(BaseModel):
    """Host and environment the process runs on."""

    os: str = Field(..., description="Host name", examples=["solar-system-7d9f"])
    env: str = Field(..., description="Environment name", examples=["production"])


class ProbeStatus(BaseModel):
    """Fixed answer of a liveness or readiness probe."""

    status: Literal["live", "ready"] = Field(..., description="Probe result")
