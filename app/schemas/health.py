"""Pydantic schemas for the health/status endpoint."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status, environment and database reachability."""

    status: Literal["UP", "DEGRADED"] = Field(
        default="UP", description="UP when the database answers, DEGRADED otherwise"
    )
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    database: Literal["connected", "disconnected"] = Field(
        description="Database connectivity at the time of the check",
    )
    timestamp: datetime = Field(description="Time the check ran (UTC)")
