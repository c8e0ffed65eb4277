"""Liveness ping schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class HealthStatus(str, Enum):
    """States reported by the ping endpoint; only a running process answers."""
    HEALTHY = "healthy"


class HealthResponse(BaseModel):
    """Body of ``POST /v1/health/ping``."""

    status: HealthStatus = Field(..., description="Always 'healthy' when the GoGlobe API answers")
    timestamp: datetime = Field(..., description="Server time in UTC (ISO 8601)")
    version: str = Field(..., description="Running GoGlobe API version")
