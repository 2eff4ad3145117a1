"""
Shared response schemas - errors, health
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(description="Machine-checkable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[Any] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "QuotaExceeded",
                "message": "Free plan limit reached. Upgrade to Pro.",
                "details": None,
                "timestamp": "2025-09-13T17:23:45Z",
            }
        }
    )


class StatusResponse(BaseModel):
    status: str = "ok"


class HealthCheckResponse(BaseModel):
    """Database health check response."""

    connected: bool
    status: str
    response_time_ms: Optional[float] = None
    error: Optional[str] = None
