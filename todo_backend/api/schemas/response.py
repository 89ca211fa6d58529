"""API Response Schemas

Todos are returned as TodoItem directly; these cover everything else.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field("ok", description="Status")
    version: str = Field(..., description="Version")
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class HealthDetailResponse(BaseModel):
    """Detailed health check response"""

    status: str = Field("ok", description="Status")
    version: str = Field(..., description="Version")
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    checks: dict[str, dict[str, Any]] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Error response"""

    success: bool = False
    error: dict[str, Any] = Field(..., description="Error info")
