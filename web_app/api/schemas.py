"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from datetime import datetime


class RedirectUpsertRequest(BaseModel):
    """Request to create or overwrite a mapping."""

    url: str = Field(..., description="Target URL", min_length=1, max_length=2048)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
            ]
        }
    }


class SuccessResponse(BaseModel):
    """Acknowledgement of a write."""

    success: bool = Field(True, description="Always true for a completed write")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Key-value store status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorDetail(BaseModel):
    """Error body."""

    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)
    timestamp: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response."""

    error: ErrorDetail
