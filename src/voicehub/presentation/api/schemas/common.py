"""Common schemas shared across API endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    success: bool = Field(default=False)
    error: str = Field(..., description="Human-readable error message")
    kind: str = Field(..., description="Error kind for programmatic handling")
    retryable: bool = Field(
        default=False,
        description="Whether repeating the same request may succeed",
    )
    details: Any = Field(
        default=None,
        description="Diagnostic payload, e.g. the provider's error response",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "error": "Your reviewer account is pending approval.",
                "kind": "PendingApproval",
                "retryable": False,
                "details": None,
            },
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
