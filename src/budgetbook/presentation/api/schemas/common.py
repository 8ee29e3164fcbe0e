"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "Account 'abc' not found", "code": "ACCOUNT_NOT_FOUND"},
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
