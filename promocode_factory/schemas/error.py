"""Standardized error response schema."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned for partner and limit failures (4xx)."""

    detail: str = Field(..., description="Human-readable error message")
    code: str = Field(
        ...,
        description="Machine-readable error code, e.g. NOT_FOUND, PARTNER_INACTIVE, INVALID_LIMIT",
    )
