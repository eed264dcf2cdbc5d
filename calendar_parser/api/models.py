"""
Pydantic models for API request/response schemas.
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the liveness probe."""

    ok: bool = Field(default=True, description="Always true while the process serves requests")


class ParseResponse(BaseModel):
    """Response model for calendar extraction."""

    events: list[Any] = Field(
        default_factory=list,
        description="Extracted events in the calendar_events schema shape",
    )


class ErrorResponse(BaseModel):
    """Response model for errors."""

    error: str = Field(
        ...,
        description="Error message",
    )
    status: int | None = Field(default=None, description="Upstream HTTP status, for upstream errors")
    details: str | None = Field(default=None, description="Upstream body or exception text")
    raw: Any | None = Field(default=None, description="Upstream response when no output text was found")
    outputText: str | None = Field(default=None, description="Model output that was not valid JSON")
