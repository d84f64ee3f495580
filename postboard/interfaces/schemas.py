"""
Pydantic schemas shared by every router.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    detail: str | None = None
