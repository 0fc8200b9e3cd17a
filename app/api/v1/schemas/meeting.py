"""
API request/response schemas for meeting operations.
"""

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class JoinMeetingRequest(BaseModel):
    """Request to join a meeting. Both fields are checked by the service."""
    link: Optional[str] = Field(default=None, description="Meeting URL to join")
    token: Optional[str] = Field(default=None, description="Shared secret")


class JoinMeetingResponse(BaseModel):
    """Outcome of a join request."""
    status: str = Field(..., description="'joined' or 'not_joined'")
    platform: str
    joined: bool
    timestamp: datetime
    link: str


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    timestamp: datetime
    version: str


class ErrorResponse(BaseModel):
    """Error response."""
    error: str
