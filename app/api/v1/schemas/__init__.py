"""
API v1 schemas module.
"""

from .meeting import (
    JoinMeetingRequest,
    JoinMeetingResponse,
    HealthCheckResponse,
    ErrorResponse,
)

__all__ = [
    "JoinMeetingRequest",
    "JoinMeetingResponse",
    "HealthCheckResponse",
    "ErrorResponse",
]
