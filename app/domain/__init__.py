"""
Domain layer exports.
"""

from .models import (
    JoinOutcome,
    MeetingPlatform,
)

__all__ = [
    "JoinOutcome",
    "MeetingPlatform",
]
