"""
Domain models module.
"""

from .meeting import (
    JoinOutcome,
    MeetingPlatform,
)

__all__ = [
    "JoinOutcome",
    "MeetingPlatform",
]
