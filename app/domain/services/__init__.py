"""
Domain services.
"""

from .join_service import MeetingJoinService

__all__ = ["MeetingJoinService"]
