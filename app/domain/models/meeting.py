"""
Data models for meeting join requests and outcomes.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class MeetingPlatform(str, Enum):
    """Supported meeting platforms."""
    GOOGLE_MEET = "Google Meet"
    ZOOM = "Zoom"
    JITSI = "Jitsi"
    TEAMS = "Microsoft Teams"
    WEBEX = "Webex"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class JoinOutcome:
    """
    Result of one join request. Returned to the caller, never stored.
    """
    platform: MeetingPlatform
    joined: bool
    link: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def status(self) -> str:
        return "joined" if self.joined else "not_joined"

    def to_dict(self) -> dict:
        """Convert to response dictionary."""
        return {
            "status": self.status,
            "platform": self.platform.value,
            "joined": self.joined,
            "timestamp": self.timestamp.isoformat(),
            "link": self.link,
        }
