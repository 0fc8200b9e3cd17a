"""
Meeting platform detection from a link.
"""

from typing import List, Tuple

from app.domain.models import MeetingPlatform


# Checked in order; the first signature contained in the link wins.
PLATFORM_SIGNATURES: List[Tuple[str, MeetingPlatform]] = [
    ("meet.google.com", MeetingPlatform.GOOGLE_MEET),
    ("zoom.us", MeetingPlatform.ZOOM),
    ("jit.si", MeetingPlatform.JITSI),
    ("teams.microsoft.com", MeetingPlatform.TEAMS),
    ("webex.com", MeetingPlatform.WEBEX),
]


def detect_platform(link: str) -> MeetingPlatform:
    """
    Detect the meeting platform from a link.

    Matching is plain, case-sensitive substring containment.

    Args:
        link: Meeting URL.

    Returns:
        MeetingPlatform enum value, UNKNOWN if nothing matches.
    """
    if not link:
        return MeetingPlatform.UNKNOWN

    for signature, platform in PLATFORM_SIGNATURES:
        if signature in link:
            return platform

    return MeetingPlatform.UNKNOWN
