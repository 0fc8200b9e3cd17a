"""
Meeting handler module.

Browser sessions, platform detection and per-platform join strategies.
"""

from .base_handler import BaseMeetingHandler
from .browser_session import BrowserSession, ChromiumProvisioner, PlaywrightBrowserLauncher
from .jitsi_meeting_handler import JitsiMeetingHandler
from .meet_handler import MeetMeetingHandler
from .meeting_orchestrator import MeetingOrchestrator, build_handlers
from .platform_detector import detect_platform
from .teams_meeting_handler import TeamsMeetingHandler
from .webex_meeting_handler import WebexMeetingHandler
from .zoom_meeting_handler import ZoomMeetingHandler

__all__ = [
    "BaseMeetingHandler",
    "BrowserSession",
    "ChromiumProvisioner",
    "PlaywrightBrowserLauncher",
    "JitsiMeetingHandler",
    "MeetMeetingHandler",
    "MeetingOrchestrator",
    "build_handlers",
    "detect_platform",
    "TeamsMeetingHandler",
    "WebexMeetingHandler",
    "ZoomMeetingHandler",
]
