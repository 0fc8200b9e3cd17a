"""
Meeting Orchestrator

Routes a page and link to the join strategy for the detected platform.
"""

from __future__ import annotations

from typing import Dict, Optional

from playwright.async_api import Page

from app.core.config import Settings
from app.core.exceptions import UnsupportedPlatformError
from app.core.logging import get_logger
from app.domain.models import MeetingPlatform
from .base_handler import BaseMeetingHandler
from .jitsi_meeting_handler import JitsiMeetingHandler
from .meet_handler import MeetMeetingHandler
from .teams_meeting_handler import TeamsMeetingHandler
from .webex_meeting_handler import WebexMeetingHandler
from .zoom_meeting_handler import ZoomMeetingHandler


logger = get_logger("meeting_orchestrator")


def build_handlers(settings: Settings) -> Dict[MeetingPlatform, BaseMeetingHandler]:
    """Create one join strategy per supported platform."""
    handlers = [
        MeetMeetingHandler(settings),
        ZoomMeetingHandler(settings),
        JitsiMeetingHandler(settings),
        TeamsMeetingHandler(settings),
        WebexMeetingHandler(settings),
    ]
    return {handler.platform: handler for handler in handlers}


class MeetingOrchestrator:
    """
    Main coordinator for all meeting platforms.

    Strategies can be swapped per platform (e.g. in tests) without touching
    the request handling.
    """

    def __init__(
        self,
        settings: Settings,
        handlers: Optional[Dict[MeetingPlatform, BaseMeetingHandler]] = None,
    ):
        self.handlers = handlers if handlers is not None else build_handlers(settings)

    def supports(self, platform: MeetingPlatform) -> bool:
        return platform in self.handlers

    def get_handler(self, platform: MeetingPlatform) -> BaseMeetingHandler:
        handler = self.handlers.get(platform)
        if handler is None:
            raise UnsupportedPlatformError(f"Platform {platform.value} not supported yet.")
        return handler

    async def join_meeting(self, page: Page, link: str, platform: MeetingPlatform) -> bool:
        """
        Route the join to the platform handler.

        Returns:
            Whether the handler reports being in the call.
        """
        handler = self.get_handler(platform)
        logger.info(f"Joining meeting: platform='{platform.value}', url='{link}'")
        return await handler.join(page, link)
