"""
Jitsi Meeting Handler

Jitsi's guest flow joins on page load, so there is nothing to click and
no in-call signal to wait for.
"""

from __future__ import annotations

import asyncio

from playwright.async_api import Page

from app.core.config import Settings
from app.core.logging import get_logger
from app.domain.models import MeetingPlatform
from .base_handler import BaseMeetingHandler


logger = get_logger("jitsi_handler")


class JitsiMeetingHandler(BaseMeetingHandler):
    """Handler for Jitsi Meet rooms."""

    platform = MeetingPlatform.JITSI

    def __init__(self, settings: Settings):
        super().__init__(settings)
        self.settle_seconds = settings.bot.jitsi_settle / 1000

    async def join(self, page: Page, link: str) -> bool:
        logger.info("🔗 Joining Jitsi...")
        await self.navigate(page, link)
        await asyncio.sleep(self.settle_seconds)
        logger.info("✅ Joined Jitsi Meet")
        return True
