"""
Webex Meeting Handler

Joins Webex meetings as a named guest.
"""

from __future__ import annotations

from playwright.async_api import Page

from app.core.logging import get_logger
from app.domain.models import MeetingPlatform
from .base_handler import BaseMeetingHandler


logger = get_logger("webex_handler")


class WebexMeetingHandler(BaseMeetingHandler):
    """Handler for Webex meetings."""

    platform = MeetingPlatform.WEBEX

    async def join(self, page: Page, link: str) -> bool:
        logger.info("🔗 Joining Webex...")
        await self.navigate(page, link)

        if not await self.fill_if_present(page, "name_input", self.bot_name):
            logger.error("❌ Webex join failed: guest name field not found")
            return False

        if not await self.click_if_present(page, "join_button"):
            logger.error("❌ Webex join failed: join button not found")
            return False

        return await self.confirm_joined(page)
