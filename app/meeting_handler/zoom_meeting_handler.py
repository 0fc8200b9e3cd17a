"""
Zoom Meeting Handler

Joins through Zoom's web client via the "Join from your browser" link.
A launch page without that link is reported as not joined.
"""

from __future__ import annotations

from playwright.async_api import Page

from app.core.logging import get_logger
from app.domain.models import MeetingPlatform
from .base_handler import BaseMeetingHandler


logger = get_logger("zoom_handler")


class ZoomMeetingHandler(BaseMeetingHandler):
    """Handler for Zoom meetings."""

    platform = MeetingPlatform.ZOOM

    async def join(self, page: Page, link: str) -> bool:
        """
        Join a Zoom meeting from the browser.

        Flow:
        1. Navigate to meeting URL
        2. Follow the "Join from your browser" link
        3. Enter the guest name if asked and submit
        4. Wait for the leave control
        """
        logger.info("🔗 Joining Zoom...")
        await self.navigate(page, link)

        if not await self.click_if_present(page, "join_from_browser"):
            logger.warning('⚠️ Zoom: "Join from browser" link not found')
            return False

        if not await self.fill_if_present(page, "name_input", self.bot_name, self.optional_step_timeout):
            logger.info("Zoom did not ask for a guest name")
        await self.click_if_present(page, "submit", self.optional_step_timeout)

        return await self.confirm_joined(page)
