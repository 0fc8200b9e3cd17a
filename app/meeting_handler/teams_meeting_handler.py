"""
Microsoft Teams Meeting Handler

Handles the Teams guest join flow in the browser:
- Cookie consent dismissal
- "Use the web app instead" link
- Guest name entry and submit
- Confirmation via the hang-up control
"""

from __future__ import annotations

from playwright.async_api import Page

from app.core.logging import get_logger
from app.domain.models import MeetingPlatform
from .base_handler import BaseMeetingHandler


logger = get_logger("teams_handler")


class TeamsMeetingHandler(BaseMeetingHandler):
    """Handler for Microsoft Teams meetings."""

    platform = MeetingPlatform.TEAMS

    async def join(self, page: Page, link: str) -> bool:
        """
        Join a Microsoft Teams meeting as a guest.

        Every step after the cookie banner is required; the first missing
        one ends the flow with False.
        """
        logger.info("🔗 Joining Microsoft Teams...")
        await self.navigate(page, link)

        await self.click_if_present(page, "cookie_accept", self.optional_step_timeout)

        if not await self.click_if_present(page, "use_web_app"):
            logger.error("❌ Teams join failed: web app link not found")
            return False

        if not await self.fill_if_present(page, "name_input", self.bot_name):
            logger.error("❌ Teams join failed: name field not found")
            return False

        if not await self.click_if_present(page, "submit"):
            logger.error("❌ Teams join failed: join button not found")
            return False

        return await self.confirm_joined(page)
