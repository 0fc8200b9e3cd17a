"""
Google Meet Meeting Handler

Handles Google Meet joins:
- Optional sign-in with a configured Google account
- Clicking the join button on the pre-join screen
- Confirming entry via the "Leave call" control
"""

from __future__ import annotations

from urllib.parse import urlparse

from playwright.async_api import (
    Error as PlaywrightError,
    Page,
)

from app.core.config import Settings
from app.core.logging import get_logger
from app.domain.models import MeetingPlatform
from .base_handler import BaseMeetingHandler
from .platform_scripts import MEET_CLICK_JOIN_JS


logger = get_logger("meet_handler")


class MeetMeetingHandler(BaseMeetingHandler):
    """Handler for Google Meet meetings."""

    platform = MeetingPlatform.GOOGLE_MEET

    def __init__(self, settings: Settings):
        super().__init__(settings)
        self.google = settings.google

    async def join(self, page: Page, link: str) -> bool:
        """
        Join a Google Meet meeting.

        Flow:
        1. Navigate to meeting URL
        2. Sign in if credentials are configured (failure is not fatal)
        3. Click the button whose text contains "join"
        4. Wait for the "Leave call" control
        """
        logger.info("🔗 Joining Google Meet...")
        await self.navigate(page, link)

        if self.google.has_credentials:
            await self._perform_auto_login(page)

        # The join control has no stable attribute, so pick it by text in-page
        if not await self.wait_for(page, "button"):
            logger.warning("No buttons rendered on the Meet page")
            return False

        clicked = await page.evaluate(MEET_CLICK_JOIN_JS)
        if not clicked:
            logger.warning("Could not find a 'Join' button on the Meet page")
            return False

        logger.info("Clicked Meet join button")
        return await self.confirm_joined(page)

    async def _perform_auto_login(self, page: Page) -> bool:
        """Attempts to log in with the configured account. Returns True if successful."""
        try:
            await page.wait_for_selector(self.selector("email_input"), timeout=self.step_timeout)
            await page.fill(self.selector("email_input"), self.google.email)
            await page.click(self.selector("email_next"))

            await page.wait_for_selector(self.selector("password_input"), timeout=self.step_timeout)
            await page.fill(self.selector("password_input"), self.google.password)
            await page.click(self.selector("password_next"))

            # The sign-in URL carries meet.google.com in its continue= parameter
            await page.wait_for_url(
                lambda u: urlparse(u).hostname == "meet.google.com", timeout=self.step_timeout
            )
            logger.info("✅ Logged in to Google")
            return True
        except PlaywrightError as e:
            logger.warning(f"⚠️ Google login skipped or failed: {e}")
            return False
