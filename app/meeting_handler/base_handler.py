"""
Base class for platform join strategies.

A strategy drives one already-open page through a platform's join flow and
reports whether it could confirm being inside the call. A missing element is
reported as ``False``; only unexpected browser failures raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from playwright.async_api import (
    Page,
    TimeoutError as PlaywrightTimeoutError,
)

from app.core.config import Settings
from app.core.logging import get_logger
from app.domain.models import MeetingPlatform
from .platform_scripts import get_selector


logger = get_logger("base_handler")


class BaseMeetingHandler(ABC):
    """Shared helpers for platform join strategies."""

    platform: MeetingPlatform = MeetingPlatform.UNKNOWN

    def __init__(self, settings: Settings):
        self.bot_name = settings.bot.name
        self.step_timeout = settings.bot.step_timeout
        self.optional_step_timeout = settings.bot.optional_step_timeout
        self.confirm_timeout = settings.bot.confirm_timeout
        self.navigation_timeout = settings.browser.navigation_timeout

    @abstractmethod
    async def join(self, page: Page, link: str) -> bool:
        """
        Join the meeting behind ``link`` using ``page``.

        Returns:
            True if the bot is confirmed (or assumed) to be in the call.
        """

    def selector(self, element_type: str) -> str:
        return get_selector(self.platform, element_type)

    async def navigate(self, page: Page, link: str) -> None:
        """Open the link and wait for network activity to settle."""
        logger.info(f"[{self.platform.value}] Navigating to {link}")
        await page.goto(link, wait_until="networkidle", timeout=self.navigation_timeout)
        logger.info(f"[{self.platform.value}] Landed on: {page.url}")

    async def wait_for(self, page: Page, element_type: str, timeout: Optional[int] = None) -> bool:
        """Wait for an element to become visible. Returns False on timeout."""
        timeout = self.step_timeout if timeout is None else timeout
        try:
            await page.wait_for_selector(self.selector(element_type), state="visible", timeout=timeout)
            return True
        except PlaywrightTimeoutError:
            logger.warning(f"[{self.platform.value}] '{element_type}' not found within {timeout}ms")
            return False

    async def click_if_present(self, page: Page, element_type: str, timeout: Optional[int] = None) -> bool:
        if not await self.wait_for(page, element_type, timeout):
            return False
        try:
            await page.click(self.selector(element_type), timeout=self.step_timeout)
        except PlaywrightTimeoutError:
            logger.warning(f"[{self.platform.value}] '{element_type}' went away before it could be clicked")
            return False
        logger.info(f"[{self.platform.value}] Clicked '{element_type}'")
        return True

    async def fill_if_present(
        self, page: Page, element_type: str, value: str, timeout: Optional[int] = None
    ) -> bool:
        if not await self.wait_for(page, element_type, timeout):
            return False
        try:
            await page.fill(self.selector(element_type), value, timeout=self.step_timeout)
        except PlaywrightTimeoutError:
            logger.warning(f"[{self.platform.value}] '{element_type}' went away before it could be filled")
            return False
        logger.info(f"[{self.platform.value}] Filled '{element_type}'")
        return True

    async def confirm_joined(self, page: Page) -> bool:
        """Wait for a control that only exists once inside the call."""
        if await self.wait_for(page, "leave_call", self.confirm_timeout):
            logger.info(f"✅ Joined {self.platform.value} meeting")
            return True
        logger.warning(f"⚠️ {self.platform.value}: join not confirmed")
        return False
