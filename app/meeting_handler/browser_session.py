"""
Playwright browser sessions.

Every join request gets its own Playwright driver, Chromium process,
context and page, bundled as a ``BrowserSession`` that the caller must
close.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from app.core.config import BrowserSettings
from app.core.exceptions import BrowserProvisioningError
from app.core.logging import get_logger


logger = get_logger("browser_session")


class BrowserSession:
    """One browser process and page, owned by a single request."""

    def __init__(
        self,
        playwright: Playwright,
        browser: Browser,
        context: BrowserContext,
        page: Page,
    ) -> None:
        self._playwright: Optional[Playwright] = playwright
        self._browser: Optional[Browser] = browser
        self._context: Optional[BrowserContext] = context
        self.page = page

    @property
    def is_open(self) -> bool:
        return self._playwright is not None

    async def close(self) -> None:
        """
        Close the context, browser and Playwright driver.
        """
        try:
            if self._context is not None:
                await self._context.close()
        finally:
            self._context = None
            try:
                if self._browser is not None:
                    await self._browser.close()
            finally:
                self._browser = None
                try:
                    if self._playwright is not None:
                        await self._playwright.stop()
                finally:
                    self._playwright = None
        logger.info("Browser session closed.")


class ChromiumProvisioner:
    """
    Resolves the Chromium binary to launch.

    A configured executable must exist. Otherwise Playwright's bundled
    Chromium is used, installed on first use when auto-install is enabled.
    """

    def __init__(self, settings: BrowserSettings) -> None:
        self._settings = settings
        self._install_lock = asyncio.Lock()

    async def resolve_executable(self, playwright: Playwright) -> Optional[str]:
        """
        Returns:
            Path to a custom binary, or None to use the bundled Chromium.
        """
        if self._settings.executable_path:
            if Path(self._settings.executable_path).exists():
                return self._settings.executable_path
            raise BrowserProvisioningError(
                f"Chrome binary not found at {self._settings.executable_path}"
            )

        bundled = Path(playwright.chromium.executable_path)
        if bundled.exists():
            return None

        if not self._settings.auto_install:
            raise BrowserProvisioningError(
                "Chromium is not installed and BROWSER_AUTO_INSTALL is disabled."
            )

        async with self._install_lock:
            if not bundled.exists():
                await self._install()

        if not bundled.exists():
            raise BrowserProvisioningError("❌ Chromium installation failed.")
        logger.info("✅ Chromium installed.")
        return None

    async def _install(self) -> None:
        logger.info("⬇️ Downloading Chromium at runtime...")
        process = await asyncio.create_subprocess_exec(
            sys.executable, "-m", "playwright", "install", "chromium",
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
        output, _ = await process.communicate()
        if process.returncode != 0:
            raise BrowserProvisioningError(
                f"Chromium installation failed: {output.decode(errors='replace').strip()}"
            )


class PlaywrightBrowserLauncher:
    """
    Launches a fresh headless Chromium per session.

    Usage pattern:
        session = await launcher.open_session()
        try:
            await session.page.goto(url)
        finally:
            await session.close()
    """

    CHROMIUM_ARGS = [
        "--no-sandbox",
        "--disable-setuid-sandbox",
        "--use-fake-ui-for-media-stream",  # Auto-accept mic/camera prompts
        "--disable-blink-features=AutomationControlled",
    ]

    def __init__(self, settings: BrowserSettings, provisioner: Optional[ChromiumProvisioner] = None) -> None:
        self._settings = settings
        self._provisioner = provisioner or ChromiumProvisioner(settings)

    async def open_session(self) -> BrowserSession:
        logger.info("Launching Chromium...")
        playwright = await async_playwright().start()
        try:
            executable_path = await self._provisioner.resolve_executable(playwright)
            browser = await playwright.chromium.launch(
                headless=self._settings.headless,
                executable_path=executable_path,
                args=self.CHROMIUM_ARGS,
            )
            context = await browser.new_context(
                viewport={
                    "width": self._settings.viewport_width,
                    "height": self._settings.viewport_height,
                },
                permissions=["microphone", "camera"],
                ignore_https_errors=True,
            )
            page = await context.new_page()
        except Exception:
            await playwright.stop()
            raise

        logger.info("Chromium launched.")
        return BrowserSession(playwright, browser, context, page)
