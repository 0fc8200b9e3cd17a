"""
Meeting join request handling.

Validates a join request, runs the platform strategy in a browser session
that lives only for this request, stays in the meeting for the configured
duration and closes the browser on every path.
"""

import asyncio
import secrets
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from app.core.config import Settings
from app.core.exceptions import (
    AuthorizationError,
    AutomationError,
    InvalidRequestError,
    JoinBotException,
    SessionLimitError,
    UnsupportedPlatformError,
)
from app.core.logging import get_logger
from app.domain.models import JoinOutcome, MeetingPlatform
from app.meeting_handler import (
    BrowserSession,
    MeetingOrchestrator,
    PlaywrightBrowserLauncher,
    detect_platform,
)

logger = get_logger("join_service")


class MeetingJoinService:
    """
    Handles join requests.

    At most ``max_concurrent_sessions`` browsers run at once; further
    requests wait up to ``admission_timeout`` seconds for a free slot.
    """

    def __init__(
        self,
        settings: Settings,
        launcher: Optional[PlaywrightBrowserLauncher] = None,
        orchestrator: Optional[MeetingOrchestrator] = None,
    ):
        self._settings = settings
        self._launcher = launcher or PlaywrightBrowserLauncher(settings.browser)
        self._orchestrator = orchestrator or MeetingOrchestrator(settings)
        self._slots = asyncio.Semaphore(settings.max_concurrent_sessions)

    async def handle_join(self, link: Optional[str], token: Optional[str]) -> JoinOutcome:
        """
        Join the meeting behind ``link``.

        Raises:
            AuthorizationError: token does not match the shared secret
            InvalidRequestError: link missing or not http(s)
            UnsupportedPlatformError: link belongs to no supported platform
            SessionLimitError: no browser slot freed up in time
            AutomationError: the browser or a join step failed
        """
        self._authorize(token)
        self._validate_link(link)

        platform = detect_platform(link)
        logger.info(f"🔍 Detected platform: {platform.value}")
        if not self._orchestrator.supports(platform):
            raise UnsupportedPlatformError(f"Platform {platform.value} not supported yet.")

        async with self._admission():
            joined = await self._run_session(link, platform)

        return JoinOutcome(platform=platform, joined=joined, link=link)

    def _authorize(self, token: Optional[str]) -> None:
        secret = self._settings.secret
        if not secret or token is None or not secrets.compare_digest(token.encode(), secret.encode()):
            logger.warning("Rejected join request with invalid token")
            raise AuthorizationError("Unauthorized")

    @staticmethod
    def _validate_link(link: Optional[str]) -> None:
        if not link or not link.startswith("http"):
            raise InvalidRequestError("Invalid or missing meeting link")

    @asynccontextmanager
    async def _admission(self) -> AsyncIterator[None]:
        try:
            async with asyncio.timeout(self._settings.admission_timeout):
                await self._slots.acquire()
        except TimeoutError:
            logger.warning("No browser slot available, rejecting join request")
            raise SessionLimitError("Too many meetings in progress, try again later.") from None
        try:
            yield
        finally:
            self._slots.release()

    async def _open_session(self) -> BrowserSession:
        try:
            return await self._launcher.open_session()
        except JoinBotException:
            raise
        except Exception as exc:
            logger.error(f"❌ Failed to launch browser: {exc}")
            raise AutomationError(str(exc)) from exc

    async def _run_session(self, link: str, platform: MeetingPlatform) -> bool:
        session = await self._open_session()
        try:
            joined = await self._orchestrator.join_meeting(session.page, link, platform)

            logger.info(f"Staying in {platform.value} meeting for {self._settings.stay_duration}ms")
            await asyncio.sleep(self._settings.stay_seconds)
            return joined
        except JoinBotException:
            raise
        except Exception as exc:
            logger.error(f"❌ Error: {exc}")
            raise AutomationError(str(exc)) from exc
        finally:
            try:
                await session.close()
            except Exception as exc:
                logger.warning(f"Error while closing browser session: {exc}")
