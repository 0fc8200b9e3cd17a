"""Test doubles for Playwright pages and browser sessions."""
from __future__ import annotations

from typing import Callable, Iterable, Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from app.core.config import BotSettings, BrowserSettings, GoogleSettings, Settings
from app.domain.models import MeetingPlatform


class FakePage:
    """Records interactions; only selectors in ``present`` can be found."""

    def __init__(
        self,
        present: Iterable[str] = (),
        evaluate_result: object = True,
        goto_error: Optional[Exception] = None,
        url_after_goto: Optional[str] = None,
        detached: Iterable[str] = (),
    ) -> None:
        self.present = set(present)
        # Visible when waited for, gone by the time they are clicked or filled
        self.detached = set(detached)
        self.evaluate_result = evaluate_result
        self.goto_error = goto_error
        self.url_after_goto = url_after_goto
        self.url = "about:blank"
        self.actions: list[tuple] = []

    async def goto(self, url: str, wait_until: Optional[str] = None, timeout: Optional[int] = None):
        self.actions.append(("goto", url, wait_until))
        if self.goto_error is not None:
            raise self.goto_error
        self.url = self.url_after_goto or url

    async def wait_for_selector(self, selector: str, state: str = "visible", timeout: Optional[int] = None):
        self.actions.append(("wait", selector))
        if selector not in self.present:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")

    async def click(self, selector: str, timeout: Optional[int] = None):
        if selector in self.detached:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded clicking {selector}")
        self.actions.append(("click", selector))

    async def fill(self, selector: str, value: str, timeout: Optional[int] = None):
        if selector in self.detached:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded filling {selector}")
        self.actions.append(("fill", selector, value))

    async def evaluate(self, script: str):
        self.actions.append(("evaluate",))
        return self.evaluate_result

    async def wait_for_url(self, predicate: Callable[[str], bool], timeout: Optional[int] = None):
        self.actions.append(("wait_for_url", self.url))
        if not predicate(self.url):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for navigation")

    @property
    def clicked(self) -> list[str]:
        return [action[1] for action in self.actions if action[0] == "click"]

    @property
    def filled(self) -> dict[str, str]:
        return {action[1]: action[2] for action in self.actions if action[0] == "fill"}


class FakeSession:
    def __init__(self, page: FakePage) -> None:
        self.page = page
        self.closed = False
        self.close_calls = 0

    async def close(self) -> None:
        self.close_calls += 1
        self.closed = True


class FakeLauncher:
    """Hands out fake sessions and remembers every one of them."""

    def __init__(self, page_factory: Callable[[], FakePage] = FakePage, error: Optional[Exception] = None) -> None:
        self.page_factory = page_factory
        self.error = error
        self.sessions: list[FakeSession] = []

    async def open_session(self) -> FakeSession:
        if self.error is not None:
            raise self.error
        session = FakeSession(self.page_factory())
        self.sessions.append(session)
        return session


class StubHandler:
    """Join strategy returning a fixed result or raising."""

    def __init__(self, platform: MeetingPlatform, result: bool = True, error: Optional[Exception] = None) -> None:
        self.platform = platform
        self.result = result
        self.error = error
        self.calls: list[tuple] = []

    async def join(self, page, link: str) -> bool:
        self.calls.append((page, link))
        if self.error is not None:
            raise self.error
        return self.result


SUPPORTED_PLATFORMS = [
    MeetingPlatform.GOOGLE_MEET,
    MeetingPlatform.ZOOM,
    MeetingPlatform.JITSI,
    MeetingPlatform.TEAMS,
    MeetingPlatform.WEBEX,
]


def stub_handlers(result: bool = True, error: Optional[Exception] = None) -> dict:
    return {platform: StubHandler(platform, result=result, error=error) for platform in SUPPORTED_PLATFORMS}


SECRET = "test-secret"


def build_settings(**overrides) -> Settings:
    """Settings that never touch a real browser or wait noticeably."""
    values = dict(
        secret=SECRET,
        stay_duration=0,
        log_to_file=False,
        google=GoogleSettings(email=None, password=None),
        browser=BrowserSettings(executable_path=None, auto_install=False),
        bot=BotSettings(
            name="Test Bot",
            step_timeout=10,
            optional_step_timeout=10,
            confirm_timeout=10,
            jitsi_settle=0,
        ),
    )
    values.update(overrides)
    return Settings(**values)
