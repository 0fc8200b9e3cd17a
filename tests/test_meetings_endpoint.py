"""HTTP tests for /join-meeting and /health."""
from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from app.domain.models import MeetingPlatform
from app.domain.services import MeetingJoinService
from app.main import create_app
from app.meeting_handler import MeetingOrchestrator
from app.meeting_handler.platform_scripts import get_selector

from fakes import SECRET, FakeLauncher, FakePage, build_settings, stub_handlers


def make_app(page_factory=FakePage, handlers=None, **settings_overrides):
    settings = build_settings(**settings_overrides)
    launcher = FakeLauncher(page_factory=page_factory)
    orchestrator = MeetingOrchestrator(settings, handlers=handlers)
    service = MeetingJoinService(settings, launcher=launcher, orchestrator=orchestrator)
    return create_app(settings, join_service=service), launcher


async def post_join(app, payload=None, **kwargs):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        return await client.post("/join-meeting", json=payload, **kwargs)


@pytest.mark.asyncio
async def test_bad_token_returns_403():
    app, launcher = make_app()

    response = await post_join(app, {"link": "https://meet.google.com/abc", "token": "nope"})

    assert response.status_code == 403
    assert response.json() == {"error": "Unauthorized"}
    assert launcher.sessions == []


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"token": SECRET}, {"link": "ftp://example.com", "token": SECRET}])
async def test_bad_link_returns_400(payload):
    app, launcher = make_app()

    response = await post_join(app, payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid or missing meeting link"}
    assert launcher.sessions == []


@pytest.mark.asyncio
async def test_malformed_body_returns_400():
    app, launcher = make_app()

    response = await post_join(app, content=b"not json", headers={"content-type": "application/json"})

    assert response.status_code == 400
    assert "error" in response.json()
    assert launcher.sessions == []


@pytest.mark.asyncio
async def test_unknown_platform_returns_500():
    app, launcher = make_app()

    response = await post_join(app, {"link": "https://unknownservice.com/x", "token": SECRET})

    assert response.status_code == 500
    assert response.json() == {"error": "Platform Unknown not supported yet."}


@pytest.mark.asyncio
async def test_google_meet_join_without_credentials():
    meet = MeetingPlatform.GOOGLE_MEET
    pages = []

    def page_factory():
        page = FakePage(present=[get_selector(meet, "button"), get_selector(meet, "leave_call")])
        pages.append(page)
        return page

    app, launcher = make_app(page_factory=page_factory)

    response = await post_join(app, {"link": "https://meet.google.com/abc-defg-hij", "token": SECRET})

    assert response.status_code == 200
    body = response.json()
    assert body["platform"] == "Google Meet"
    assert body["joined"] is True
    assert body["status"] == "joined"
    assert body["link"] == "https://meet.google.com/abc-defg-hij"
    assert "timestamp" in body
    assert ("evaluate",) in pages[0].actions
    assert pages[0].filled == {}
    assert [s.close_calls for s in launcher.sessions] == [1]


@pytest.mark.asyncio
async def test_zoom_without_browser_link_returns_not_joined():
    app, launcher = make_app()

    response = await post_join(app, {"link": "https://zoom.us/j/123", "token": SECRET})

    assert response.status_code == 200
    body = response.json()
    assert body["platform"] == "Zoom"
    assert body["joined"] is False
    assert body["status"] == "not_joined"
    assert [s.close_calls for s in launcher.sessions] == [1]


@pytest.mark.asyncio
async def test_automation_failure_returns_500_with_message():
    app, launcher = make_app(handlers=stub_handlers(error=RuntimeError("Target closed")))

    response = await post_join(app, {"link": "https://acme.webex.com/meet/x", "token": SECRET})

    assert response.status_code == 500
    assert response.json() == {"error": "Target closed"}
    assert [s.close_calls for s in launcher.sessions] == [1]


@pytest.mark.asyncio
async def test_health_endpoint():
    app, _ = make_app()
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["version"] == "1.0.0"
