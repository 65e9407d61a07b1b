from __future__ import annotations

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest

from src.resources.session_manager import LOGIN_URL, SessionManager


class FakePage:
    def __init__(self):
        self.goto = AsyncMock()
        self.fill = AsyncMock()
        self.click = AsyncMock()
        self.url = "https://app.truecoach.co/client/workouts"
        self.navigation_waits = []

    @asynccontextmanager
    async def expect_navigation(self, **kwargs):
        self.navigation_waits.append(kwargs)
        yield


def test_page_before_start_raises():
    session = SessionManager("me@example.com", "secret")

    with pytest.raises(RuntimeError):
        session.page


@pytest.mark.asyncio
async def test_login_fills_form_and_waits_for_navigation():
    session = SessionManager("me@example.com", "secret")
    page = FakePage()
    session._page = page

    assert await session.login() is True

    page.goto.assert_awaited_once_with(LOGIN_URL, wait_until="networkidle")
    page.fill.assert_any_await('input[type="email"]', "me@example.com")
    page.fill.assert_any_await('input[type="password"]', "secret")
    page.click.assert_awaited_once_with('button[type="submit"]')
    assert page.navigation_waits == [{"wait_until": "networkidle"}]


@pytest.mark.asyncio
async def test_login_failure_returns_false():
    session = SessionManager("me@example.com", "secret")
    page = FakePage()
    page.goto.side_effect = TimeoutError("Timeout 30000ms exceeded")
    session._page = page

    assert await session.login() is False
    page.click.assert_not_awaited()
