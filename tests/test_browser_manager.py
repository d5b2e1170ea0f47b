"""Search-scoped browser sessions without launching a real browser"""

import pytest

from fakes import FakeContext
from jobfeed.browser.manager import BrowserManager
from jobfeed.browser import user_agent
from jobfeed.browser.user_agent import UserAgentProvider


@pytest.fixture
def fake_lifecycle(monkeypatch):
    calls = {"started": 0, "closed": 0}
    shared = FakeContext(responses=[])

    async def get_context():
        if BrowserManager._context is None:
            calls["started"] += 1
            BrowserManager._context = shared
        return BrowserManager._context

    async def close():
        calls["closed"] += 1
        BrowserManager._context = None

    monkeypatch.setattr(BrowserManager, "_context", None)
    monkeypatch.setattr(BrowserManager, "get_context", get_context)
    monkeypatch.setattr(BrowserManager, "close", close)
    calls["shared"] = shared
    return calls


@pytest.mark.asyncio
async def test_injected_context_is_left_open(fake_lifecycle):
    injected = FakeContext(responses=[])

    async with BrowserManager.session(injected) as context:
        assert context is injected

    assert fake_lifecycle["started"] == 0
    assert fake_lifecycle["closed"] == 0


@pytest.mark.asyncio
async def test_session_closes_browser_it_started(fake_lifecycle):
    async with BrowserManager.session() as context:
        assert context is fake_lifecycle["shared"]

    assert fake_lifecycle["started"] == 1
    assert fake_lifecycle["closed"] == 1
    assert not BrowserManager.is_running()


@pytest.mark.asyncio
async def test_session_closes_on_error(fake_lifecycle):
    with pytest.raises(RuntimeError):
        async with BrowserManager.session():
            raise RuntimeError("boom")

    assert fake_lifecycle["closed"] == 1


@pytest.mark.asyncio
async def test_session_reuses_running_browser(fake_lifecycle):
    running = FakeContext(responses=[])
    BrowserManager._context = running

    async with BrowserManager.session() as context:
        assert context is running

    assert fake_lifecycle["started"] == 0
    assert fake_lifecycle["closed"] == 0
    assert BrowserManager.is_running()


def test_configured_user_agent_wins(monkeypatch):
    monkeypatch.setattr(user_agent.settings, "USER_AGENT", "jobfeed-test/1.0")

    assert UserAgentProvider.get_random() == "jobfeed-test/1.0"


def test_fallback_user_agent_without_provider(monkeypatch):
    monkeypatch.setattr(user_agent.settings, "USER_AGENT", None)
    monkeypatch.setattr(UserAgentProvider, "_ua", None)

    assert UserAgentProvider.get_random() == user_agent.FALLBACK_UA
