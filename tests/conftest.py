"""Pytest fixtures and shared test configuration.

Provides in-memory backend fakes so the adapter and controller can be
tested without a model provider.

Fixtures:
    - fake_backend: Backend that records descriptions and scripts replies
    - chat: ChatAI opened on fake_backend
    - async_client: HTTPX client for API testing
"""

import asyncio
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from rizzsite.agent.chat_ai import ChatAI
from rizzsite.api import app


class FakeSession:
    """Backend session with scripted replies.

    Each ``get_response`` pops the next scripted item: a string is returned,
    an exception is raised, and an ``asyncio.Event`` is awaited before the
    following item is used.
    """

    def __init__(self, description: str) -> None:
        self.description = description
        self.messages: list[tuple[str, str]] = []
        self.modes: list[str] = []
        self.script: list = []

    def add_message(self, role: str, text: str) -> None:
        self.messages.append((role, text))

    async def get_response(self, mode: str) -> str:
        self.modes.append(mode)
        item = self.script.pop(0)
        if isinstance(item, asyncio.Event):
            reply = self.script.pop(0)
            await item.wait()
            item = reply
        if isinstance(item, BaseException):
            raise item
        return item


class FakeBackend:
    def __init__(self) -> None:
        self.sessions: list[FakeSession] = []

    def create(self, description: str) -> FakeSession:
        session = FakeSession(description)
        self.sessions.append(session)
        return session


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def chat(fake_backend: FakeBackend) -> ChatAI:
    return ChatAI(description="test description", backend=fake_backend)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
