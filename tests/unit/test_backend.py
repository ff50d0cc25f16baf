"""Unit tests for AgnoBackend and its sessions.

Agno's Agent and OpenAIChat are patched, so no model provider is contacted.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from agno.run.base import RunStatus

from rizzsite.agent.backend import (
    AgnoBackend,
    AgnoBackendSession,
    BackendRequestError,
)
from rizzsite.agent.chat_ai import ChatAI
from rizzsite.agent.config import AgentConfig


@pytest.fixture
def config() -> AgentConfig:
    return AgentConfig(
        api_key="sk-test-key",
        base_url=None,
        model_name="gpt-4o-mini",
        temperature=0.9,
        max_tokens=512,
    )


def make_session(reply: object = None, error: Exception | None = None) -> AgnoBackendSession:
    agent = MagicMock()
    if error is not None:
        agent.arun = AsyncMock(side_effect=error)
    else:
        agent.arun = AsyncMock(return_value=MagicMock(content=reply))
    return AgnoBackendSession(agent)


class TestAgnoBackendInit:
    """Tests for AgnoBackend initialization."""

    @patch("rizzsite.agent.backend.OpenAIChat")
    def test_model_created_from_config(
        self, mock_openai_chat: MagicMock, config: AgentConfig
    ) -> None:
        """AgnoBackend passes config values to OpenAIChat."""
        AgnoBackend(config=config)

        mock_openai_chat.assert_called_once_with(
            id="gpt-4o-mini",
            api_key="sk-test-key",
            base_url=None,
            temperature=0.9,
            max_tokens=512,
        )

    @patch("rizzsite.agent.backend.OpenAIChat")
    @patch("rizzsite.agent.backend.Agent")
    def test_create_builds_agent_with_description(
        self,
        mock_agent_class: MagicMock,
        mock_openai_chat: MagicMock,
        config: AgentConfig,
    ) -> None:
        """Each session gets an agent bound to its description."""
        backend = AgnoBackend(config=config)

        session = backend.create("be charming")

        call_kwargs = mock_agent_class.call_args.kwargs
        assert call_kwargs["model"] is mock_openai_chat.return_value
        assert call_kwargs["description"] == "be charming"
        assert call_kwargs["markdown"] is False
        assert isinstance(session, AgnoBackendSession)
        assert session.message_count == 0

    @patch("rizzsite.agent.backend.OpenAIChat")
    @patch("rizzsite.agent.backend.Agent")
    def test_sessions_are_independent(
        self,
        mock_agent_class: MagicMock,
        mock_openai_chat: MagicMock,
        config: AgentConfig,
    ) -> None:
        """Two sessions never share message memory."""
        backend = AgnoBackend(config=config)

        first = backend.create("one")
        second = backend.create("two")
        first.add_message("user", "hi")

        assert first.message_count == 1
        assert second.message_count == 0
        assert mock_agent_class.call_count == 2


class TestAgnoBackendSession:
    """Tests for message recording and reply requests."""

    async def test_sends_full_history(self) -> None:
        """The agent receives every recorded message in order."""
        session = make_session(reply="sounds fun")
        session.add_message("user", "first")
        session.add_message("assistant", "answer")
        session.add_message("user", "second")

        result = await session.get_response("classify")

        assert result == "sounds fun"
        sent = session._agent.arun.call_args.args[0]
        assert [(m.role, m.content) for m in sent] == [
            ("user", "first"),
            ("assistant", "answer"),
            ("user", "second"),
        ]

    async def test_reply_not_recorded_by_session(self) -> None:
        """Recording the reply is left to the caller."""
        session = make_session(reply="hello")
        session.add_message("user", "hi")

        await session.get_response("classify")

        assert session.message_count == 1

    def test_rejects_unknown_role(self) -> None:
        """Roles other than user and assistant are refused."""
        session = make_session(reply="x")

        with pytest.raises(ValueError, match="Unsupported message role"):
            session.add_message("system", "nope")  # type: ignore[arg-type]

    async def test_model_error_wrapped(self) -> None:
        """Provider exceptions surface as BackendRequestError."""
        cause = RuntimeError("rate limited")
        session = make_session(error=cause)
        session.add_message("user", "hi")

        with pytest.raises(BackendRequestError, match="rate limited") as exc_info:
            await session.get_response("classify")

        assert exc_info.value.__cause__ is cause

    @pytest.mark.parametrize("content", [None, "", 42])
    async def test_missing_content_is_an_error(self, content: object) -> None:
        """A reply without text content is treated as a failed request."""
        session = make_session(reply=content)
        session.add_message("user", "hi")

        with pytest.raises(BackendRequestError, match="empty reply"):
            await session.get_response("classify")

    async def test_errored_run_is_an_error(self) -> None:
        """An errored run surfaces as BackendRequestError, not as reply text."""
        agent = MagicMock()
        agent.arun = AsyncMock(
            return_value=MagicMock(content="Connection error.", status=RunStatus.error)
        )
        session = AgnoBackendSession(agent)
        session.add_message("user", "hi")

        with pytest.raises(BackendRequestError, match="Connection error"):
            await session.get_response("classify")

    async def test_completed_run_returns_content(self) -> None:
        agent = MagicMock()
        agent.arun = AsyncMock(
            return_value=MagicMock(content="sure thing", status=RunStatus.completed)
        )
        session = AgnoBackendSession(agent)
        session.add_message("user", "hi")

        assert await session.get_response("classify") == "sure thing"


class TestChatAIOnAgno:
    """ChatAI over a real AgnoBackendSession with a patched agent."""

    @patch("rizzsite.agent.backend.OpenAIChat")
    @patch("rizzsite.agent.backend.Agent")
    async def test_errored_run_propagates_and_leaves_user_turn(
        self,
        mock_agent_class: MagicMock,
        mock_openai_chat: MagicMock,
        config: AgentConfig,
    ) -> None:
        """The error text never becomes an assistant turn."""
        mock_agent_class.return_value.arun = AsyncMock(
            return_value=MagicMock(content="Connection error.", status=RunStatus.error)
        )
        chat = ChatAI(description="d", backend=AgnoBackend(config=config))

        with pytest.raises(BackendRequestError):
            await chat.submit("hello")

        assert [(t.role, t.text) for t in chat.history] == [("user", "hello")]


class TestGetBackend:
    """Tests for get_backend singleton function."""

    def test_singleton_returns_same_instance(self) -> None:
        """get_backend returns the same instance on multiple calls."""
        import rizzsite.agent.backend as backend_module

        # Reset singleton
        backend_module._backend = None

        try:
            with patch.object(backend_module, "AgnoBackend") as mock_backend:
                mock_backend.return_value = MagicMock()

                first = backend_module.get_backend()
                second = backend_module.get_backend()

                assert first is second
                mock_backend.assert_called_once()
        finally:
            backend_module._backend = None
