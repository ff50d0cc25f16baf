"""Backend protocols and the Agno-powered implementation.

The conversation adapter only ever talks to a backend through three calls:

1. ``Backend.create(description)`` - open a session bound to a fixed
   behavior description.
2. ``BackendSession.add_message(role, text)`` - record a turn in the
   session's own memory.
3. ``BackendSession.get_response(mode)`` - ask for a generated reply.

Anything else a concrete backend does stays behind these protocols, so the
adapter can be exercised against fakes and the model provider can be
swapped without touching it.

``AgnoBackend`` is the production implementation. Each session gets its own
Agno ``Agent`` carrying the description, and the full message list is sent
with every request. The agent has no storage attached: the session object is
the only memory, and it lives exactly as long as the adapter that owns it.
"""

import logging
from typing import Literal, Protocol

from agno.agent import Agent
from agno.models.message import Message
from agno.models.openai import OpenAIChat
from agno.run.base import RunStatus

from rizzsite.agent.config import AgentConfig, get_agent_config

logger = logging.getLogger(__name__)

Role = Literal["user", "assistant"]

_ROLES = ("user", "assistant")


class BackendError(Exception):
    """Base class for backend failures."""

    pass


class BackendConstructionError(BackendError):
    """Raised when a backend session cannot be created."""

    pass


class BackendRequestError(BackendError):
    """Raised when a reply round-trip fails or returns no text."""

    pass


class BackendSession(Protocol):
    def add_message(self, role: Role, text: str) -> None: ...

    async def get_response(self, mode: str) -> str: ...


class Backend(Protocol):
    def create(self, description: str) -> BackendSession: ...


class AgnoBackendSession:
    """One conversation held against an Agno agent."""

    def __init__(self, agent: Agent) -> None:
        self._agent = agent
        self._messages: list[Message] = []

    @property
    def message_count(self) -> int:
        return len(self._messages)

    def add_message(self, role: Role, text: str) -> None:
        """Record a turn in this session's memory.

        Args:
            role: 'user' or 'assistant'.
            text: Message content.

        Raises:
            ValueError: If role is not one of the supported roles.
        """
        if role not in _ROLES:
            raise ValueError(f"Unsupported message role: {role!r}")
        self._messages.append(Message(role=role, content=text))

    async def get_response(self, mode: str) -> str:
        """Request a generated reply for the conversation so far.

        Args:
            mode: Response selector supplied by the caller. Only logged,
                the agent's behavior comes from its description.

        Returns:
            Reply text exactly as produced by the model.

        Raises:
            BackendRequestError: If the model call fails or returns no text.
        """
        logger.debug(f"Requesting reply (mode={mode}, messages={len(self._messages)})")

        try:
            response = await self._agent.arun(list(self._messages))
        except Exception as e:
            logger.error(f"Reply request failed: {e}")
            raise BackendRequestError(f"Reply request failed: {e}") from e

        content = getattr(response, "content", None)
        # Agno reports provider failures as an errored run, not an exception
        if getattr(response, "status", None) == RunStatus.error:
            logger.error(f"Reply request failed: {content}")
            raise BackendRequestError(f"Reply request failed: {content}")
        if not isinstance(content, str) or not content:
            raise BackendRequestError("Model returned an empty reply")

        return content


class AgnoBackend:
    """Backend that opens Agno agent sessions on an OpenAI-compatible model.

    Wraps Agno with:
    - One shared model configuration for every session
    - A fresh agent per session carrying that session's description
    - Typed errors instead of provider-specific exceptions
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the backend.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._model = self._create_model()

    def _create_model(self) -> OpenAIChat:
        return OpenAIChat(
            id=self._config.model_name,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

    def create(self, description: str) -> AgnoBackendSession:
        """Open a session whose agent behaves as described.

        Args:
            description: Behavior description, fixed for the session.

        Returns:
            A new, empty session.
        """
        agent = Agent(
            model=self._model,
            description=description,
            # Plain text: the page shows replies verbatim
            markdown=False,
        )
        logger.info(f"Opened backend session on model {self._config.model_name}")
        return AgnoBackendSession(agent)


# Module-level singleton instance
_backend: Backend | None = None


def get_backend() -> Backend:
    """Get or create the process-wide default backend.

    Sessions are never shared; only the model configuration is.

    Returns:
        The default Backend instance.
    """
    global _backend
    if _backend is None:
        _backend = AgnoBackend()
    return _backend
