"""Conversation adapter between the reply page and a chat backend.

``ChatAI`` owns exactly one backend session and one append-only history of
turns. Every ``submit`` records the user turn before the round-trip and the
assistant turn after it, so a failed round-trip leaves the user turn in place
with nothing after it. Errors are never caught here.

Overlapping ``submit`` calls are allowed. Their user turns land in call order,
their assistant turns in completion order. Callers that need the pairs to stay
adjacent either await each call or go through ``SerialChatAI``.
"""

import asyncio

from rizzsite.agent.backend import (
    Backend,
    BackendConstructionError,
    BackendSession,
    get_backend,
)
from rizzsite.agent.prompts import AI_BEHAVIOR_DESCRIPTION
from rizzsite.models.schemas import Turn

# Fixed selector passed on every reply request
RESPONSE_MODE = "classify"


class ChatAI:
    """Keeps one conversation with a backend and remembers every turn.

    Usage:
        chat = ChatAI()
        answer = await chat.submit("Hey, how's it going?")
    """

    def __init__(
        self,
        description: str = AI_BEHAVIOR_DESCRIPTION,
        backend: Backend | None = None,
    ) -> None:
        """Open the backend session for this conversation.

        Args:
            description: How the backend should behave. Fixed for the
                lifetime of this instance.
            backend: Backend to open the session on. Uses the process
                default when not provided.

        Raises:
            BackendConstructionError: If the session could not be created.
        """
        self._description = description
        self._turns: list[Turn] = []
        try:
            backend = backend if backend is not None else get_backend()
            self._session: BackendSession = backend.create(description)
        except BackendConstructionError:
            raise
        except Exception as e:
            raise BackendConstructionError(f"Could not create backend session: {e}") from e

    @property
    def description(self) -> str:
        return self._description

    @property
    def history(self) -> tuple[Turn, ...]:
        """Snapshot of the conversation so far, oldest turn first."""
        return tuple(self._turns)

    async def submit(self, prompt: str) -> str:
        """Send a prompt and return the backend's reply unmodified.

        Args:
            prompt: Fully composed prompt text.

        Returns:
            The reply text exactly as the backend produced it.
        """
        self._record("user", prompt)

        response = await self._session.get_response(RESPONSE_MODE)

        self._record("assistant", response)
        return response

    def _record(self, role: str, text: str) -> None:
        self._turns.append(Turn(role=role, text=text))
        self._session.add_message(role, text)


class SerialChatAI:
    """Runs ``submit`` calls on a ChatAI one at a time, in call order.

    Keeps each user turn directly followed by its assistant turn even when
    the caller fires requests without awaiting the previous one.
    """

    def __init__(self, chat: ChatAI) -> None:
        self._chat = chat
        self._lock = asyncio.Lock()

    @property
    def history(self) -> tuple[Turn, ...]:
        return self._chat.history

    async def submit(self, prompt: str) -> str:
        async with self._lock:
            return await self._chat.submit(prompt)
