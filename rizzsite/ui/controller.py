"""State and actions behind the reply page.

Kept free of NiceGUI so the request cycle can be tested without a browser.
The page binds its widgets to these attributes and calls ``generate``.
"""

import logging
from typing import Protocol

from rizzsite.agent.prompts import compose_prompt
from rizzsite.models.schemas import ReplyRequest, ResponseMode

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Sorry, there was an error generating your response."


class ReplySubmitter(Protocol):
    async def submit(self, prompt: str) -> str: ...


class ReplyController:
    """Holds the page inputs and runs one reply request at a time."""

    def __init__(self, chat: ReplySubmitter) -> None:
        self._chat = chat
        self.message: str = ""
        self.interest_level: int = 5
        self.tone_level: int = 8
        self.mode: ResponseMode = ResponseMode.NEUTRAL
        self.response: str = ""
        self.loading: bool = False

    @property
    def can_generate(self) -> bool:
        return bool(self.message.strip()) and not self.loading

    def select_mode(self, mode: ResponseMode) -> None:
        self.mode = mode

    def build_request(self) -> ReplyRequest:
        return ReplyRequest(
            message=self.message,
            interest_level=int(self.interest_level),
            tone_level=int(self.tone_level),
            mode=self.mode,
        )

    async def generate(self) -> None:
        """Compose the prompt from the current inputs and fetch a reply.

        Does nothing while a request is in flight or the message is blank.
        Failures are logged and replaced by a fallback message.
        """
        if not self.can_generate:
            return

        self.loading = True
        try:
            prompt = compose_prompt(self.build_request())
            self.response = await self._chat.submit(prompt)
        except Exception as e:
            logger.exception(f"Error generating response: {e}")
            self.response = ERROR_MESSAGE
        finally:
            self.loading = False
