from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Turn(BaseModel):
    """One role-tagged message in a conversation.

    Attributes:
        role: Who produced the message, 'user' or 'assistant'.
        text: The message text, stored exactly as sent or received.
    """

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    text: str


class ResponseMode(str, Enum):
    """Response styles offered in the style grid."""

    CONTINUE = "CONTINUE"
    END = "END"
    NEUTRAL = "NEUTRAL"
    PLAYFUL = "PLAYFUL"
    SERIOUS = "SERIOUS"
    FLIRTY = "FLIRTY"
    MYSTERIOUS = "MYSTERIOUS"
    WITTY = "WITTY"
    CARING = "CARING"
    COOL = "COOL"

    @property
    def label(self) -> str:
        return _MODE_DISPLAY[self][0]

    @property
    def description(self) -> str:
        return _MODE_DISPLAY[self][1]


# Grid label and caption per mode, in display order
_MODE_DISPLAY: dict[ResponseMode, tuple[str, str]] = {
    ResponseMode.CONTINUE: ("💭 Continue", "Keep the conversation flowing naturally"),
    ResponseMode.END: ("👋 End", "Gracefully conclude the chat"),
    ResponseMode.NEUTRAL: ("😊 Neutral", "Balanced and matching tone"),
    ResponseMode.PLAYFUL: ("😏 Casual", "Light and fun response"),
    ResponseMode.SERIOUS: ("💫 Genuine", "Thoughtful and authentic"),
    ResponseMode.FLIRTY: ("💝 Flirty", "Subtly flirtatious tone"),
    ResponseMode.MYSTERIOUS: ("🌙 Mysterious", "Intriguing and enigmatic"),
    ResponseMode.WITTY: ("✨ Witty", "Clever and humorous"),
    ResponseMode.CARING: ("🤗 Caring", "Warm and supportive"),
    ResponseMode.COOL: ("😎 Cool", "Relaxed and confident"),
}

MIN_LEVEL = 1
MAX_LEVEL = 10


class ReplyRequest(BaseModel):
    """Inputs collected by the reply page for one generation.

    Attributes:
        message: The message the user received and wants to answer.
        interest_level: Engagement from 1 (reserved) to 10 (very engaged).
        tone_level: Formality from 1 (casual) to 10 (professional).
        mode: Response style selected in the grid.
    """

    message: str = Field(..., min_length=1)
    interest_level: int = Field(default=5, ge=MIN_LEVEL, le=MAX_LEVEL)
    tone_level: int = Field(default=8, ge=MIN_LEVEL, le=MAX_LEVEL)
    mode: ResponseMode = ResponseMode.NEUTRAL

    @field_validator("message")
    @classmethod
    def require_text(cls, v: str) -> str:
        """Reject whitespace-only messages. The text itself is kept as typed."""
        if not v.strip():
            raise ValueError("message must contain non-whitespace text")
        return v
