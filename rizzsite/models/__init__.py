"""Pydantic models shared by the adapter and the UI.

Models:
    - Turn: Immutable role-tagged message in the conversation history
    - ResponseMode: Closed set of response styles shown in the style grid
    - ReplyRequest: Message, slider levels and style for one generation
"""

from rizzsite.models.schemas import ReplyRequest, ResponseMode, Turn

__all__ = ["ReplyRequest", "ResponseMode", "Turn"]
