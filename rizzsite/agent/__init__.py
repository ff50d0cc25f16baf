"""Conversation adapter and the model backend behind it.

Responsibilities:
    - ChatAI: one conversation, append-only turn history, submit/reply cycle
    - Backend protocols: the only three calls the adapter makes
    - AgnoBackend: Agno agent sessions on an OpenAI-compatible model
    - Configuration loaded from the environment

Maintains clean separation from the UI layer.
"""

from rizzsite.agent.backend import (
    AgnoBackend,
    Backend,
    BackendConstructionError,
    BackendError,
    BackendRequestError,
    BackendSession,
    get_backend,
)
from rizzsite.agent.chat_ai import RESPONSE_MODE, ChatAI, SerialChatAI
from rizzsite.agent.config import (
    AgentConfig,
    ServerConfig,
    get_agent_config,
    get_server_config,
)
from rizzsite.agent.prompts import AI_BEHAVIOR_DESCRIPTION, compose_prompt

__all__ = [
    "AI_BEHAVIOR_DESCRIPTION",
    "RESPONSE_MODE",
    "AgentConfig",
    "AgnoBackend",
    "Backend",
    "BackendConstructionError",
    "BackendError",
    "BackendRequestError",
    "BackendSession",
    "ChatAI",
    "SerialChatAI",
    "ServerConfig",
    "compose_prompt",
    "get_agent_config",
    "get_backend",
    "get_server_config",
]
