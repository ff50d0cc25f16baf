"""Runtime settings read from the environment.

``AgentConfig`` holds what the reply backend needs to reach a model:
an OpenAI key (or any OpenAI-compatible provider through ``LLM_BASE_URL``),
the model id and sampling limits. ``ServerConfig`` holds what the entry
point needs to serve the page.

Both read ``.env`` through python-dotenv on import. Values from the
environment go through the same validators as explicit arguments.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env(*names: str, default: str | None = None) -> str | None:
    """Return the first of ``names`` set to a non-empty value."""
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


class AgentConfig(BaseModel):
    """Model settings for the reply backend.

    Attributes:
        api_key: Provider key, from LLM_API_KEY or else OPENAI_API_KEY.
        base_url: Provider URL from LLM_BASE_URL. None means OpenAI.
        model_name: Model id from LLM_MODEL.
        temperature: Sampling temperature. Replies lean playful, so the
            default sits high.
        max_tokens: Upper bound on a single reply.
    """

    api_key: str = Field(
        default_factory=lambda: _env("LLM_API_KEY", "OPENAI_API_KEY", default=""),
        validate_default=True,
    )
    base_url: str | None = Field(default_factory=lambda: _env("LLM_BASE_URL"))
    model_name: str = Field(
        default_factory=lambda: _env("LLM_MODEL", default="gpt-4o-mini")
    )
    temperature: float = Field(default=0.9, ge=0.0, le=2.0)
    max_tokens: int = Field(default=512, ge=1, le=128000)

    @field_validator("api_key")
    @classmethod
    def require_api_key(cls, v: str) -> str:
        key = v.strip()
        if not key:
            raise ValueError("API key required. Set LLM_API_KEY or OPENAI_API_KEY in .env")
        return key


class ServerConfig(BaseModel):
    """Where and how the page is served."""

    host: str = Field(default_factory=lambda: _env("HOST", default="0.0.0.0"))
    port: int = Field(
        default_factory=lambda: _env("PORT", default="8000"),
        ge=1,
        le=65535,
        validate_default=True,
    )
    log_level: str = Field(
        default_factory=lambda: _env("LOG_LEVEL", default="INFO"),
        validate_default=True,
    )
    storage_secret: str = Field(
        default_factory=lambda: _env("NICEGUI_STORAGE_SECRET", default="rizzsite-secret")
    )

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level


def get_agent_config() -> AgentConfig:
    """Build the model settings from the environment.

    Raises:
        ValidationError: If no API key is set or a value is out of range.
    """
    return AgentConfig()


def get_server_config() -> ServerConfig:
    """Build the server settings from the environment.

    Raises:
        ValidationError: If PORT or LOG_LEVEL is invalid.
    """
    return ServerConfig()
