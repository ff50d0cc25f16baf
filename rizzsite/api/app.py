"""FastAPI shell that serves the reply page.

The page talks to the reply backend in-process, so the only route of our
own is ``/health``. NiceGUI is mounted on the same app by ``mount_ui``.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rizzsite import __version__
from rizzsite.agent.config import ServerConfig

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    logger.info(f"RizzSite {__version__} up")
    yield
    logger.info("RizzSite stopped")


def create_app() -> FastAPI:
    """Build the FastAPI app with the health route.

    Returns:
        A new FastAPI instance. The reply page is not mounted yet.
    """
    application = FastAPI(
        title="RizzSite",
        description="Tone-aware reply suggestions for messages you received.",
        version=__version__,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "service": "rizzsite", "version": __version__}

    return application


def mount_ui(application: FastAPI, server: ServerConfig) -> None:
    """Register the reply page and mount NiceGUI onto ``application``."""
    from nicegui import ui

    from rizzsite.ui.reply_page import reply_page  # noqa: F401 - registers "/"

    ui.run_with(
        application,
        title="RizzSite",
        favicon="✨",
        storage_secret=server.storage_secret,
    )


app = create_app()
