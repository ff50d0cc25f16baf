"""Entry point: FastAPI and the NiceGUI reply page on one uvicorn server."""

import logging
import sys

from rizzsite.agent.config import get_server_config

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main() -> None:
    """Serve the reply page at / and the health route at /health."""
    import uvicorn

    from rizzsite.api.app import create_app, mount_ui

    server = get_server_config()
    configure_logging(server.log_level)

    app = create_app()
    mount_ui(app, server)

    logger.info(f"Serving RizzSite on http://{server.host}:{server.port}/")
    uvicorn.run(app, host=server.host, port=server.port, log_level=server.log_level.lower())


if __name__ == "__main__":
    main()
