"""Main entry point for the Kantodex API server."""

import uvicorn

from kantodex.api import create_app
from kantodex.config import settings
from kantodex.logging import get_logger, setup_logging

logger = get_logger(__name__)


def run() -> None:
    """Entry point for the application."""
    setup_logging()
    logger.info("Starting Kantodex API", host=settings.api_host, port=settings.api_port)

    uvicorn.run(
        create_app(),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
