#!/usr/bin/env python3
"""
Server Entry Point - Main Layer

This module serves as the entry point for running the predictor with
uvicorn. The poller lives inside the application lifespan, so running the
server is all that is needed to start predicting.
"""

import uvicorn

from src.main.config import get_settings
from src.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first
configure_logging()

# Load settings
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

# Get structured logger
logger = get_logger(__name__)


def main():
    """Main entry point for the HTTP server."""

    settings = get_settings()

    logger.info(
        "Starting flight predictor",
        host=settings.service.host,
        port=settings.service.port,
        recent_games_url=settings.game_api.recent_games_url,
        interval_seconds=settings.polling.interval_seconds,
    )

    uvicorn.run(
        "src.main.app:app",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
        log_config=None,  # keep the structlog handlers configured above
    )


if __name__ == "__main__":
    main()
