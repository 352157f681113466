"""Companion ranking server entry point."""

import logging
import uvicorn

from ranking_sync.config import Config
from ranking_sync.app import create_app

logger = logging.getLogger(__name__)


def main():
    """Run the ranking server on HOST:PORT with LOG_LEVEL logging."""
    config = Config.from_env()

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Serving GET/POST /ranking on {config.host}:{config.port}")

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
