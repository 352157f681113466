"""FastAPI application factory for the companion ranking server."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ranking_sync.config import Config
from ranking_sync.api import router
from ranking_sync.services import RankingBoard

logger = logging.getLogger(__name__)


def create_app(
    config: Config | None = None,
    board: RankingBoard | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Application configuration. If None, loads from environment.
        board: Board to serve. If None, an empty one sized from config.

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = Config.from_env()
    if board is None:
        board = RankingBoard(capacity=config.ranking_capacity)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Ranking server up, {len(board.entries())} entries on the board")
        logger.info(f"Board capacity: {board.capacity or 'unbounded'}")
        yield
        logger.info(f"Ranking server stopping with {len(board.entries())} entries")

    app = FastAPI(
        title="Ranking Server",
        description="In-memory leaderboard for local play and testing",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.board = board

    app.include_router(router)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app
