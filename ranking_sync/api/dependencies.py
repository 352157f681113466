"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from ranking_sync.services import RankingBoard


def get_board(request: Request) -> RankingBoard:
    """Get the board installed on the app by create_app()."""
    board = getattr(request.app.state, "board", None)
    if board is None:
        raise RuntimeError("RankingBoard not installed. Build the app with create_app().")
    return board
