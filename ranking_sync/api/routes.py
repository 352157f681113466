"""API routes for the companion ranking server."""

from fastapi import APIRouter, Depends, Form
from fastapi.responses import PlainTextResponse

from ranking_sync.models import RankEntry
from ranking_sync.services import RankingBoard
from .dependencies import get_board

RANKING_PATH = "/ranking"

router = APIRouter()


@router.get(RANKING_PATH, response_model=list[RankEntry])
async def get_ranking(
    board: RankingBoard = Depends(get_board),
) -> list[RankEntry]:
    """
    Get the current ranking.

    Returns a JSON array of name/score objects, highest score first.
    """
    return board.entries()


@router.post(RANKING_PATH, response_class=PlainTextResponse)
async def post_ranking(
    name: str = Form("", description="Player name"),
    score: int = Form(..., description="Score as a decimal string"),
    board: RankingBoard = Depends(get_board),
) -> str:
    """
    Add an entry from form fields.

    Placement is decided here; the reply is a plain-text acknowledgement.
    """
    rank = board.add(RankEntry(name=name, score=score))
    if rank is None:
        return f"{name} ({score}) did not make the ranking"
    return f"{name} ({score}) registered at #{rank}"
