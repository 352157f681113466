from .qualification import qualifies, RANKING_SIZE
from .presentation import PresentationSurface, render_ranking_text
from .sync_service import RankingSyncService
from .board_service import RankingBoard

__all__ = [
    "qualifies",
    "RANKING_SIZE",
    "PresentationSurface",
    "render_ranking_text",
    "RankingSyncService",
    "RankingBoard",
]
