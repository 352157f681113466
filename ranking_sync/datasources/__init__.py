from .base import RankingStore
from .http_store import HttpRankingStore, DEFAULT_RANKING_URL

__all__ = [
    "RankingStore",
    "HttpRankingStore",
    "DEFAULT_RANKING_URL",
]
