from .ranking import RankEntry, Ranking
from .session import SyncSession, SyncState

__all__ = [
    "RankEntry",
    "Ranking",
    "SyncSession",
    "SyncState",
]
