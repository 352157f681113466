"""Qualification rule deciding whether a score is offered a ranking slot."""

from typing import Sequence

from ranking_sync.models import RankEntry

# Number of slots the board is considered to have while it is filling up.
RANKING_SIZE = 10


def qualifies(ranking: Sequence[RankEntry], candidate_score: int) -> bool:
    """
    Decide whether a candidate score should be offered entry.

    - An empty board admits any score, 0 included.
    - A board with fewer than RANKING_SIZE entries admits any positive score.
    - Otherwise the score must beat the last (lowest-ranked) entry.

    Server order is trusted; the last element is taken as the lowest entry.
    """
    if not ranking:
        return True
    if len(ranking) < RANKING_SIZE and candidate_score > 0:
        return True
    return candidate_score > ranking[-1].score
