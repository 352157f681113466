"""Controller state for a single play-through."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .ranking import Ranking


class SyncState(str, Enum):
    """States of the ranking sync cycle."""
    IDLE = "idle"
    FETCHING = "fetching"
    AWAITING_ENTRY = "awaiting_entry"
    SUBMITTING = "submitting"


class SyncSession(BaseModel):
    """
    Transient session held by the sync controller.

    current_score is overwritten on every reported score and reset to 0
    once an entry has been submitted. latest_ranking only changes on a
    successful fetch.
    """
    current_score: int
    latest_ranking: Optional[Ranking] = None
