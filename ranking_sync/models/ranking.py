"""Ranking entry model shared by the client and the companion server."""

from pydantic import BaseModel, ConfigDict, Field


class RankEntry(BaseModel):
    """
    A single name/score pair on the leaderboard.

    Entries are immutable snapshots; two entries with the same name and
    score compare equal and are both kept.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    name: str = Field(description="Player-chosen name")
    score: int = Field(description="Score recorded for the play-through")


# Ordered as returned by the server, highest score first by convention.
Ranking = tuple[RankEntry, ...]
