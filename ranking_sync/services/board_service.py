"""In-memory ranking board backing the companion ranking server."""

import logging
from typing import Optional

from ranking_sync.models import RankEntry

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10


class RankingBoard:
    """
    Leaderboard kept in memory, highest score first.

    Entries with equal scores keep submission order, so a newcomer is
    placed after everyone it ties with. When capacity is set the board is
    trimmed to that many entries after each insert.
    """

    def __init__(self, capacity: Optional[int] = DEFAULT_CAPACITY):
        self.capacity = capacity or None
        self._entries: list[RankEntry] = []

    def entries(self) -> list[RankEntry]:
        """Get a copy of the board in rank order."""
        return list(self._entries)

    def add(self, entry: RankEntry) -> Optional[int]:
        """
        Insert an entry at its ranked position.

        Args:
            entry: Entry to insert

        Returns:
            1-based rank of the new entry, or None if it did not make the board
        """
        position = len(self._entries)
        for i, existing in enumerate(self._entries):
            if entry.score > existing.score:
                position = i
                break

        self._entries.insert(position, entry)

        if self.capacity is not None and len(self._entries) > self.capacity:
            del self._entries[self.capacity:]

        if self.capacity is not None and position >= self.capacity:
            logger.info(f"Entry {entry.name!r} ({entry.score}) did not make the board")
            return None

        logger.info(f"Entry {entry.name!r} ({entry.score}) ranked #{position + 1}")
        return position + 1
