"""Abstract base class for ranking stores."""

from abc import ABC, abstractmethod

from ranking_sync.models import Ranking


class RankingStore(ABC):
    """
    Abstract interface for a remote ranking store.

    This abstraction lets the sync controller run against the HTTP
    ranking server or an in-process fake without changes.
    """

    @abstractmethod
    async def fetch_ranking(self) -> Ranking:
        """
        Retrieve the full ranking.

        Returns:
            Entries in server order (highest first by convention).
            An empty board is a valid, non-error result.

        Raises:
            TransportError: On network failure or HTTP error status
            MalformedPayload: If the response body cannot be decoded

        Note:
            No retry is attempted. Callers wanting resilience must wrap
            this call.
        """
        pass

    @abstractmethod
    async def submit_entry(self, name: str, score: int) -> None:
        """
        Submit one new entry to the ranking.

        Args:
            name: Player-chosen name, passed through unvalidated
            score: Score for the entry

        Raises:
            TransportError: On network failure or HTTP error status
        """
        pass

    async def close(self) -> None:
        """
        Clean up resources (e.g., close HTTP sessions).

        Override this if the store holds resources that need cleanup.
        """
        pass
