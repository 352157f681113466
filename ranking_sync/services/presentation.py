"""Presentation surface contract and ranking summary text."""

from abc import ABC, abstractmethod
from typing import Sequence

from ranking_sync.exceptions import RankingSyncError
from ranking_sync.models import RankEntry, Ranking


def render_ranking_text(ranking: Sequence[RankEntry]) -> str:
    """
    Build the ranking summary shown to the player.

    Each line is ``"<rank> : <name><score>"`` with a 1-based rank. Name and
    score are written back to back.
    """
    return "".join(
        f"{i + 1} : {entry.name}{entry.score}\n"
        for i, entry in enumerate(ranking)
    )


class PresentationSurface(ABC):
    """
    Receiver for everything the sync controller wants shown to the player.

    Implementations only read the rankings they are handed.
    """

    @abstractmethod
    def show_ranking(self, ranking: Ranking, text: str) -> None:
        """
        Display a freshly fetched ranking.

        Args:
            ranking: Entries in server order
            text: Summary built by render_ranking_text
        """
        pass

    @abstractmethod
    def set_entry_panel_visible(self, visible: bool) -> None:
        """Show or hide the name entry panel."""
        pass

    @abstractmethod
    def fetch_failed(self, error: RankingSyncError) -> None:
        """Report a fetch that failed; the displayed ranking stays as it was."""
        pass

    @abstractmethod
    def submit_failed(self, error: RankingSyncError) -> None:
        """Report a failed submit; the entry panel stays open for a retry."""
        pass

    def dismiss(self) -> None:
        """
        Tear down the ranking display.

        Called only once the controller is idle. The default does nothing;
        override this if the surface holds something that needs teardown.
        """
        pass
