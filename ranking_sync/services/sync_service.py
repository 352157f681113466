"""Sync controller driving the fetch, qualify, submit and reload cycle."""

import logging
from typing import Optional

from ranking_sync.datasources import RankingStore
from ranking_sync.exceptions import RankingSyncError, SyncStateError
from ranking_sync.models import SyncSession, SyncState
from .presentation import PresentationSurface, render_ranking_text
from .qualification import qualifies

logger = logging.getLogger(__name__)


class RankingSyncService:
    """
    Service synchronizing one play-through's score with the ranking store.

    The controller is driven by a single cooperative caller. Only one fetch
    or submit is ever in flight: the state is moved to FETCHING or
    SUBMITTING before the store is awaited, and every public operation
    checks the state first.

    Every path ends in IDLE or AWAITING_ENTRY. Store errors are logged and
    reported to the presentation surface, never raised to the caller. Any
    other exception from the store is logged and re-raised once the state
    has been reset.
    """

    def __init__(self, store: RankingStore, surface: PresentationSurface):
        self.store = store
        self.surface = surface
        self._state = SyncState.IDLE
        self._session: Optional[SyncSession] = None

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def session(self) -> Optional[SyncSession]:
        return self._session

    async def report_score(self, score: int) -> SyncState:
        """
        Record this play-through's score and start a ranking fetch.

        Args:
            score: Score of the play-through. 0 only displays the ranking
                unless the board is empty.

        Returns:
            The state the cycle settled in: IDLE or AWAITING_ENTRY

        Raises:
            SyncStateError: If a fetch, submit or name entry is pending
        """
        self._require_state("report a score", SyncState.IDLE)

        if self._session is None:
            self._session = SyncSession(current_score=score)
        else:
            self._session.current_score = score

        logger.info(f"Score reported: {score}")
        return await self._refresh()

    async def submit_name(self, name: str) -> SyncState:
        """
        Submit the pending entry under the given name, then reload the ranking.

        Args:
            name: Player-chosen name, passed through unvalidated

        Returns:
            AWAITING_ENTRY if the submit failed, otherwise the state the
            reload settled in

        Raises:
            SyncStateError: If no entry is pending
        """
        self._require_state("submit a name", SyncState.AWAITING_ENTRY)
        self._state = SyncState.SUBMITTING
        score = self._session.current_score

        try:
            await self.store.submit_entry(name, score)
        except RankingSyncError as e:
            logger.error(f"Entry submit failed for {name!r} ({score}): {e}")
            self._state = SyncState.AWAITING_ENTRY
            self.surface.submit_failed(e)
            return self._state
        except Exception as e:
            logger.error(f"Unexpected error submitting entry for {name!r}: {e!r}")
            self._state = SyncState.AWAITING_ENTRY
            raise

        logger.info(f"Entry submitted: {name!r} ({score})")
        self._state = SyncState.FETCHING
        self.surface.set_entry_panel_visible(False)

        # Reload with score 0 so the new board does not prompt again.
        self._session.current_score = 0
        return await self._refresh()

    def close(self) -> bool:
        """
        Tear down the ranking display.

        Returns:
            True if closed; False if refused because the cycle is not idle
        """
        if self._state is not SyncState.IDLE:
            logger.warning(f"Refusing to close ranking while {self._state.value}")
            return False

        self._session = None
        self.surface.dismiss()
        return True

    async def _refresh(self) -> SyncState:
        """Fetch the ranking, display it and check whether to prompt for a name."""
        self._state = SyncState.FETCHING

        try:
            ranking = await self.store.fetch_ranking()
        except RankingSyncError as e:
            logger.error(f"Ranking fetch failed: {e}")
            self._state = SyncState.IDLE
            self.surface.fetch_failed(e)
            return self._state
        except Exception as e:
            logger.error(f"Unexpected error fetching ranking: {e!r}")
            self._state = SyncState.IDLE
            raise

        self._session.latest_ranking = ranking
        text = render_ranking_text(ranking)
        logger.debug(f"Ranking text:\n{text}")

        if qualifies(ranking, self._session.current_score):
            self._state = SyncState.AWAITING_ENTRY
        else:
            self._state = SyncState.IDLE

        self.surface.show_ranking(ranking, text)
        if self._state is SyncState.AWAITING_ENTRY:
            self.surface.set_entry_panel_visible(True)

        return self._state

    def _require_state(self, action: str, expected: SyncState) -> None:
        if self._state is not expected:
            raise SyncStateError(action, self._state.value)
