"""Shared fixtures: an in-process ranking store and a recording surface."""

import asyncio
from typing import Optional, Union

import pytest

from ranking_sync.datasources import RankingStore
from ranking_sync.exceptions import RankingSyncError
from ranking_sync.models import RankEntry, Ranking
from ranking_sync.services import PresentationSurface


def make_ranking(*scores: int) -> Ranking:
    """Build a ranking with one entry per score, named p1, p2, ..."""
    return tuple(RankEntry(name=f"p{i + 1}", score=s) for i, s in enumerate(scores))


class FakeRankingStore(RankingStore):
    """
    Store answering from queued results.

    Each queued fetch result is a Ranking or an exception to raise; each
    queued submit result is None or an exception. When ``gate`` is set,
    every call waits on it before answering.
    """

    def __init__(self):
        self.fetch_results: list[Union[Ranking, RankingSyncError]] = []
        self.submit_results: list[Optional[RankingSyncError]] = []
        self.fetch_calls = 0
        self.submitted: list[tuple[str, int]] = []
        self.gate: Optional[asyncio.Event] = None

    async def fetch_ranking(self) -> Ranking:
        self.fetch_calls += 1
        if self.gate is not None:
            await self.gate.wait()
        result = self.fetch_results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    async def submit_entry(self, name: str, score: int) -> None:
        self.submitted.append((name, score))
        if self.gate is not None:
            await self.gate.wait()
        result = self.submit_results.pop(0) if self.submit_results else None
        if result is not None:
            raise result


class RecordingSurface(PresentationSurface):
    """Records every call made by the sync controller, in order."""

    def __init__(self):
        self.events: list[tuple] = []
        self.entry_panel_visible = False
        self.text = ""
        self.dismissed = False

    def show_ranking(self, ranking: Ranking, text: str) -> None:
        self.text = text
        self.events.append(("show_ranking", ranking))

    def set_entry_panel_visible(self, visible: bool) -> None:
        self.entry_panel_visible = visible
        self.events.append(("entry_panel", visible))

    def fetch_failed(self, error: RankingSyncError) -> None:
        self.events.append(("fetch_failed", error))

    def submit_failed(self, error: RankingSyncError) -> None:
        self.events.append(("submit_failed", error))

    def dismiss(self) -> None:
        self.dismissed = True
        self.events.append(("dismiss",))

    def names(self) -> list[str]:
        return [event[0] for event in self.events]


@pytest.fixture
def store() -> FakeRankingStore:
    return FakeRankingStore()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
