#!/usr/bin/env python3
"""
Ranking Sync Console Example
Reports a score to a ranking server and asks for a name if it ranks.

Usage:
    python example.py <score> [--url=http://localhost:1337/ranking]

Example:
    python -m ranking_sync.main &
    python example.py 120
"""

import argparse
import asyncio
import logging

from tabulate import tabulate

from ranking_sync.config import Config
from ranking_sync.datasources import HttpRankingStore
from ranking_sync.exceptions import RankingSyncError
from ranking_sync.models import Ranking, SyncState
from ranking_sync.services import PresentationSurface, RankingSyncService


class ConsoleSurface(PresentationSurface):
    """Prints the ranking and sync events to stdout."""

    def __init__(self):
        self.entry_panel_visible = False

    def show_ranking(self, ranking: Ranking, text: str) -> None:
        if not ranking:
            print("\nThe ranking is empty.")
            return
        rows = [(i + 1, entry.name, entry.score) for i, entry in enumerate(ranking)]
        print()
        print(tabulate(rows, headers=["Rank", "Name", "Score"], tablefmt="simple"))

    def set_entry_panel_visible(self, visible: bool) -> None:
        self.entry_panel_visible = visible
        if visible:
            print("\nYou made the ranking!")

    def fetch_failed(self, error: RankingSyncError) -> None:
        print(f"\n❌ {error.user_message} ({error})")

    def submit_failed(self, error: RankingSyncError) -> None:
        print(f"\n❌ Entry not saved: {error.user_message} ({error})")

    def dismiss(self) -> None:
        print("\nBye.")


async def run(score: int, url: str) -> None:
    store = HttpRankingStore(url)
    surface = ConsoleSurface()
    service = RankingSyncService(store, surface)

    try:
        state = await service.report_score(score)

        while state is SyncState.AWAITING_ENTRY:
            name = input("Enter your name (blank to give up): ").strip()
            if not name:
                break
            state = await service.submit_name(name)

        if not service.close():
            print("\nEntry left unsubmitted.")
    finally:
        await store.close()


def main():
    config = Config.from_env()

    parser = argparse.ArgumentParser(
        description="Report a score to a ranking server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("score", type=int, help="Score of this play-through")
    parser.add_argument(
        "--url",
        default=config.ranking_url,
        help=f"Ranking endpoint (default: {config.ranking_url})",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    asyncio.run(run(args.score, args.url))


if __name__ == "__main__":
    main()
