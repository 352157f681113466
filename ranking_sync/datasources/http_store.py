"""HTTP ranking store implementation."""

import logging
from typing import Optional

import httpx

from ranking_sync.codec import decode
from ranking_sync.exceptions import TransportError
from ranking_sync.models import Ranking
from .base import RankingStore

logger = logging.getLogger(__name__)

DEFAULT_RANKING_URL = "http://localhost:1337/ranking"


class HttpRankingStore(RankingStore):
    """
    Ranking store backed by a single HTTP endpoint.

    ``GET <url>`` returns the ranking as a JSON array and ``POST <url>``
    with form fields ``name`` and ``score`` adds an entry.

    Limitations:
    - No timeout is applied; a hung server hangs the caller
    - No retry or backoff
    """

    def __init__(
        self,
        url: str = DEFAULT_RANKING_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP ranking store.

        Args:
            url: Full URL of the ranking endpoint
            transport: Optional httpx transport, used to route requests
                somewhere other than the network
        """
        self.url = url
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                transport=self._transport,
                timeout=None,
            )
        return self._client

    async def _send(self, method: str, **kwargs) -> httpx.Response:
        """
        Send a request to the ranking endpoint.

        Args:
            method: HTTP method
            **kwargs: Passed through to ``httpx.AsyncClient.request``

        Returns:
            The successful response

        Raises:
            TransportError: On network failure, an unusable URL or a 4xx/5xx status
        """
        client = await self._get_client()

        try:
            response = await client.request(method, self.url, **kwargs)
            response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP error {status} for {method} {self.url}: {e}")
            raise TransportError(f"HTTP {status}: {e.response.text}", status_code=status) from e

        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            logger.error(f"{method} {self.url} failed: {e!r}")
            raise TransportError(str(e) or type(e).__name__) from e

    async def fetch_ranking(self) -> Ranking:
        """Fetch and decode the full ranking."""
        response = await self._send("GET")
        logger.debug(f"Ranking data (JSON): {response.text}")

        ranking = decode(response.content)
        logger.debug(f"Ranking data length: {len(ranking)}")
        return ranking

    async def submit_entry(self, name: str, score: int) -> None:
        """Post a new entry as form fields."""
        response = await self._send(
            "POST",
            data={"name": name, "score": str(score)},
        )
        logger.debug(f"Submit response: {response.text}")

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
