"""Shared HTTP fetch behaviour for sources."""

import asyncio
from abc import abstractmethod
from typing import Optional

import httpx

from news_digest.core import FetchError, ItemSource, RawItem, SourceDescriptor

DEFAULT_TIMEOUT = 15.0
REASON_MAX_LENGTH = 60


class HttpItemSource(ItemSource):
    """Source fetched with a single GET request.

    Every failure (network error, timeout, bad status, unparseable body)
    is reported on one line and turned into an empty result.
    """

    emoji = "🔍"

    def __init__(
        self,
        descriptor: SourceDescriptor,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self.descriptor = descriptor
        self.timeout = timeout
        self.headers = headers or {}

    @property
    def name(self) -> str:
        return self.descriptor.name

    async def fetch_items(self) -> list[RawItem]:
        """Fetch and convert items, returning an empty list on any failure."""
        print(f"  {self.emoji} Fetching {self.name}...")

        try:
            body = await asyncio.wait_for(self._download(), timeout=self.timeout)
            items = self._parse(body)
        except Exception as e:
            reason = str(e) or type(e).__name__
            print(f"  └─ {self.name}: failed - {reason[:REASON_MAX_LENGTH]}")
            return []

        if not items:
            print(f"  └─ {self.name}: no items")
            return []

        print(f"  └─ {self.name}: got {len(items)} items")
        return items

    async def _download(self) -> bytes:
        """GET the descriptor URL and return the response body."""
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers=self.headers,
        ) as client:
            response = await client.get(self.descriptor.url)

        if response.status_code != 200:
            raise FetchError(f"HTTP {response.status_code}")
        return response.content

    @abstractmethod
    def _parse(self, body: bytes) -> list[RawItem]:
        """Convert a response body into items. May raise."""
        pass
