"""Hacker News source backed by the Algolia search API."""

import json

from news_digest.adapters.sources.base import DEFAULT_TIMEOUT, HttpItemSource
from news_digest.core import FeedParseError, RawItem, SourceDescriptor

ITEM_URL = "https://news.ycombinator.com/item?id={object_id}"


class HackerNewsSource(HttpItemSource):
    """Search recent Hacker News stories, ranked by points."""

    emoji = "🟧"

    def __init__(self, descriptor: SourceDescriptor, timeout: float = DEFAULT_TIMEOUT) -> None:
        super().__init__(descriptor, timeout=timeout, headers={"Accept": "application/json"})

    def _parse(self, body: bytes) -> list[RawItem]:
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise FeedParseError(f"Invalid JSON: {e}") from e

        hits = data.get("hits") if isinstance(data, dict) else None
        if not isinstance(hits, list):
            raise FeedParseError("Response has no 'hits' list")

        items = []
        for hit in hits:
            if not isinstance(hit, dict):
                continue
            item = self._parse_hit(hit)
            if item is not None:
                items.append(item)
        return items

    def _parse_hit(self, hit: dict) -> RawItem | None:
        """Convert one search hit. Hits without any link are skipped."""
        object_id = hit.get("objectID")
        link = hit.get("url") or (ITEM_URL.format(object_id=object_id) if object_id else "")
        if not link:
            return None

        title = hit.get("title") or ""
        return RawItem(
            title=title,
            content=f"{title}\n{link}",
            link=link,
            published=hit.get("created_at") or "",
            author=hit.get("author") or "Anonymous",
            author_handle="HackerNews",
            rank_score=hit.get("points") or 0,
            source=self.descriptor.name,
        )
