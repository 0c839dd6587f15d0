"""RSS/Atom feed source."""

from dataclasses import replace
from typing import Optional

from news_digest.adapters.sources.base import DEFAULT_TIMEOUT, HttpItemSource
from news_digest.adapters.sources.feed_parser import XmlFeedParser
from news_digest.core import FeedParser, RawItem, SourceDescriptor

BROWSER_USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"


class FeedSource(HttpItemSource):
    """Fetch the most recent entries of one feed."""

    emoji = "📰"

    def __init__(
        self,
        descriptor: SourceDescriptor,
        parser: Optional[FeedParser] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_items: int = 10,
        user_agent: str = BROWSER_USER_AGENT,
    ) -> None:
        super().__init__(descriptor, timeout=timeout, headers={"User-Agent": user_agent})
        self.parser = parser or XmlFeedParser()
        self.max_items = max_items

    def _parse(self, body: bytes) -> list[RawItem]:
        entries = self.parser.parse(body, self.descriptor)

        # Feeds carry no popularity signal, the source name stands in for the author
        return [
            replace(
                entry,
                author=self.descriptor.name,
                author_handle=self.descriptor.handle,
                rank_score=0,
                source=self.descriptor.name,
            )
            for entry in entries[: self.max_items]
        ]
