"""Source adapters for fetching items."""

from typing import Optional

from news_digest.adapters.sources.base import DEFAULT_TIMEOUT, HttpItemSource
from news_digest.adapters.sources.feed_parser import XmlFeedParser
from news_digest.adapters.sources.feed_source import BROWSER_USER_AGENT, FeedSource
from news_digest.adapters.sources.hacker_news_source import HackerNewsSource
from news_digest.core import FeedParser, ItemSource, SourceDescriptor, SourceKind


def build_source(
    descriptor: SourceDescriptor,
    timeout: float = DEFAULT_TIMEOUT,
    max_items_per_feed: int = 10,
    parser: Optional[FeedParser] = None,
    user_agent: Optional[str] = None,
) -> ItemSource:
    """Create the source adapter matching the descriptor kind."""
    if descriptor.kind == SourceKind.API:
        return HackerNewsSource(descriptor, timeout=timeout)
    return FeedSource(
        descriptor,
        parser=parser,
        timeout=timeout,
        max_items=max_items_per_feed,
        user_agent=user_agent or BROWSER_USER_AGENT,
    )


__all__ = [
    "FeedSource",
    "HackerNewsSource",
    "HttpItemSource",
    "XmlFeedParser",
    "build_source",
]
