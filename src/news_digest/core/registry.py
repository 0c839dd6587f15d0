"""Registry of configured content sources."""

from typing import Any, Optional

from news_digest.core.entities import SourceDescriptor, SourceKind
from news_digest.core.errors import ConfigurationError

HACKER_NEWS_URL = "https://hn.algolia.com/api/v1/search_by_date?query=AI&tags=story&hitsPerPage=30"

DEFAULT_SOURCES: tuple[SourceDescriptor, ...] = (
    SourceDescriptor("Hacker News", HACKER_NEWS_URL, SourceKind.API, "forum"),
    # AI company blogs
    SourceDescriptor("OpenAI Blog", "https://openai.com/blog/rss.xml", SourceKind.FEED, "blog"),
    SourceDescriptor("Anthropic Blog", "https://www.anthropic.com/rss.xml", SourceKind.FEED, "blog"),
    SourceDescriptor("DeepMind Blog", "https://deepmind.google/blog/rss/", SourceKind.FEED, "blog"),
    SourceDescriptor("Google AI Blog", "http://googleaiblog.blogspot.com/atom.xml", SourceKind.FEED, "blog"),
    SourceDescriptor("Meta AI Blog", "https://ai.meta.com/blog/rss/", SourceKind.FEED, "blog"),
    # News sites
    SourceDescriptor("MIT News - AI", "https://news.mit.edu/rss/topic/artificial-intelligence2", SourceKind.FEED, "news"),
    SourceDescriptor("Wired AI", "https://www.wired.com/feed/category/ai/latest/rss", SourceKind.FEED, "news"),
    SourceDescriptor("The Verge AI", "https://www.theverge.com/rss/ai/index.xml", SourceKind.FEED, "news"),
    SourceDescriptor(
        "TechCrunch AI",
        "https://techcrunch.com/category/artificial-intelligence/feed/",
        SourceKind.FEED,
        "news",
    ),
)


def build_registry(entries: Optional[list[dict[str, Any]]] = None) -> list[SourceDescriptor]:
    """
    Build source descriptors from configuration entries.

    Args:
        entries: Mappings with ``name``, ``url`` and optional ``kind``,
            ``category`` and ``enabled``. None selects the default sources.

    Raises:
        ConfigurationError: If an entry lacks a name or URL, or names an
            unknown kind
    """
    if entries is None:
        return list(DEFAULT_SOURCES)

    descriptors: list[SourceDescriptor] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Source #{index + 1} must be a mapping, got {type(entry).__name__}")

        if not entry.get("enabled", True):
            continue

        name = str(entry.get("name") or "").strip()
        url = str(entry.get("url") or "").strip()
        if not name or not url:
            raise ConfigurationError(f"Source #{index + 1} needs both 'name' and 'url'")

        kind_value = str(entry.get("kind", SourceKind.FEED.value)).lower()
        try:
            kind = SourceKind(kind_value)
        except ValueError:
            raise ConfigurationError(f"Source '{name}' has unknown kind '{kind_value}'") from None

        descriptors.append(SourceDescriptor(
            name=name,
            url=url,
            kind=kind,
            category=str(entry.get("category") or ""),
        ))

    return descriptors
