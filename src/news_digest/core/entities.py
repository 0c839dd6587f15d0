"""Core domain entities."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from news_digest.core.timestamps import parse_timestamp


class SourceKind(str, Enum):
    """Kind of content source."""

    FEED = "feed"
    API = "api"


class TranslationState(str, Enum):
    """Enrichment state of a single item."""

    PENDING = "pending"
    TRANSLATING = "translating"
    TRANSLATED = "translated"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class SourceDescriptor:
    """Static description of one content source."""

    name: str
    url: str
    kind: SourceKind = SourceKind.FEED
    category: str = ""

    @property
    def handle(self) -> str:
        """Source name without whitespace, used as author handle."""
        return "".join(self.name.split())


@dataclass
class RawItem:
    """Item as produced by a source fetch."""

    title: str = ""
    content: str = ""
    link: str = ""
    published: str = ""
    author: str = ""
    author_handle: str = ""
    rank_score: int = 0
    source: str = ""

    def __post_init__(self) -> None:
        # Missing values become empty strings so downstream string work never fails
        for name in ("title", "content", "link", "published", "author", "author_handle", "source"):
            if getattr(self, name) is None:
                setattr(self, name, "")
        try:
            self.rank_score = max(int(self.rank_score or 0), 0)
        except (TypeError, ValueError):
            self.rank_score = 0

    @property
    def published_at(self) -> Optional[datetime]:
        """Parsed publish time, None when unparseable."""
        return parse_timestamp(self.published)


@dataclass
class EnrichedItem:
    """Selected item with cleaned fields and translation."""

    item: RawItem
    cleaned_content: str
    summary: str
    translated_summary: str = ""
    translated_content: str = ""
    translation_state: TranslationState = TranslationState.PENDING
    translation_error: str = ""

    @property
    def title(self) -> str:
        return self.item.title

    @property
    def link(self) -> str:
        return self.item.link

    @property
    def author(self) -> str:
        return self.item.author

    @property
    def published_at(self) -> Optional[datetime]:
        return self.item.published_at

    @property
    def translation(self) -> str:
        """Whichever translated field was populated."""
        return self.translated_summary or self.translated_content

    @property
    def is_degraded(self) -> bool:
        return self.translation_state == TranslationState.DEGRADED
