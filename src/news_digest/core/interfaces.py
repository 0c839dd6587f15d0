"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from datetime import date

from news_digest.core.entities import EnrichedItem, RawItem, SourceDescriptor


class ItemSource(ABC):
    """Interface for fetching items from one source."""

    descriptor: SourceDescriptor

    @abstractmethod
    async def fetch_items(self) -> list[RawItem]:
        """Fetch items. Never raises; failures yield an empty list."""
        pass


class FeedParser(ABC):
    """Interface for turning a retrieved document into items."""

    @abstractmethod
    def parse(self, raw: bytes, source: SourceDescriptor) -> list[RawItem]:
        """Parse raw document bytes. Raises FeedParseError on malformed input."""
        pass


class Translator(ABC):
    """Interface for the external translation service."""

    @abstractmethod
    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Translate text. May raise on any failure."""
        pass


class DigestDelivery(ABC):
    """Interface for handing the final item list to a destination."""

    @abstractmethod
    async def deliver(self, items: list[EnrichedItem], digest_date: date) -> None:
        """Deliver items. An empty list is valid input."""
        pass
