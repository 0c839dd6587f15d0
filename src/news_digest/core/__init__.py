"""Core domain layer."""

from news_digest.core.aggregation import SortKey, aggregate, filter_recent, sort_items
from news_digest.core.delays import DelayPolicy, FixedDelay, NoDelay
from news_digest.core.entities import (
    EnrichedItem,
    RawItem,
    SourceDescriptor,
    SourceKind,
    TranslationState,
)
from news_digest.core.errors import (
    ConfigurationError,
    DeliveryError,
    FeedParseError,
    FetchError,
    NewsDigestError,
    TranslationError,
)
from news_digest.core.interfaces import DigestDelivery, FeedParser, ItemSource, Translator
from news_digest.core.normalizer import clean_content, normalize_item, summarize
from news_digest.core.registry import DEFAULT_SOURCES, build_registry
from news_digest.core.selection import DedupField, SelectionOrder, TitlePrefixDedup, select_top

__all__ = [
    "RawItem",
    "EnrichedItem",
    "SourceDescriptor",
    "SourceKind",
    "TranslationState",
    "ItemSource",
    "FeedParser",
    "Translator",
    "DigestDelivery",
    "DelayPolicy",
    "FixedDelay",
    "NoDelay",
    "NewsDigestError",
    "ConfigurationError",
    "FeedParseError",
    "FetchError",
    "TranslationError",
    "DeliveryError",
    "DEFAULT_SOURCES",
    "build_registry",
    "SortKey",
    "aggregate",
    "filter_recent",
    "sort_items",
    "DedupField",
    "SelectionOrder",
    "TitlePrefixDedup",
    "select_top",
    "clean_content",
    "summarize",
    "normalize_item",
]
