"""Merging, recency filtering and ordering of fetched items."""

from datetime import datetime, timedelta, timezone
from enum import Enum
from itertools import chain
from typing import Iterable, Optional

from news_digest.core.entities import RawItem

DEFAULT_WINDOW = timedelta(days=3)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class SortKey(str, Enum):
    """Ordering applied after the recency filter."""

    PUBLISHED = "published"
    RANK = "rank"


def filter_recent(
    items: Iterable[RawItem],
    window: timedelta = DEFAULT_WINDOW,
    now: Optional[datetime] = None,
) -> list[RawItem]:
    """Keep items published within ``window`` of ``now``, boundary included.

    Items whose publish date cannot be parsed are dropped.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    cutoff = now - window

    recent = []
    for item in items:
        published_at = item.published_at
        if published_at is not None and published_at >= cutoff:
            recent.append(item)
    return recent


def sort_items(items: Iterable[RawItem], key: SortKey = SortKey.PUBLISHED) -> list[RawItem]:
    """Sort items descending by the given key. Ties keep their input order."""
    if key == SortKey.RANK:
        return sorted(items, key=lambda item: item.rank_score, reverse=True)
    return sorted(items, key=lambda item: item.published_at or _OLDEST, reverse=True)


def aggregate(
    results: Iterable[list[RawItem]],
    *,
    window: timedelta = DEFAULT_WINDOW,
    now: Optional[datetime] = None,
    sort_key: SortKey = SortKey.PUBLISHED,
) -> list[RawItem]:
    """Concatenate per-source results, drop stale items and sort."""
    merged = list(chain.from_iterable(results))
    recent = filter_recent(merged, window=window, now=now)
    return sort_items(recent, sort_key)
