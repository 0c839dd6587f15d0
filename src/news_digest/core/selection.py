"""De-duplication and bounded selection of ranked items."""

import re
from enum import Enum
from typing import Callable, Iterable, Optional

from news_digest.core.entities import RawItem

_WHITESPACE = re.compile(r"\s+")


class DedupField(str, Enum):
    """Item field the duplicate key is derived from."""

    TITLE = "title"
    CONTENT = "content"


class SelectionOrder(str, Enum):
    """Whether ranking happens before or after duplicates are collapsed."""

    SORT_THEN_DEDUP = "sort_then_dedup"
    DEDUP_THEN_SORT = "dedup_then_sort"


class TitlePrefixDedup:
    """Approximate duplicate detection on a normalized text prefix.

    Two items are duplicates when the lowercased, whitespace-collapsed first
    ``prefix_length`` characters of the chosen field are equal. An item
    whose chosen field is blank is keyed on the other field.
    """

    def __init__(self, prefix_length: int = 50, field: DedupField = DedupField.TITLE) -> None:
        if prefix_length <= 0:
            raise ValueError("prefix_length must be positive")
        self.prefix_length = prefix_length
        self.field = DedupField(field)

    def key(self, item: RawItem) -> str:
        """Duplicate key for an item."""
        primary, fallback = (
            (item.title, item.content) if self.field == DedupField.TITLE else (item.content, item.title)
        )
        text = primary if primary.strip() else fallback
        normalized = _WHITESPACE.sub(" ", text.lower()).strip()
        return normalized[: self.prefix_length]

    def unique(self, items: Iterable[RawItem]) -> list[RawItem]:
        """Drop later duplicates, keeping the first occurrence."""
        seen: set[str] = set()
        unique_items = []
        for item in items:
            key = self.key(item)
            if key in seen:
                continue
            seen.add(key)
            unique_items.append(item)
        return unique_items


def rank_by_score(item: RawItem) -> int:
    return item.rank_score


def select_top(
    items: Iterable[RawItem],
    count: int,
    *,
    dedup: Optional[TitlePrefixDedup] = None,
    rank_key: Optional[Callable[[RawItem], object]] = None,
    order: SelectionOrder = SelectionOrder.SORT_THEN_DEDUP,
) -> list[RawItem]:
    """
    Select at most ``count`` items with no two sharing a duplicate key.

    Args:
        items: Candidates, already ordered by the aggregator
        count: Maximum number of items to return
        dedup: Duplicate detection strategy (title prefix of 50 by default)
        rank_key: Optional key for a stable descending re-rank; None keeps
            the input order as the ranking
        order: Whether the re-rank happens before or after de-duplication

    Returns:
        The first ``count`` surviving items; fewer when the de-duplicated
        pool is smaller
    """
    if count <= 0:
        return []

    dedup = dedup or TitlePrefixDedup()
    candidates = list(items)

    if rank_key is None:
        selected = dedup.unique(candidates)
    elif order == SelectionOrder.DEDUP_THEN_SORT:
        selected = sorted(dedup.unique(candidates), key=rank_key, reverse=True)
    else:
        selected = dedup.unique(sorted(candidates, key=rank_key, reverse=True))

    return selected[:count]
