"""Tests for recency filtering and ordering."""

from datetime import datetime, timedelta, timezone

from news_digest.core import RawItem, SortKey, aggregate, filter_recent, sort_items

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
WINDOW = timedelta(days=3)


def make_item(title: str, published: datetime | str, rank_score: int = 0) -> RawItem:
    if isinstance(published, datetime):
        published = published.isoformat()
    return RawItem(title=title, content=title, published=published, rank_score=rank_score)


def test_boundary_is_inclusive() -> None:
    """Test an item exactly at now - window is kept, one microsecond older is not."""
    at_boundary = make_item("boundary", NOW - WINDOW)
    just_older = make_item("older", NOW - WINDOW - timedelta(microseconds=1))

    result = filter_recent([at_boundary, just_older], window=WINDOW, now=NOW)

    assert result == [at_boundary]


def test_unparseable_dates_are_dropped() -> None:
    """Test items without a usable date never pass the filter."""
    items = [
        make_item("garbage", "not a date"),
        make_item("empty", ""),
        make_item("fresh", NOW - timedelta(hours=1)),
    ]

    result = filter_recent(items, window=WINDOW, now=NOW)

    assert [item.title for item in result] == ["fresh"]


def test_rfc822_dates_with_offset() -> None:
    """Test RSS dates with a timezone offset compare correctly."""
    item = make_item("rss", "Sat, 17 Oct 2026 07:00:00 -0400")

    assert filter_recent([item], window=WINDOW, now=NOW) == [item]
    assert filter_recent([item], window=timedelta(days=2), now=NOW) == []


def test_naive_now_is_treated_as_utc() -> None:
    """Test a naive reference time does not break comparison."""
    item = make_item("fresh", NOW - timedelta(hours=1))

    result = filter_recent([item], window=WINDOW, now=NOW.replace(tzinfo=None))

    assert result == [item]


def test_sort_by_published_newest_first() -> None:
    """Test recency ordering."""
    old = make_item("old", NOW - timedelta(days=2))
    new = make_item("new", NOW - timedelta(hours=1))
    middle = make_item("middle", NOW - timedelta(days=1))

    result = sort_items([old, new, middle], SortKey.PUBLISHED)

    assert [item.title for item in result] == ["new", "middle", "old"]


def test_sort_is_stable_for_equal_keys() -> None:
    """Test ties keep their original relative order."""
    same_time = NOW - timedelta(hours=2)
    items = [make_item(f"item-{i}", same_time, rank_score=7) for i in range(5)]

    by_date = sort_items(items, SortKey.PUBLISHED)
    by_rank = sort_items(items, SortKey.RANK)

    assert [item.title for item in by_date] == [f"item-{i}" for i in range(5)]
    assert [item.title for item in by_rank] == [f"item-{i}" for i in range(5)]


def test_sort_by_rank() -> None:
    """Test popularity ordering."""
    items = [
        make_item("low", NOW, rank_score=1),
        make_item("high", NOW, rank_score=300),
        make_item("zero", NOW),
        make_item("mid", NOW, rank_score=42),
    ]

    result = sort_items(items, SortKey.RANK)

    assert [item.title for item in result] == ["high", "mid", "low", "zero"]


def test_aggregate_merges_filters_and_sorts() -> None:
    """Test per-source lists are merged before filtering and sorting."""
    first_source = [make_item("a", NOW - timedelta(hours=5)), make_item("stale", NOW - timedelta(days=10))]
    second_source = [make_item("b", NOW - timedelta(hours=1))]
    failed_source: list[RawItem] = []

    result = aggregate([first_source, failed_source, second_source], window=WINDOW, now=NOW)

    assert [item.title for item in result] == ["b", "a"]


def test_aggregate_empty() -> None:
    """Test empty input gives empty output."""
    assert aggregate([], now=NOW) == []
    assert aggregate([[], []], now=NOW) == []
