"""Tests for de-duplication and bounded selection."""

import pytest

from news_digest.core import DedupField, RawItem, SelectionOrder, TitlePrefixDedup, select_top
from news_digest.core.selection import rank_by_score


def make_item(title: str, content: str = "", rank_score: int = 0) -> RawItem:
    return RawItem(title=title, content=content, rank_score=rank_score)


def test_dedup_key_normalizes_case_and_whitespace() -> None:
    """Test keys ignore case and whitespace differences."""
    dedup = TitlePrefixDedup()

    assert dedup.key(make_item("OpenAI  Releases\tNew Model  ")) == "openai releases new model"
    assert dedup.key(make_item("openai releases new model")) == "openai releases new model"


def test_dedup_key_is_prefix_bounded() -> None:
    """Test only the first prefix_length characters are compared."""
    dedup = TitlePrefixDedup(prefix_length=10)

    assert dedup.key(make_item("abcdefghijKLMNOP")) == "abcdefghij"


def test_first_occurrence_wins() -> None:
    """Test near-duplicates collapse to the first item seen."""
    first = make_item("Anthropic ships a new model")
    duplicate = make_item("ANTHROPIC ships a new model   ")
    distinct = make_item("Google publishes a robotics paper")

    result = select_top([first, duplicate, distinct], count=10)

    assert result == [first, distinct]
    assert result[0] is first


def test_titles_identical_within_prefix_are_duplicates() -> None:
    """Test titles that only differ after the prefix window collapse."""
    prefix = "x" * 50
    result = select_top([make_item(prefix + " part one"), make_item(prefix + " part two")], count=10)

    assert len(result) == 1


def test_count_bounds_result() -> None:
    """Test never more than count items."""
    items = [make_item(f"Story number {i}") for i in range(20)]

    result = select_top(items, count=5)

    assert len(result) == 5
    assert [item.title for item in result] == [f"Story number {i}" for i in range(5)]


def test_fewer_only_when_pool_is_smaller() -> None:
    """Test a small deduplicated pool is returned whole, without padding."""
    items = [make_item("Same title"), make_item("same title"), make_item("Other title")]

    assert len(select_top(items, count=15)) == 2


def test_zero_count() -> None:
    """Test non-positive counts select nothing."""
    assert select_top([make_item("a")], count=0) == []


def test_sort_then_dedup_keeps_highest_ranked_duplicate() -> None:
    """Test ranking first lets the most popular copy survive."""
    low = make_item("Same story", rank_score=1)
    high = make_item("same story", rank_score=10)
    other = make_item("Other story", rank_score=5)

    result = select_top(
        [low, high, other],
        count=10,
        rank_key=rank_by_score,
        order=SelectionOrder.SORT_THEN_DEDUP,
    )

    assert result == [high, other]


def test_dedup_then_sort_keeps_first_seen_duplicate() -> None:
    """Test collapsing first keeps the earliest copy, then ranks survivors."""
    low = make_item("Same story", rank_score=1)
    high = make_item("same story", rank_score=10)
    other = make_item("Other story", rank_score=5)

    result = select_top(
        [low, high, other],
        count=10,
        rank_key=rank_by_score,
        order=SelectionOrder.DEDUP_THEN_SORT,
    )

    assert result == [other, low]


def test_content_field_dedup() -> None:
    """Test keying on content instead of title."""
    dedup = TitlePrefixDedup(prefix_length=20, field=DedupField.CONTENT)
    items = [
        make_item("Title A", content="The same body text for both"),
        make_item("Title B", content="the same   body text for both"),
    ]

    assert len(select_top(items, count=10, dedup=dedup)) == 1


def test_empty_title_falls_back_to_content() -> None:
    """Test untitled items are keyed on their content."""
    items = [make_item("", content="First body"), make_item("", content="Second body")]

    assert len(select_top(items, count=10)) == 2


def test_invalid_prefix_length() -> None:
    """Test prefix length must be positive."""
    with pytest.raises(ValueError):
        TitlePrefixDedup(prefix_length=0)
