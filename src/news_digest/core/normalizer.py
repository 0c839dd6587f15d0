"""Text cleanup for item content and summaries."""

import re
from typing import Optional

from news_digest.core.entities import EnrichedItem, RawItem

ELLIPSIS = "..."
CONTENT_MAX_LENGTH = 500
SUMMARY_MAX_LENGTH = 250

_TAG = re.compile(r"<[^>]*>")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_END = (".", "?", "!")


def strip_markup(text: Optional[str]) -> str:
    """Replace anything between angle brackets with a space.

    Blunt textual strip, not an HTML parser.
    """
    return _TAG.sub(" ", text or "")


def collapse_whitespace(text: Optional[str]) -> str:
    return _WHITESPACE.sub(" ", text or "").strip()


def _truncate(text: str, max_length: int) -> str:
    # Ellipsis counts toward max_length so output never exceeds it
    if len(text) <= max_length:
        return text
    if max_length <= len(ELLIPSIS):
        return text[:max_length]
    return text[: max_length - len(ELLIPSIS)].rstrip() + ELLIPSIS


def clean_content(text: Optional[str], max_length: int = CONTENT_MAX_LENGTH) -> str:
    """Strip markup, collapse whitespace and bound the length."""
    cleaned = collapse_whitespace(strip_markup(text))
    return _truncate(cleaned, max_length)


def summarize(text: Optional[str], max_length: int = SUMMARY_MAX_LENGTH) -> str:
    """
    Clean text and cut it to a short summary.

    Prefers ending at the last sentence terminator inside the first
    ``max_length`` characters, as long as that point lies past half of
    ``max_length``. Otherwise falls back to hard truncation with an ellipsis.
    """
    cleaned = collapse_whitespace(strip_markup(text))
    if len(cleaned) <= max_length:
        return cleaned

    window = cleaned[:max_length]
    cut = max(window.rfind(mark) for mark in _SENTENCE_END)
    if cut + 1 > max_length / 2:
        return window[: cut + 1]
    return _truncate(cleaned, max_length)


def normalize_item(
    item: RawItem,
    content_max: int = CONTENT_MAX_LENGTH,
    summary_max: int = SUMMARY_MAX_LENGTH,
) -> EnrichedItem:
    """Build the enrichment record for an item with cleaned fields."""
    summary = summarize(item.content, summary_max) or summarize(item.title, summary_max)
    return EnrichedItem(
        item=item,
        cleaned_content=clean_content(item.content, content_max),
        summary=summary,
    )
