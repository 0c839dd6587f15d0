"""Timestamp parsing for item publish dates."""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a publish date as delivered by a feed or API.

    Accepts ISO 8601 (including a trailing ``Z``) and RFC 822 dates as used
    by RSS ``pubDate``. Naive values are taken as UTC.

    Returns:
        Aware datetime in UTC, or None when the value cannot be parsed
    """
    if not value:
        return None

    text = value.strip()
    if not text:
        return None

    parsed: Optional[datetime]
    try:
        iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
        parsed = datetime.fromisoformat(iso_text)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError):
            return None

    if parsed is None:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
