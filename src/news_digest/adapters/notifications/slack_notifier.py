"""Slack notification adapter."""

import re
from datetime import date
from typing import Optional

import httpx

from news_digest.adapters.digest import MarkdownDigestGenerator
from news_digest.core import DigestDelivery, EnrichedItem


class SlackNotifier(DigestDelivery):
    """Send the digest to Slack via webhook."""

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        generator: Optional[MarkdownDigestGenerator] = None,
    ) -> None:
        """Initialize Slack notifier.

        Args:
            webhook_url: Slack webhook URL. If None, notifications are skipped.
            generator: Markdown generator used for the message body
        """
        self.webhook_url = webhook_url
        self.generator = generator or MarkdownDigestGenerator()

    def _convert_markdown_to_mrkdwn(self, text: str) -> str:
        """Convert markdown to Slack mrkdwn format."""
        # Headings have no mrkdwn equivalent, render them bold
        text = re.sub(r'^#{1,6}\s+(.+)$', r'**\1**', text, flags=re.MULTILINE)

        # Convert markdown links [text](url) to Slack format <url|text>
        text = re.sub(r'\[([^\]]+)\]\(([^)]+)\)', r'<\2|\1>', text)

        # Convert markdown bold **text** to Slack bold *text*
        text = re.sub(r'\*\*([^*]+)\*\*', r'*\1*', text)

        return text

    async def deliver(self, items: list[EnrichedItem], digest_date: date) -> None:
        """Send the digest for the given items to Slack."""
        if not self.webhook_url:
            return

        digest = self.generator.generate(items, digest_date)
        payload = {
            "text": self._convert_markdown_to_mrkdwn(digest),
            "mrkdwn": True,
        }

        async with httpx.AsyncClient(timeout=30.0) as client:
            try:
                response = await client.post(self.webhook_url, json=payload)
                response.raise_for_status()
                print("  └─ ✓ Digest sent to Slack")
            except httpx.HTTPError as e:
                print(f"  └─ ⚠️  Slack delivery failed: {e}")
