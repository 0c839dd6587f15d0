"""Markdown digest generator."""

from datetime import date

from news_digest.core import EnrichedItem

UNTITLED = "(untitled)"


class MarkdownDigestGenerator:
    """Generate markdown digest from enriched items."""

    def __init__(self, title: str = "AI News Digest") -> None:
        self.title = title

    def generate(self, items: list[EnrichedItem], digest_date: date) -> str:
        """Generate markdown digest."""
        header = f"# 🤖 {self.title} — {digest_date.strftime('%d.%m.%Y')}"
        if not items:
            return f"{header}\n\nNo new items found."

        lines = [
            header,
            "",
            f"Items: {len(items)}",
            "",
        ]

        for index, item in enumerate(items, 1):
            lines.extend(self._format_item(index, item))

        return "\n".join(lines)

    def _format_item(self, index: int, item: EnrichedItem) -> list[str]:
        """Format single digest entry."""
        title = item.title or UNTITLED
        heading = f"### {index}. [{title}]({item.link})" if item.link else f"### {index}. {title}"

        meta_parts = [item.author] if item.author else []
        if item.published_at:
            meta_parts.append(item.published_at.strftime("%m-%d"))

        lines = [heading, ""]
        if meta_parts:
            lines.extend([f"*{' | '.join(meta_parts)}*", ""])

        body = item.translation or item.summary
        if body:
            lines.extend([body, ""])

        lines.append("---")
        lines.append("")

        return lines
