"""HTML digest rendering for email delivery."""

from datetime import date

from jinja2 import Environment

from news_digest.core import EnrichedItem

DIGEST_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <style>
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif; max-width: 700px; margin: 0 auto; padding: 20px; background: #f3f4f6; }
    .container { background: white; border-radius: 12px; padding: 28px; }
    h1 { color: #1f2937; font-size: 22px; margin-bottom: 4px; }
    .subtitle { color: #6b7280; font-size: 13px; margin-bottom: 24px; }
    .item { margin-bottom: 20px; padding-bottom: 16px; border-bottom: 1px solid #e5e7eb; }
    .index { background: #3b82f6; color: white; padding: 2px 8px; border-radius: 4px; font-size: 12px; margin-right: 8px; }
    .title { font-weight: 600; color: #1f2937; font-size: 16px; }
    .source { color: #6b7280; font-size: 12px; margin-left: 8px; }
    .content { color: #4b5563; line-height: 1.8; font-size: 14px; padding-left: 32px; }
    .link { margin-top: 8px; padding-left: 32px; }
    .empty { color: #6b7280; font-size: 14px; }
    .footer { margin-top: 24px; padding-top: 16px; border-top: 1px solid #e5e7eb; color: #9ca3af; font-size: 11px; text-align: center; }
  </style>
</head>
<body>
  <div class="container">
    <h1>🤖 {{ title }}</h1>
    <p class="subtitle">{{ digest_date }} | {{ entries|length }} items</p>
    {% for entry in entries %}
    <div class="item">
      <div class="header">
        <span class="index">{{ loop.index }}</span>
        <span class="title">{{ entry.title }}</span>
        <span class="source">{{ entry.author }}{% if entry.date %} | {{ entry.date }}{% endif %}</span>
      </div>
      <div class="content">{{ entry.body }}</div>
      {% if entry.link %}
      <div class="link"><a href="{{ entry.link }}" target="_blank">🔗 Original article</a></div>
      {% endif %}
    </div>
    {% else %}
    <p class="empty">No new items in this period.</p>
    {% endfor %}
    <div class="footer">
      <p>Sources: Hacker News + AI company blogs</p>
      <p>Translation: MyMemory</p>
    </div>
  </div>
</body>
</html>
"""


class HtmlDigestRenderer:
    """Render enriched items into an HTML email body."""

    def __init__(self, title: str = "AI News Digest") -> None:
        self.title = title
        self.template = Environment(autoescape=True).from_string(DIGEST_TEMPLATE)

    def render(self, items: list[EnrichedItem], digest_date: date) -> str:
        entries = [
            {
                "title": item.title or "(untitled)",
                "author": item.author,
                "date": item.published_at.strftime("%m-%d") if item.published_at else "",
                "body": item.translation or item.summary,
                "link": item.link,
            }
            for item in items
        ]
        return self.template.render(
            title=self.title,
            digest_date=digest_date.strftime("%Y-%m-%d"),
            entries=entries,
        )
