"""Digest renderers."""

from news_digest.adapters.digest.html_renderer import HtmlDigestRenderer
from news_digest.adapters.digest.markdown_generator import MarkdownDigestGenerator

__all__ = ["HtmlDigestRenderer", "MarkdownDigestGenerator"]
