"""XML feed parser for RSS 2.0, RSS 1.0 (RDF) and Atom documents."""

from xml.etree import ElementTree as ET

from news_digest.core import FeedParseError, FeedParser, RawItem, SourceDescriptor

ENTRY_TAGS = ("item", "entry")
CONTENT_TAGS = ("encoded", "description", "summary", "content")
DATE_TAGS = ("pubDate", "date", "published", "updated")
ID_TAGS = ("guid", "id")


def _local_name(tag: str) -> str:
    """Tag name without its ``{namespace}`` prefix."""
    return tag.rsplit("}", 1)[-1] if "}" in tag else tag


def _text(elem: ET.Element) -> str:
    return "".join(elem.itertext()).strip()


class XmlFeedParser(FeedParser):
    """Parse feed documents with ElementTree."""

    def parse(self, raw: bytes, source: SourceDescriptor) -> list[RawItem]:
        """Parse a feed document into items in document order."""
        if not raw or not raw.strip():
            raise FeedParseError(f"Empty document from {source.name}")

        try:
            root = ET.fromstring(raw)
        except ET.ParseError as e:
            raise FeedParseError(f"Malformed XML from {source.name}: {e}") from e

        items = []
        for elem in root.iter():
            if not isinstance(elem.tag, str) or _local_name(elem.tag) not in ENTRY_TAGS:
                continue
            try:
                items.append(self._parse_entry(elem, source))
            except Exception:
                # Skip malformed entries
                continue

        return items

    def _parse_entry(self, entry: ET.Element, source: SourceDescriptor) -> RawItem:
        """Map one ``<item>`` or ``<entry>`` element to an item."""
        children: dict[str, list[ET.Element]] = {}
        for child in entry:
            if isinstance(child.tag, str):
                children.setdefault(_local_name(child.tag), []).append(child)

        def first_text(*names: str) -> str:
            for name in names:
                for elem in children.get(name, []):
                    value = _text(elem)
                    if value:
                        return value
            return ""

        return RawItem(
            title=first_text("title"),
            content=first_text(*CONTENT_TAGS),
            link=self._find_link(children.get("link", [])) or first_text(*ID_TAGS),
            published=first_text(*DATE_TAGS),
            source=source.name,
        )

    def _find_link(self, links: list[ET.Element]) -> str:
        """Link from RSS text content or Atom ``href``, preferring alternate."""
        fallback = ""
        for link in links:
            if link.text and link.text.strip():
                return link.text.strip()
            href = (link.get("href") or "").strip()
            if not href:
                continue
            if link.get("rel", "alternate") == "alternate":
                return href
            fallback = fallback or href
        return fallback
