"""Business logic use cases."""

import asyncio
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from news_digest.adapters.digest import MarkdownDigestGenerator
from news_digest.core import (
    DelayPolicy,
    DigestDelivery,
    EnrichedItem,
    FixedDelay,
    ItemSource,
    RawItem,
    SelectionOrder,
    SortKey,
    TitlePrefixDedup,
    TranslationState,
    Translator,
    aggregate,
    normalize_item,
    select_top,
)

FAILED_PLACEHOLDER = "[translation failed]"


class TranslationField(str, Enum):
    """Which normalized field gets translated."""

    SUMMARY = "summary"
    CONTENT = "content"


def _source_name(source: ItemSource) -> str:
    descriptor = getattr(source, "descriptor", None)
    return getattr(descriptor, "name", None) or source.__class__.__name__


class CollectionService:
    """Service for fetching items from all sources and merging the results."""

    def __init__(
        self,
        sources: list[ItemSource],
        window: timedelta = timedelta(days=3),
        sort_key: SortKey = SortKey.PUBLISHED,
    ) -> None:
        self.sources = sources
        self.window = window
        self.sort_key = sort_key

    async def collect(self, now: Optional[datetime] = None) -> list[RawItem]:
        """Fetch every source concurrently, wait for all, then filter and sort."""
        print("\n" + "=" * 70)
        print(f"📥 STAGE 1: FETCHING {len(self.sources)} SOURCES")
        print("=" * 70)

        # Waits for every source to settle
        results = await asyncio.gather(
            *(source.fetch_items() for source in self.sources),
            return_exceptions=True,
        )

        per_source: list[list[RawItem]] = []
        for source, result in zip(self.sources, results):
            if isinstance(result, BaseException):
                print(f"  └─ ❌ {_source_name(source)}: {result}")
                per_source.append([])
            else:
                per_source.append(result)

        total = sum(len(items) for items in per_source)
        print(f"\n✓ Raw items: {total}")

        items = aggregate(per_source, window=self.window, now=now, sort_key=self.sort_key)
        print(f"✓ Within the last {self.window.total_seconds() / 86400:g} days: {len(items)}")

        return items


class EnrichmentService:
    """Service for translating selected items one at a time.

    A single worker drains a queue so that the translation service never
    sees concurrent requests; the delay policy runs between consecutive
    items.
    """

    def __init__(
        self,
        translator: Translator,
        *,
        source_lang: str = "en",
        target_lang: str = "zh-CN",
        delay: Optional[DelayPolicy] = None,
        max_chars: int = 4000,
        progress_every: int = 5,
        field: TranslationField = TranslationField.SUMMARY,
    ) -> None:
        self.translator = translator
        self.source_lang = source_lang
        self.target_lang = target_lang
        self.delay = delay or FixedDelay(0.5)
        self.max_chars = max_chars
        self.progress_every = progress_every
        self.field = TranslationField(field)

    async def enrich(self, items: list[EnrichedItem]) -> list[EnrichedItem]:
        """Translate items in order. Returns exactly one item per input."""
        print("\n" + "=" * 70)
        print(f"🌐 TRANSLATING {len(items)} {self.field.value.upper()} FIELDS TO {self.target_lang}")
        print("=" * 70)

        queue: asyncio.Queue[EnrichedItem] = asyncio.Queue()
        for item in items:
            queue.put_nowait(item)

        results: list[EnrichedItem] = []
        await self._worker(queue, results, len(items))

        degraded = sum(1 for item in results if item.is_degraded)
        print(f"✓ Translation completed ({degraded} failed)")
        return results

    async def _worker(self, queue: "asyncio.Queue[EnrichedItem]", results: list[EnrichedItem], total: int) -> None:
        while not queue.empty():
            item = queue.get_nowait()
            results.append(await self._translate_item(item))
            queue.task_done()

            if self.progress_every and len(results) % self.progress_every == 0:
                print(f"  └─ Progress: {len(results)}/{total}")

            if not queue.empty():
                await self.delay.wait()

    async def _translate_item(self, item: EnrichedItem) -> EnrichedItem:
        """Translate one item. Failures give a placeholder, never an exception."""
        current = replace(item, translation_state=TranslationState.TRANSLATING)
        source_text = current.summary if self.field == TranslationField.SUMMARY else current.cleaned_content

        # Service rejects overlong payloads
        text = source_text[: self.max_chars]
        if not text.strip():
            return self._finish(current, "", TranslationState.TRANSLATED)

        try:
            translated = await self.translator.translate(text, self.source_lang, self.target_lang)
        except Exception as e:
            reason = str(e)
            placeholder = f"[translation failed: {reason}]" if reason else FAILED_PLACEHOLDER
            print(f"  └─ ⚠️  {current.title[:60]}: {reason or type(e).__name__}")
            return self._finish(current, placeholder, TranslationState.DEGRADED, reason or type(e).__name__)

        return self._finish(current, translated or "", TranslationState.TRANSLATED)

    def _finish(
        self,
        item: EnrichedItem,
        text: str,
        state: TranslationState,
        error: str = "",
    ) -> EnrichedItem:
        if self.field == TranslationField.SUMMARY:
            return replace(item, translated_summary=text, translation_state=state, translation_error=error)
        return replace(item, translated_content=text, translation_state=state, translation_error=error)


class DigestService:
    """Service for handing the final items to every configured delivery."""

    def __init__(
        self,
        deliveries: Optional[list[DigestDelivery]] = None,
        generator: Optional[MarkdownDigestGenerator] = None,
    ) -> None:
        self.deliveries = deliveries or []
        self.generator = generator or MarkdownDigestGenerator()

    async def deliver(self, items: list[EnrichedItem], digest_date: date) -> None:
        """Deliver items to all destinations, including an empty list."""
        print("\n" + "=" * 70)
        print(f"📧 DELIVERING {len(items)} ITEMS")
        print("=" * 70)

        for delivery in self.deliveries:
            await delivery.deliver(items, digest_date)

    def render(self, items: list[EnrichedItem], digest_date: date) -> str:
        """Render items as a markdown digest."""
        return self.generator.generate(items, digest_date)

    def save_digest(self, digest: str, output_path: Path) -> None:
        """Save digest to file."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(digest, encoding="utf-8")
        print(f"Digest saved to {output_path}")


class DigestPipeline:
    """End-to-end run: collect, select, normalize, translate, deliver."""

    def __init__(
        self,
        collection: CollectionService,
        enrichment: EnrichmentService,
        digest_service: DigestService,
        *,
        max_items: int = 15,
        dedup: Optional[TitlePrefixDedup] = None,
        rank_key: Optional[Callable[[RawItem], object]] = None,
        order: SelectionOrder = SelectionOrder.SORT_THEN_DEDUP,
        content_max_length: int = 500,
        summary_max_length: int = 250,
    ) -> None:
        self.collection = collection
        self.enrichment = enrichment
        self.digest_service = digest_service
        self.max_items = max_items
        self.dedup = dedup or TitlePrefixDedup()
        self.rank_key = rank_key
        self.order = order
        self.content_max_length = content_max_length
        self.summary_max_length = summary_max_length

    async def run(self, now: Optional[datetime] = None) -> list[EnrichedItem]:
        """Run the pipeline once and return the delivered items."""
        now = now or datetime.now(timezone.utc)

        candidates = await self.collection.collect(now)

        selected = select_top(
            candidates,
            self.max_items,
            dedup=self.dedup,
            rank_key=self.rank_key,
            order=self.order,
        )
        print(f"\n🔍 Selected {len(selected)} of {len(candidates)} items")

        normalized = [
            normalize_item(item, self.content_max_length, self.summary_max_length)
            for item in selected
        ]

        if normalized:
            enriched = await self.enrichment.enrich(normalized)
        else:
            print("No new items found, delivering an empty digest")
            enriched = []

        await self.digest_service.deliver(enriched, now.date())
        return enriched
