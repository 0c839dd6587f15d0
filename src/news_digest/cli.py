"""CLI entry point for the news digest."""

import asyncio
from datetime import datetime, timedelta, timezone
from enum import Enum
from pathlib import Path
from typing import Optional, TypeVar

import typer

from news_digest.adapters.notifications import EmailNotifier, SlackNotifier
from news_digest.adapters.sources import build_source
from news_digest.adapters.translation import MyMemoryTranslator
from news_digest.config import Settings, get_settings
from news_digest.core import (
    ConfigurationError,
    DedupField,
    DigestDelivery,
    FixedDelay,
    NewsDigestError,
    SelectionOrder,
    SortKey,
    TitlePrefixDedup,
    Translator,
    build_registry,
)
from news_digest.core.selection import rank_by_score
from news_digest.use_cases import (
    CollectionService,
    DigestPipeline,
    DigestService,
    EnrichmentService,
    TranslationField,
)

E = TypeVar("E", bound=Enum)


def _parse_enum(enum_cls: type[E], value: str, setting: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(f"Invalid {setting} '{value}' (expected one of: {allowed})") from None


def build_pipeline(
    settings: Settings,
    deliveries: list[DigestDelivery],
    translator: Optional[Translator] = None,
) -> DigestPipeline:
    """Wire every pipeline component from settings."""
    sources = [
        build_source(
            descriptor,
            timeout=settings.fetch.timeout,
            max_items_per_feed=settings.fetch.max_items_per_feed,
            user_agent=settings.fetch.user_agent,
        )
        for descriptor in build_registry(settings.sources)
    ]

    collection = CollectionService(
        sources=sources,
        window=timedelta(days=settings.aggregation.window_days),
        sort_key=_parse_enum(SortKey, settings.aggregation.sort_key, "aggregation.sort_key"),
    )

    translation = settings.translation
    enrichment = EnrichmentService(
        translator or MyMemoryTranslator(timeout=translation.timeout, contact_email=translation.contact_email),
        source_lang=translation.source_lang,
        target_lang=translation.target_lang,
        delay=FixedDelay(translation.delay),
        max_chars=translation.max_chars,
        progress_every=translation.progress_every,
        field=_parse_enum(TranslationField, translation.field, "translation.field"),
    )

    selection = settings.selection
    rank_key = None
    if selection.rank_by:
        if _parse_enum(SortKey, selection.rank_by, "selection.rank_by") == SortKey.RANK:
            rank_key = rank_by_score

    return DigestPipeline(
        collection,
        enrichment,
        DigestService(deliveries),
        max_items=selection.max_items,
        dedup=TitlePrefixDedup(
            prefix_length=selection.dedup_prefix_length,
            field=_parse_enum(DedupField, selection.dedup_field, "selection.dedup_field"),
        ),
        rank_key=rank_key,
        order=_parse_enum(SelectionOrder, selection.order, "selection.order"),
        content_max_length=settings.normalizer.content_max_length,
        summary_max_length=settings.normalizer.summary_max_length,
    )


def main(
    days: Optional[float] = typer.Option(None, help="Recency window in days"),
    count: Optional[int] = typer.Option(None, help="Maximum number of items in the digest"),
    lang: Optional[str] = typer.Option(None, help="Target translation language"),
    config: Path = typer.Option(Path("config.yaml"), help="Path to YAML config"),
    output: Optional[Path] = typer.Option(None, help="Markdown digest path (default: output_dir/<timestamp>_digest.md)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the digest instead of delivering it"),
    no_email: bool = typer.Option(False, "--no-email", help="Disable email delivery"),
    no_slack: bool = typer.Option(False, "--no-slack", help="Disable Slack notifications"),
) -> None:
    """Fetch AI news, translate the best items and deliver a digest."""
    try:
        asyncio.run(async_run(days, count, lang, config, output, dry_run, no_email, no_slack))
    except NewsDigestError as e:
        print(f"\n❌ Error: {e}")
        raise typer.Exit(code=1)


def app() -> None:
    """CLI entry point."""
    typer.run(main)


async def async_run(
    days: Optional[float],
    count: Optional[int],
    lang: Optional[str],
    config: Path,
    output: Optional[Path],
    dry_run: bool,
    no_email: bool,
    no_slack: bool,
    now: Optional[datetime] = None,
) -> None:
    """Async implementation of the run command."""
    now = now or datetime.now(timezone.utc)
    settings = get_settings(config)
    if days is not None:
        settings.aggregation.window_days = days
    if count is not None:
        settings.selection.max_items = count
    if lang:
        settings.translation.target_lang = lang

    print("\n" + "=" * 70)
    print("🤖  NEWS DIGEST")
    print("=" * 70)
    print("\n⚙️  Settings:")
    print(f"  • Window: {settings.aggregation.window_days} days")
    print(f"  • Max items: {settings.selection.max_items}")
    print(f"  • Target language: {settings.translation.target_lang}")

    deliveries: list[DigestDelivery] = []
    if not dry_run:
        if not no_email:
            email_notifier = EmailNotifier(settings.email)
            print("\n📧 Verifying email configuration...")
            if not await email_notifier.verify_connection():
                raise ConfigurationError("Email configuration check failed")
            deliveries.append(email_notifier)
        if not no_slack and settings.slack_webhook_url:
            deliveries.append(SlackNotifier(settings.slack_webhook_url))

    pipeline = build_pipeline(settings, deliveries)
    items = await pipeline.run(now)

    digest_service = pipeline.digest_service
    digest = digest_service.render(items, now.date())
    if dry_run:
        print("\n" + digest)

    if output is None:
        timestamp = now.strftime('%Y-%m-%d_%H-%M-%S')
        output = settings.output_dir / f"{timestamp}_digest.md"
    digest_service.save_digest(digest, output)

    print("\n" + "=" * 70)
    print(f"✅ DONE: {len(items)} items")
    print("=" * 70)


if __name__ == "__main__":
    app()
