"""Configuration management."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from news_digest.core import ConfigurationError


@dataclass
class FetchConfig:
    """Source fetch settings."""
    timeout: float = 15.0
    max_items_per_feed: int = 10
    user_agent: str = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"


@dataclass
class AggregationConfig:
    """Recency window and ordering."""
    window_days: float = 3
    sort_key: str = "published"


@dataclass
class SelectionConfig:
    """Dedup and output bound."""
    max_items: int = 15
    dedup_prefix_length: int = 50
    dedup_field: str = "title"
    rank_by: Optional[str] = None
    order: str = "sort_then_dedup"


@dataclass
class NormalizerConfig:
    """Text length bounds."""
    content_max_length: int = 500
    summary_max_length: int = 250


@dataclass
class TranslationConfig:
    """Translation service settings."""
    source_lang: str = "en"
    target_lang: str = "zh-CN"
    delay: float = 0.5
    max_chars: int = 4000
    timeout: float = 10.0
    progress_every: int = 5
    field: str = "summary"
    contact_email: Optional[str] = None


@dataclass
class EmailConfig:
    """SMTP delivery settings."""
    smtp_host: str = "smtp.qq.com"
    smtp_port: int = 465
    use_ssl: bool = True
    timeout: float = 30.0
    username: str = ""
    password: str = ""
    sender: str = ""
    sender_name: str = "AI News"
    recipient: str = ""


@dataclass
class Settings:
    """Application settings."""

    # Secrets (from environment only)
    slack_webhook_url: Optional[str] = None

    # Config sections
    fetch: FetchConfig = field(default_factory=FetchConfig)
    aggregation: AggregationConfig = field(default_factory=AggregationConfig)
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    normalizer: NormalizerConfig = field(default_factory=NormalizerConfig)
    translation: TranslationConfig = field(default_factory=TranslationConfig)
    email: EmailConfig = field(default_factory=EmailConfig)

    # None means the built-in source list
    sources: Optional[list[dict[str, Any]]] = None
    output_dir: Path = Path("digests")


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"{config_path} must contain a mapping at top level")
    return config


def _apply_section(section: object, values: Any, section_name: str) -> None:
    """Copy YAML values onto a config dataclass, rejecting unknown keys."""
    if not isinstance(values, dict):
        raise ConfigurationError(f"Section '{section_name}' must be a mapping")

    known = {f.name for f in fields(section)}
    for key, value in values.items():
        if key not in known:
            raise ConfigurationError(f"Unknown setting '{section_name}.{key}'")
        setattr(section, key, value)


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings(slack_webhook_url=os.getenv("SLACK_WEBHOOK_URL") or None)

    # Apply YAML config
    for section_name in ("fetch", "aggregation", "selection", "normalizer", "translation", "email"):
        if section_name in config:
            _apply_section(getattr(settings, section_name), config[section_name], section_name)

    if "sources" in config:
        sources = config["sources"]
        if sources is not None and not isinstance(sources, list):
            raise ConfigurationError("'sources' must be a list of mappings")
        settings.sources = sources

    if "output_dir" in config:
        settings.output_dir = Path(config["output_dir"])

    # Environment overrides
    settings.translation.target_lang = os.getenv("TRANSLATE_TO", settings.translation.target_lang)
    settings.translation.contact_email = os.getenv("MYMEMORY_EMAIL", settings.translation.contact_email)

    email = settings.email
    email.username = os.getenv("SMTP_USER") or os.getenv("QQ_EMAIL") or email.username
    email.password = os.getenv("SMTP_PASSWORD") or os.getenv("QQ_AUTH_CODE") or email.password
    email.sender = os.getenv("SENDER_EMAIL") or email.sender
    email.recipient = os.getenv("RECIPIENT_EMAIL") or email.recipient

    return settings
