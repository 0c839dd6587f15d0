"""Tests for configuration loading."""

from pathlib import Path

import pytest

from news_digest.config import get_settings, load_config
from news_digest.core import ConfigurationError

ENV_VARS = (
    "SLACK_WEBHOOK_URL",
    "TRANSLATE_TO",
    "MYMEMORY_EMAIL",
    "SMTP_USER",
    "SMTP_PASSWORD",
    "QQ_EMAIL",
    "QQ_AUTH_CODE",
    "SENDER_EMAIL",
    "RECIPIENT_EMAIL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove settings-related environment variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_file(tmp_path) -> None:
    """Test a missing config file gives default settings."""
    settings = get_settings(tmp_path / "missing.yaml")

    assert settings.fetch.timeout == 15.0
    assert settings.aggregation.window_days == 3
    assert settings.selection.max_items == 15
    assert settings.selection.dedup_prefix_length == 50
    assert settings.normalizer.content_max_length == 500
    assert settings.normalizer.summary_max_length == 250
    assert settings.translation.target_lang == "zh-CN"
    assert settings.translation.delay == 0.5
    assert settings.email.smtp_host == "smtp.qq.com"
    assert settings.sources is None
    assert settings.slack_webhook_url is None


def test_yaml_sections(tmp_path) -> None:
    """Test YAML values override defaults."""
    path = write_config(tmp_path, """
fetch:
  timeout: 5
selection:
  max_items: 8
  order: dedup_then_sort
translation:
  target_lang: ja
sources:
  - name: Only Feed
    url: https://example.com/rss
output_dir: out/digests
""")

    settings = get_settings(path)

    assert settings.fetch.timeout == 5
    assert settings.selection.max_items == 8
    assert settings.selection.order == "dedup_then_sort"
    assert settings.translation.target_lang == "ja"
    assert settings.sources == [{"name": "Only Feed", "url": "https://example.com/rss"}]
    assert settings.output_dir == Path("out/digests")


def test_environment_overrides(tmp_path, monkeypatch) -> None:
    """Test secrets and language come from the environment."""
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.com/services/x")
    monkeypatch.setenv("TRANSLATE_TO", "fr")
    monkeypatch.setenv("SMTP_USER", "user@example.com")
    monkeypatch.setenv("SMTP_PASSWORD", "secret")
    monkeypatch.setenv("RECIPIENT_EMAIL", "reader@example.com")

    settings = get_settings(tmp_path / "missing.yaml")

    assert settings.slack_webhook_url == "https://hooks.slack.com/services/x"
    assert settings.translation.target_lang == "fr"
    assert settings.email.username == "user@example.com"
    assert settings.email.password == "secret"
    assert settings.email.recipient == "reader@example.com"


def test_qq_variable_names(tmp_path, monkeypatch) -> None:
    """Test the QQ mail variable names are accepted as fallbacks."""
    monkeypatch.setenv("QQ_EMAIL", "123@qq.com")
    monkeypatch.setenv("QQ_AUTH_CODE", "code")

    settings = get_settings(tmp_path / "missing.yaml")

    assert settings.email.username == "123@qq.com"
    assert settings.email.password == "code"


def test_unknown_key_rejected(tmp_path) -> None:
    """Test typos in config keys are reported."""
    path = write_config(tmp_path, "selection:\n  max_itemz: 3\n")

    with pytest.raises(ConfigurationError, match="selection.max_itemz"):
        get_settings(path)


@pytest.mark.parametrize("text", [
    "fetch: [1, 2]\n",
    "sources: {name: x}\n",
    "- just\n- a list\n",
    "fetch: {timeout: [unclosed\n",
])
def test_invalid_config(tmp_path, text: str) -> None:
    """Test malformed files raise a configuration error."""
    path = write_config(tmp_path, text)

    with pytest.raises(ConfigurationError):
        get_settings(path)


def test_load_empty_file(tmp_path) -> None:
    """Test an empty file is an empty config."""
    assert load_config(write_config(tmp_path, "")) == {}
