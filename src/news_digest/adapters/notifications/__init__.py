"""Digest delivery adapters."""

from news_digest.adapters.notifications.email_notifier import EmailNotifier
from news_digest.adapters.notifications.slack_notifier import SlackNotifier

__all__ = ["EmailNotifier", "SlackNotifier"]
