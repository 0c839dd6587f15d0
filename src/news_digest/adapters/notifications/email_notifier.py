"""Email delivery over SMTP."""

import asyncio
import smtplib
from datetime import date
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import Optional

from news_digest.adapters.digest import HtmlDigestRenderer, MarkdownDigestGenerator
from news_digest.config import EmailConfig
from news_digest.core import ConfigurationError, DeliveryError, DigestDelivery, EnrichedItem


class EmailNotifier(DigestDelivery):
    """Send the digest as an HTML email."""

    def __init__(
        self,
        config: EmailConfig,
        renderer: Optional[HtmlDigestRenderer] = None,
        text_generator: Optional[MarkdownDigestGenerator] = None,
    ) -> None:
        """Initialize email notifier.

        Raises:
            ConfigurationError: If SMTP credentials or the recipient are missing
        """
        if not config.username or not config.password:
            raise ConfigurationError("SMTP_USER and SMTP_PASSWORD environment variables are required")
        if not config.recipient:
            raise ConfigurationError("RECIPIENT_EMAIL environment variable is required")

        self.config = config
        self.renderer = renderer or HtmlDigestRenderer()
        self.text_generator = text_generator or MarkdownDigestGenerator()

    @property
    def sender(self) -> str:
        return self.config.sender or self.config.username

    def build_message(self, items: list[EnrichedItem], digest_date: date) -> MIMEMultipart:
        """Build the multipart message with a plain-text and an HTML part."""
        message = MIMEMultipart("alternative")
        message["Subject"] = f"🤖 AI News - {digest_date.strftime('%Y-%m-%d')} ({len(items)} items)"
        message["From"] = formataddr((self.config.sender_name, self.sender))
        message["To"] = self.config.recipient

        message.attach(MIMEText(self.text_generator.generate(items, digest_date), "plain", "utf-8"))
        message.attach(MIMEText(self.renderer.render(items, digest_date), "html", "utf-8"))
        return message

    async def verify_connection(self) -> bool:
        """Check that the SMTP server accepts our credentials."""
        try:
            await asyncio.to_thread(self._verify)
        except (smtplib.SMTPException, OSError) as e:
            print(f"  └─ ❌ SMTP connection failed: {e}")
            return False

        print("  └─ ✓ SMTP connection verified")
        return True

    async def deliver(self, items: list[EnrichedItem], digest_date: date) -> None:
        """Send the digest email.

        Raises:
            DeliveryError: If the SMTP exchange fails
        """
        message = self.build_message(items, digest_date)
        print(f"  └─ Sending email to {self.config.recipient}...")

        try:
            await asyncio.to_thread(self._send, message)
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryError(f"SMTP send failed: {e}") from e

        print("  └─ ✓ Email sent")

    def _connect(self) -> smtplib.SMTP:
        """Open an authenticated SMTP session (SSL or STARTTLS)."""
        if self.config.use_ssl:
            server: smtplib.SMTP = smtplib.SMTP_SSL(
                self.config.smtp_host, self.config.smtp_port, timeout=self.config.timeout
            )
        else:
            server = smtplib.SMTP(self.config.smtp_host, self.config.smtp_port, timeout=self.config.timeout)

        try:
            if not self.config.use_ssl:
                server.starttls()
            server.login(self.config.username, self.config.password)
        except (smtplib.SMTPException, OSError):
            server.close()
            raise
        return server

    def _verify(self) -> None:
        with self._connect() as server:
            server.noop()

    def _send(self, message: MIMEMultipart) -> None:
        with self._connect() as server:
            server.send_message(message)
