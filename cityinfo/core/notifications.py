"""Notification system for sending messages via log, Slack and email."""
import asyncio
import logging
import smtplib
from datetime import datetime, timezone
from email.mime.text import MIMEText
from typing import List, Optional

import httpx

from cityinfo.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class NotificationManager:
    """Sends notifications through every configured channel.

    The message is always written to the log; Slack and email are used when
    configured. Channel failures are logged and never raised.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize notification manager from settings.

        ``transport`` is handed to the Slack HTTP client; tests pass an
        ``httpx.MockTransport``.
        """
        config = config or default_settings
        self._transport = transport

        self.mail_from = config.MAIL_FROM
        self.mail_to = [email.strip() for email in config.MAIL_TO.split(",") if email.strip()]
        self.timeout = config.NOTIFICATION_TIMEOUT_SECONDS

        # Slack configuration
        self.slack_webhook_url = config.SLACK_WEBHOOK_URL
        self.slack_enabled = bool(self.slack_webhook_url)

        # Email configuration
        self.smtp_host = config.SMTP_HOST
        self.smtp_port = config.SMTP_PORT
        self.smtp_username = config.SMTP_USERNAME
        self.smtp_password = config.SMTP_PASSWORD
        self.email_enabled = bool(
            self.smtp_host and
            self.smtp_username and
            self.smtp_password and
            self.mail_to
        )

        self.notifications_enabled = config.NOTIFICATIONS_ENABLED

        if self.notifications_enabled:
            if self.slack_enabled:
                logger.info("Slack notifications enabled")
            if self.email_enabled:
                logger.info(f"Email notifications enabled for {len(self.mail_to)} recipients")

    async def notify(self, subject: str, body: str) -> None:
        """Send a notification. Never raises."""
        if not self.notifications_enabled:
            logger.debug("Notifications disabled, skipping message")
            return

        logger.info(
            f"Mail from {self.mail_from} to {', '.join(self.mail_to)}, "
            f"Subject: {subject}, Message: {body}"
        )

        if self.slack_enabled:
            try:
                await self._send_slack_notification(subject, body)
            except Exception as e:
                logger.error(f"Failed to send Slack notification: {e}")

        if self.email_enabled:
            try:
                # smtplib blocks, keep it off the event loop
                await asyncio.to_thread(self._send_email_notification, subject, body)
            except Exception as e:
                logger.error(f"Failed to send email notification: {e}")

    async def _send_slack_notification(self, subject: str, body: str) -> bool:
        """Send notification to Slack via webhook."""
        payload = {
            "attachments": [
                {
                    "color": "#36a64f",
                    "title": subject,
                    "text": body,
                    "fields": [
                        {
                            "title": "Timestamp",
                            "value": datetime.now(timezone.utc).isoformat(),
                            "short": False
                        }
                    ],
                    "footer": "City Info"
                }
            ]
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(self.slack_webhook_url, json=payload)
            response.raise_for_status()
        logger.info(f"Slack notification sent: {subject}")
        return True

    def _send_email_notification(self, subject: str, body: str) -> bool:
        """Send notification via email."""
        msg = MIMEText(body, "plain")
        msg["Subject"] = subject
        msg["From"] = self.mail_from
        msg["To"] = ", ".join(self.mail_to)

        with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout) as server:
            server.starttls()
            server.login(self.smtp_username, self.smtp_password)
            server.send_message(msg)

        logger.info(f"Email notification sent to {len(self.mail_to)} recipients: {subject}")
        return True

    @property
    def channels(self) -> List[str]:
        """Names of the active outbound channels besides the log."""
        active = []
        if self.slack_enabled:
            active.append("slack")
        if self.email_enabled:
            active.append("email")
        return active
