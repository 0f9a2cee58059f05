"""
Outbound mail transport for the contact form.

Gmail SMTP Configuration:
- Enable 2-Step Verification in your Google account
- Generate an App Password: https://myaccount.google.com/apppasswords
- Use the app password as SMTP_PASS (not your Gmail password)
"""

from __future__ import annotations

import abc
import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage

from arky_api.core.config import Settings

logger = logging.getLogger(__name__)


class MailSender(abc.ABC):
    @abc.abstractmethod
    async def send(self, message: EmailMessage) -> None:
        ...


class SMTPMailSender(MailSender):
    """
    Sends one message per call over a fresh SMTP connection.

    Port 465 uses implicit TLS (SMTP_SSL); any other port connects in the
    clear and upgrades with STARTTLS when the server offers it.
    """

    def __init__(self, settings: Settings):
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.secure = settings.smtp_secure
        self._user = settings.smtp_user
        self._password = settings.smtp_pass
        self.timeout = settings.smtp_timeout_seconds

        self.is_gmail = self.host.lower() in ["smtp.gmail.com", "smtp.googlemail.com"]

        if not settings.smtp_configured:
            logger.warning("⚠️ Email service: SMTP_USER/SMTP_PASS not set, contact form disabled")
        elif self.is_gmail:
            logger.info("📧 Email service: Gmail SMTP enabled")
        else:
            logger.info(f"📧 Email service: SMTP enabled ({self.host}:{self.port})")

    async def send(self, message: EmailMessage) -> None:
        # Run blocking SMTP call in a separate thread
        await asyncio.wait_for(
            asyncio.to_thread(self._send_sync, message), timeout=self.timeout
        )
        logger.info(f"✅ Email sent to {message['To']} via SMTP ({self.host})")

    def _send_sync(self, message: EmailMessage) -> None:
        context = ssl.create_default_context()

        if self.secure:
            logger.debug(f"Connecting to {self.host} via SSL on port {self.port}")
            with smtplib.SMTP_SSL(
                self.host, self.port, context=context, timeout=self.timeout
            ) as server:
                server.login(self._user, self._password)
                server.send_message(message)
            return

        logger.debug(f"Connecting to {self.host} on port {self.port}")
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls(context=context)
                server.ehlo()
            server.login(self._user, self._password)
            server.send_message(message)
