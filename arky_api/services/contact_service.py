from __future__ import annotations

import asyncio
import html
import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr, getaddresses

from arky_api.core.config import Settings
from arky_api.core.errors import ConfigurationError, DeliveryError, ValidationError
from arky_api.schemas.contact import ContactRequest
from arky_api.services.email_service import MailSender

logger = logging.getLogger(__name__)

TEAM_LABEL = "Custom Solution (Enterprise)"
INDIVIDUAL_LABEL = "ARKY AI Agent (Individual)"
NO_MESSAGE = "No additional message provided."


@dataclass(slots=True)
class ContactSubmission:
    first_name: str
    email: str
    last_name: str = ""
    user_type: str | None = None
    message: str = ""

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)

    @classmethod
    def from_request(cls, payload: ContactRequest) -> ContactSubmission:
        first_name = (payload.first_name or "").strip()
        email = (payload.email or "").strip()
        if not first_name or not email:
            raise ValidationError("Name and Email are required.")
        return cls(
            first_name=first_name,
            email=email,
            last_name=(payload.last_name or "").strip(),
            user_type=payload.user_type,
            message=payload.message or "",
        )


def interest_label(user_type: str | None) -> str:
    return TEAM_LABEL if user_type == "team" else INDIVIDUAL_LABEL


def _one_line(value: str) -> str:
    # Header values may not carry CR/LF.
    return " ".join(value.split())


def _single_address(value: str) -> str | None:
    addresses = getaddresses([value])
    if len(addresses) != 1:
        return None
    name, addr = addresses[0]
    if "@" not in addr:
        return None
    return formataddr((name, addr))


def compose_contact_email(submission: ContactSubmission, settings: Settings) -> EmailMessage:
    interest = interest_label(submission.user_type)
    name = _one_line(submission.full_name)
    email = _one_line(submission.email)
    body = submission.message or NO_MESSAGE

    message = EmailMessage()
    message["From"] = formataddr((settings.mail_from_name, settings.smtp_user))
    message["To"] = settings.contact_recipient
    reply_to = _single_address(email)
    if reply_to:
        message["Reply-To"] = reply_to
    else:
        logger.warning(f"Skipping Reply-To, not a single address: {email!r}")
    message["Subject"] = f"New Lead: {name} - {interest}"

    message.set_content(
        "New Contact Form Submission\n"
        "\n"
        f"Name: {name}\n"
        f"Email: {email}\n"
        f"Interest: {interest}\n"
        "\n"
        "Message:\n"
        f"{body}\n"
    )
    message.add_alternative(
        f"""
        <h2>New Contact Form Submission</h2>
        <p><strong>Name:</strong> {html.escape(name)}</p>
        <p><strong>Email:</strong> {html.escape(email)}</p>
        <p><strong>Interest:</strong> {html.escape(interest)}</p>
        <br/>
        <p><strong>Message:</strong></p>
        <p>{html.escape(body)}</p>
        """,
        subtype="html",
    )
    return message


async def send_contact_email(
    submission: ContactSubmission, *, settings: Settings, sender: MailSender
) -> None:
    if not settings.smtp_configured:
        logger.error("SMTP Configuration Error: Missing SMTP_USER or SMTP_PASS")
        raise ConfigurationError("Server email configuration missing.")

    try:
        message = compose_contact_email(submission, settings)
        await sender.send(message)
    except smtplib.SMTPAuthenticationError as e:
        logger.error(f"❌ SMTP Authentication failed: {e}")
        logger.error("💡 For Gmail: Make sure you're using an App Password, not your regular password")
        raise DeliveryError() from e
    except smtplib.SMTPException as e:
        logger.error(f"❌ SMTP error: {e}")
        raise DeliveryError() from e
    except asyncio.TimeoutError as e:
        logger.error(f"❌ SMTP timeout after {settings.smtp_timeout_seconds}s")
        raise DeliveryError() from e
    except Exception as e:
        logger.exception(f"❌ Email sending error: {type(e).__name__}: {e}")
        raise DeliveryError() from e

    logger.info(
        f"Email sent successfully to {settings.contact_recipient} from {submission.email}"
    )
