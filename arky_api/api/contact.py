from __future__ import annotations

from fastapi import APIRouter, Depends

from arky_api.api.deps import get_app_settings, get_mail_sender
from arky_api.core.config import Settings
from arky_api.schemas.common import ErrorResponse
from arky_api.schemas.contact import ContactRequest, ContactResponse
from arky_api.services.contact_service import ContactSubmission, send_contact_email
from arky_api.services.email_service import MailSender

router = APIRouter(tags=["contact"])


@router.post(
    "/contact",
    response_model=ContactResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def contact(
    sender: MailSender = Depends(get_mail_sender),
    settings: Settings = Depends(get_app_settings),
    payload: ContactRequest | None = None,
) -> ContactResponse:
    # An empty body is treated as a form with no fields filled in.
    submission = ContactSubmission.from_request(payload or ContactRequest())
    await send_contact_email(submission, settings=settings, sender=sender)
    return ContactResponse(success=True, message="Email sent successfully")
