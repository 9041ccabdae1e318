"""
Outbound mail for contact submissions.
Composes the plaintext notification and hands it to the Resend API.
"""

import httpx
import logging
from datetime import datetime, timezone
from typing import Optional
from contact_relay.core.config import Settings
from contact_relay.models.contact import OutboundEmail, SubmissionInput

logger = logging.getLogger(__name__)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC time with milliseconds and a trailing Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def compose_email_body(
    submission: SubmissionInput,
    brand_name: str,
    client_ip: str = "",
    sent_at: Optional[datetime] = None
) -> str:
    return (
        f"New Contact - {brand_name}\n"
        f"\n"
        f"Name: {submission.name}\n"
        f"Email: {submission.email}\n"
        f"Company: {submission.company or 'N/A'}\n"
        f"Interest: {submission.interest}\n"
        f"\n"
        f"Message:\n"
        f"{submission.message}\n"
        f"\n"
        f"---\n"
        f"IP: {client_ip or 'n/a'}\n"
        f"Time: {utc_timestamp(sent_at)}"
    )


def build_outbound_email(
    submission: SubmissionInput,
    settings: Settings,
    client_ip: str = "",
    sent_at: Optional[datetime] = None
) -> OutboundEmail:
    """Address the notification to the inbox, with replies going to the submitter"""
    return OutboundEmail(
        from_=settings.mail_from,
        to=settings.mail_to,
        reply_to=submission.email,
        subject=f"Contact: {submission.interest} - {submission.name}",
        text=compose_email_body(submission, settings.brand_name, client_ip, sent_at),
    )


async def send_email(
    client: httpx.AsyncClient,
    settings: Settings,
    email: OutboundEmail
) -> httpx.Response:
    """
    Send one email through Resend.

    The response is returned as-is; callers decide what a failed status means.
    """
    if not settings.resend_api_key:
        logger.warning("RESEND_API_KEY is not configured, delivery will be rejected")

    return await client.post(
        settings.resend_api_url,
        headers={
            "Authorization": f"Bearer {settings.effective_resend_api_key}",
            "Content-Type": "application/json",
        },
        json=email.to_payload(),
    )
