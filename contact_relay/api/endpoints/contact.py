"""
Contact form endpoint.

Honeypot and Turnstile spam protection, then delivery through Resend.
Every path returns a JSON body; nothing is stored or retried.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from typing import Any, Dict
import httpx
import logging
from contact_relay.core.config import Settings, get_settings
from contact_relay.core.http_client import get_http_client
from contact_relay.core.mailer import build_outbound_email, send_email
from contact_relay.core.turnstile import verify_turnstile
from contact_relay.models.contact import SubmissionInput

router = APIRouter()
logger = logging.getLogger(__name__)


async def parse_submission_body(request: Request) -> Dict[str, Any]:
    """Read a JSON or form body into a flat mapping"""
    content_type = request.headers.get("content-type", "")

    if "application/json" in content_type:
        data = await request.json()
        return data if isinstance(data, dict) else {}

    form = await request.form()
    # Last value wins for repeated keys
    return {key: value for key, value in form.multi_items()}


def json_response(body: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=body, status_code=status_code)


@router.post("/contact")
async def submit_contact(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """
    Handle a contact form submission.

    Returns:
        200 {"success": true, "message": ...} when sent or silently dropped as spam
        400 {"error": ..., "details"?: [...]} on missing fields or failed verification
        500 {"error": ..., "details": ...} on delivery failure or unexpected error
    """
    try:
        data = await parse_submission_body(request)
        submission = SubmissionInput.from_mapping(data)

        # Honeypot - pretend success
        if submission.is_spam:
            logger.info("Honeypot field filled, dropping submission")
            return json_response({"success": True, "message": "Thanks!"}, 200)

        if submission.missing_required():
            logger.info("Contact submission rejected: missing required fields")
            return json_response({"error": "Missing required fields"}, 400)

        client_ip = request.headers.get(settings.client_ip_header, "")

        verification = await verify_turnstile(
            client, settings, submission.verification_token, client_ip
        )
        if not verification.success:
            return json_response(
                {"error": "Security verification failed", "details": verification.error_codes},
                400
            )

        email = build_outbound_email(submission, settings, client_ip)
        email_response = await send_email(client, settings, email)

        if not email_response.is_success:
            error_body = email_response.text
            logger.error(f"Resend error: {email_response.status_code} {error_body}")
            return json_response({"error": "Failed to send email", "details": error_body}, 500)

        logger.info(f"Contact message from {submission.email} sent to {settings.mail_to}")
        return json_response({"success": True, "message": "Message sent!"}, 200)

    except Exception as e:
        logger.exception(f"Error handling contact submission: {str(e)}")
        return json_response({"error": "Server error", "details": str(e)}, 500)
