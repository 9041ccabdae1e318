"""
Cloudflare Turnstile verification.
Checks a widget token against the siteverify endpoint before any mail is sent.
"""

import httpx
import logging
from contact_relay.core.config import Settings
from contact_relay.models.contact import VerificationResult

logger = logging.getLogger(__name__)


async def verify_turnstile(
    client: httpx.AsyncClient,
    settings: Settings,
    token: str,
    remote_ip: str = ""
) -> VerificationResult:
    """
    Verify a Turnstile token with Cloudflare.

    Args:
        client: Shared HTTP client for this request
        settings: Provides the secret key and siteverify URL
        token: Token submitted by the widget
        remote_ip: Caller IP as reported by the edge, may be empty

    Returns:
        VerificationResult: success flag plus any error codes

    Network errors and non-JSON replies propagate to the caller.
    """
    if not settings.turnstile_secret_key:
        logger.warning("TURNSTILE_SECRET_KEY is not configured, verification will be rejected")

    response = await client.post(
        settings.turnstile_verify_url,
        data={
            "secret": settings.effective_turnstile_secret,
            "response": token,
            "remoteip": remote_ip,
        },
    )

    result = VerificationResult.model_validate(response.json())

    if not result.success:
        logger.warning(f"Turnstile verification failed: {result.error_codes}")

    return result
