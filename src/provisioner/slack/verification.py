"""Slack request signature verification as a FastAPI dependency."""

import logging
from collections.abc import Mapping

from fastapi import Depends, HTTPException, Request
from slack_sdk.signature import SignatureVerifier

from provisioner.config import Settings
from provisioner.dependencies import get_app_settings
from provisioner.models.slack import VerifiedRequest

logger = logging.getLogger(__name__)


def is_authentic(signing_secret: str, body: bytes, headers: Mapping[str, str]) -> bool:
    """Check a request body against Slack's v0 HMAC-SHA256 signature headers.

    The comparison is constant-time and requests older than five minutes are
    rejected. A missing secret, missing headers or a malformed timestamp all
    count as inauthentic, as does a signature with non-ASCII characters,
    which hmac.compare_digest refuses to compare.
    """
    if not signing_secret:
        return False

    timestamp = headers.get("X-Slack-Request-Timestamp")
    signature = headers.get("X-Slack-Signature")
    if not timestamp or not signature or not signature.isascii():
        return False

    verifier = SignatureVerifier(signing_secret=signing_secret)
    try:
        return verifier.is_valid(body=body.decode("utf-8"), timestamp=timestamp, signature=signature)
    except ValueError:
        # non-numeric timestamp or a body that is not UTF-8
        return False


async def verify_slack_request(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> VerifiedRequest:
    """Verify the Slack signature and hand back the raw body for parsing.

    Reads the raw body FIRST so verification uses the exact bytes Slack
    signed. Starlette caches the body, so the request stays readable.

    Raises HTTPException(401) if the signature is invalid.
    """
    body = await request.body()

    if not is_authentic(settings.slack_signing_secret, body, request.headers):
        logger.warning("Rejected request to %s: invalid Slack signature", request.url.path)
        raise HTTPException(status_code=401, detail="Invalid Slack signature")

    return VerifiedRequest(body=body, headers=dict(request.headers))
