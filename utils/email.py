"""
Outbound email through the Resend HTTP API.

Sending never raises: callers get an EmailResult and decide what to log.
A failed notification must not fail the request that triggered it.
"""

import logging
from typing import Any, TypedDict

import httpx
from django.conf import settings
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)


class EmailResult(TypedDict, total=False):
    success: bool
    id: str
    error: str


def send_email(to: str, subject: str, template: str, context: dict[str, Any]) -> EmailResult:
    """Render `template` with `context` and send it to `to`."""
    if not settings.RESEND_API_KEY:
        logger.warning(f"[Email] RESEND_API_KEY not set, skipping '{subject}' to {to}")
        return {"success": False, "error": "Email provider not configured"}

    html = render_to_string(template, context)

    try:
        response = httpx.post(
            settings.RESEND_API_URL,
            headers={
                "Authorization": f"Bearer {settings.RESEND_API_KEY}",
                "Content-Type": "application/json",
            },
            json={
                "from": settings.EMAIL_FROM,
                "to": [to],
                "subject": subject,
                "html": html,
            },
            timeout=10.0,
        )
    except httpx.HTTPError as e:
        logger.error(f"[Email] Sending '{subject}' to {to} failed: {e}")
        return {"success": False, "error": str(e)}

    if response.status_code >= 300:
        logger.error(f"[Email] Provider rejected '{subject}' to {to}: {response.status_code} {response.text}")
        return {"success": False, "error": f"Provider returned {response.status_code}"}

    try:
        message_id = response.json().get("id", "")
    except ValueError:
        message_id = ""
    logger.info(f"[Email] Sent '{subject}' to {to} ({message_id})")
    return {"success": True, "id": message_id}
