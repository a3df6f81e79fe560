"""
Comment submission rules.

A submission is validated field by field (each rule has its own message),
then screened against a small denylist. Clean comments are approved
immediately; anything that trips the denylist waits for an admin.
"""

import logging
import re
from dataclasses import dataclass

from django.conf import settings
from ninja.errors import HttpError

from utils.email import send_email

logger = logging.getLogger(__name__)

MAX_COMMENT_LENGTH = 1000
SPAM_WORDS = ("viagra", "casino", "lottery", "winner", "prize")
EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class CommentAction:
    APPROVE = "approve"
    REJECT = "reject"
    DELETE = "delete"

    ALL = (APPROVE, REJECT, DELETE)


@dataclass
class CommentSubmission:
    content: str
    author: str
    email: str
    website: str | None = None


def validate_comment(
    content: str | None, author: str | None, email: str | None, website: str | None = None
) -> CommentSubmission:
    """Check a raw submission and return it trimmed. Raises HttpError(400)."""
    content = (content or "").strip()
    author = (author or "").strip()
    email = (email or "").strip()

    if not content or not author or not email:
        raise HttpError(400, "Content, author, and email are required")
    if not EMAIL_REGEX.match(email):
        raise HttpError(400, "Invalid email address")
    if len(content) > MAX_COMMENT_LENGTH:
        raise HttpError(400, f"Comment too long (max {MAX_COMMENT_LENGTH} characters)")

    return CommentSubmission(content=content, author=author, email=email, website=(website or "").strip() or None)


def is_spam(content: str, author: str) -> bool:
    """Case-insensitive substring match of content and author against SPAM_WORDS."""
    haystacks = (content.lower(), author.lower())
    return any(word in text for word in SPAM_WORDS for text in haystacks)


def notify_new_comment(comment) -> None:
    """Tell the site owner about a new comment. Failures are only logged."""
    recipient = settings.CONTACT_EMAIL
    if not recipient:
        return

    result = send_email(
        to=recipient,
        subject=f"New comment on \"{comment.post.title}\"",
        template="blog/comment_notification.html",
        context={
            "comment": comment,
            "post": comment.post,
            "post_url": f"{settings.SITE_URL}/blog/{comment.post.slug}",
            "site_name": settings.SITE_NAME,
        },
    )
    if not result.get("success"):
        logger.warning(f"[Comments] Notification for comment {comment.id} not sent: {result.get('error')}")
