"""
JWT Authentication utilities for Django Ninja.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from django.conf import settings
from django.http import HttpRequest
from ninja.errors import HttpError
from ninja.security import HttpBearer

from apps.users.models import User, UserRole


def _user_from_token(token: str) -> User | None:
    payload = verify_token(token)
    if not payload:
        return None
    user_id = payload.get("userId")
    if not user_id:
        return None
    return User.objects.filter(id=user_id, is_active=True).first()


class AuthBearer(HttpBearer):
    """JWT Bearer token authentication."""

    def authenticate(self, request: HttpRequest, token: str) -> User | None:
        user = _user_from_token(token)
        if user:
            request.auth_user = user
        return user


def get_current_user(request: HttpRequest) -> User:
    """Get authenticated user from request."""
    return getattr(request, "auth_user", request.auth)


def get_optional_user(request: HttpRequest) -> User | None:
    """Resolve the bearer token on a public route, if one was sent."""
    if hasattr(request, "auth_user"):
        return request.auth_user

    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    user = None
    if scheme.lower() == "bearer" and token:
        user = _user_from_token(token.strip())
    request.auth_user = user
    return user


def is_admin(user: User | None) -> bool:
    return bool(user and user.role == UserRole.ADMIN)


def require_admin(request: HttpRequest) -> User:
    """Require admin role."""
    user = get_current_user(request)
    if not is_admin(user):
        raise HttpError(403, "Admin access required")
    return user


def create_token(user: User) -> str:
    """Create JWT token for user."""
    payload = {
        "userId": str(user.id),
        "email": user.email,
        "role": user.role,
        "exp": datetime.now(timezone.utc) + timedelta(hours=settings.JWT_EXPIRE_HOURS),
        "iat": datetime.now(timezone.utc),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> dict[str, Any] | None:
    """Verify JWT token and return payload."""
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except jwt.InvalidTokenError:
        return None
