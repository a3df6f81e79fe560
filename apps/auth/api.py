"""
Auth API endpoints.
"""

import logging
from datetime import datetime, timezone

from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from apps.users.models import User
from apps.users.schemas import UserProfileOut
from utils.auth import AuthBearer, create_token, get_current_user
from .passwords import verify_password
from .schemas import LoginIn, AuthOut

logger = logging.getLogger(__name__)

router = Router()


@router.post("/login", response=AuthOut)
def login(request: HttpRequest, data: LoginIn):
    """Login with email and password."""
    email = data.email.lower().strip()

    user = User.objects.filter(email=email, is_active=True).first()
    if not user or not user.password:
        raise HttpError(401, "Invalid email or password")

    if not verify_password(data.password, user.password):
        logger.info(f"[Auth] Failed login for {email}")
        raise HttpError(401, "Invalid email or password")

    user.last_login = datetime.now(timezone.utc)
    user.save(update_fields=["last_login"])

    token = create_token(user)
    return AuthOut(user=user, token=token)


@router.get("/me", response=UserProfileOut, auth=AuthBearer())
def get_me(request: HttpRequest):
    """Get current authenticated user."""
    user = get_current_user(request)
    return user
