"""
Django Ninja API configuration.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError, IntegrityError, connection
from django.http import HttpRequest, HttpResponse
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError
from ninja.renderers import JSONRenderer
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)


class SuccessWrapperRenderer(JSONRenderer):
    """Wrap all responses in {success: true, data: ...} format for frontend compatibility."""

    def render(self, request: HttpRequest, data: Any, *, response_status: int) -> Any:
        # Don't wrap error responses (they already have success: false)
        if isinstance(data, dict) and "success" in data:
            return super().render(request, data, response_status=response_status)

        if 200 <= response_status < 300:
            wrapped = {"success": True, "data": data}
        else:
            wrapped = {"success": False, "error": data}

        return super().render(request, wrapped, response_status=response_status)


api = NinjaAPI(
    title="Portfolio CMS API",
    version="1.0.0",
    description="Portfolio, blog and academic progress API",
    renderer=SuccessWrapperRenderer(),
)


@api.exception_handler(ValidationError)
def validation_errors(request: HttpRequest, exc: ValidationError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": exc.errors},
        status=422,
    )


@api.exception_handler(PydanticValidationError)
def pydantic_validation_errors(request: HttpRequest, exc: PydanticValidationError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": exc.errors()},
        status=422,
    )


@api.exception_handler(HttpError)
def http_error_handler(request: HttpRequest, exc: HttpError) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": str(exc)},
        status=exc.status_code,
    )


@api.exception_handler(IntegrityError)
def integrity_error_handler(request: HttpRequest, exc: IntegrityError) -> HttpResponse:
    # Lost a race on a unique constraint (slug, key, homepage flag)
    logger.warning(f"[API] Integrity error on {request.method} {request.path}: {exc}")
    return api.create_response(
        request,
        {"success": False, "error": "Resource already exists"},
        status=409,
    )


@api.exception_handler(ObjectDoesNotExist)
def not_found_handler(request: HttpRequest, exc: ObjectDoesNotExist) -> HttpResponse:
    return api.create_response(
        request,
        {"success": False, "error": "Not found"},
        status=404,
    )


@api.exception_handler(Exception)
def generic_error_handler(request: HttpRequest, exc: Exception) -> HttpResponse:
    logger.exception(f"[API] Unhandled error on {request.method} {request.path}")
    return api.create_response(
        request,
        {"success": False, "error": "Internal server error"},
        status=500,
    )


# Health check
@api.get("/health")
def health_check(request: HttpRequest):
    """Database connectivity check with content counts."""
    from apps.users.models import User
    from apps.site_settings.models import SiteSetting
    from apps.blog.models import BlogCategory
    from apps.skills.models import Skill

    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        counts = {
            "users": User.objects.count(),
            "siteSettings": SiteSetting.objects.count(),
            "blogCategories": BlogCategory.objects.count(),
            "skills": Skill.objects.count(),
        }
    except DatabaseError as e:
        logger.error(f"[Health] Database check failed: {e}")
        return api.create_response(
            request,
            {"success": False, "status": "error", "database": "disconnected", "timestamp": timestamp},
            status=500,
        )

    return {"status": "healthy", "database": "connected", "timestamp": timestamp, "data": counts}


# Import and register routers
from apps.auth.api import router as auth_router
from apps.projects.api import router as projects_router
from apps.skills.api import router as skills_router
from apps.academic.api import router as academic_router
from apps.blog.api import router as blog_router
from apps.admin.api import router as admin_router
from apps.portfolio.api import sections_router, pages_router
from apps.site_settings.api import router as settings_router
from apps.contact.api import router as contact_router
from apps.uploads.api import router as uploads_router
from apps.feeds.api import router as feeds_router

api.add_router("/auth", auth_router, tags=["Auth"])
api.add_router("/projects", projects_router, tags=["Projects"])
api.add_router("/skills", skills_router, tags=["Skills"])
api.add_router("/academic", academic_router, tags=["Academic"])
api.add_router("/blog", blog_router, tags=["Blog"])
api.add_router("/admin", admin_router, tags=["Admin"])
api.add_router("/sections", sections_router, tags=["Portfolio"])
api.add_router("/pages", pages_router, tags=["Portfolio"])
api.add_router("/settings", settings_router, tags=["Settings"])
api.add_router("", contact_router, tags=["Contact"])
api.add_router("/upload", uploads_router, tags=["Uploads"])
api.add_router("", feeds_router, tags=["Feeds"])
