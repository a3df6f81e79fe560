"""
Site settings API endpoints.
"""

import logging
from typing import Any

from django.db import transaction
from django.http import HttpRequest, HttpResponse
from ninja import Router
from ninja.errors import HttpError

from utils.auth import AuthBearer, require_admin
from .models import SettingType, SiteSetting
from .schemas import SettingIn, SettingOut
from .values import SettingValue

logger = logging.getLogger(__name__)

router = Router()

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@router.get("/public", response=dict[str, Any])
def public_settings(request: HttpRequest, response: HttpResponse):
    """Public settings as a flat key -> value map. Never cached."""
    for header, value in NO_CACHE_HEADERS.items():
        response[header] = value

    return {setting.key: setting.typed.value for setting in SiteSetting.objects.filter(is_public=True)}


@router.get("/", response=list[SettingOut], auth=AuthBearer())
def list_settings(request: HttpRequest):
    require_admin(request)
    return list(SiteSetting.objects.all())


@router.get("/{key}", response=SettingOut, auth=AuthBearer())
def get_setting(request: HttpRequest, key: str):
    require_admin(request)
    setting = SiteSetting.objects.filter(key=key).first()
    if setting is None:
        raise HttpError(404, "Setting not found")
    return setting


@router.put("/{key}", response=SettingOut, auth=AuthBearer())
def upsert_setting(request: HttpRequest, key: str, data: SettingIn):
    """Create or update a setting in one statement (admin only)."""
    require_admin(request)

    if data.type is not None and data.type not in SettingType.values:
        raise HttpError(400, f"Invalid type. Use one of: {', '.join(SettingType.values)}")

    with transaction.atomic():
        existing = SiteSetting.objects.select_for_update().filter(key=key).first()
        type_ = data.type or (existing.type if existing else SettingType.JSON)

        defaults = {"type": type_}
        if "value" in data.model_fields_set:
            defaults["value"] = SettingValue.from_input(data.value, type_).encode()
        elif existing is None:
            raise HttpError(400, "Value is required")
        elif type_ != existing.type:
            defaults["value"] = SettingValue.from_input(existing.typed.value, type_).encode()
        if data.description is not None:
            defaults["description"] = data.description
        if data.isPublic is not None:
            defaults["is_public"] = data.isPublic

        create_defaults = {"description": f"Updated {key}", "is_public": True, **defaults}
        setting, created = SiteSetting.objects.update_or_create(
            key=key, defaults=defaults, create_defaults=create_defaults
        )

    logger.info(f"[Settings] {'Created' if created else 'Updated'} setting '{key}'")
    return setting


@router.delete("/{key}", auth=AuthBearer())
def delete_setting(request: HttpRequest, key: str):
    require_admin(request)
    deleted, _ = SiteSetting.objects.filter(key=key).delete()
    if not deleted:
        raise HttpError(404, "Setting not found")
    return {"message": "Setting deleted"}
