"""
Site setting schemas for API.
"""

from datetime import datetime
from typing import Any
from uuid import UUID
from ninja import Schema
from pydantic import Field, ConfigDict


class SettingOut(Schema):
    """A setting with its value already decoded."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    key: str
    value: Any = None
    type: str
    description: str | None = None
    isPublic: bool = Field(validation_alias="is_public", default=False)
    updatedAt: datetime = Field(validation_alias="updated_at")

    @staticmethod
    def resolve_value(obj):
        return obj.typed.value


class SettingIn(Schema):
    value: Any = None
    type: str | None = None
    description: str | None = None
    isPublic: bool | None = None
