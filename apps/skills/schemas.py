"""
Skill schemas for API.
"""

from datetime import datetime
from uuid import UUID
from ninja import Schema
from pydantic import Field, ConfigDict


class SkillOut(Schema):
    """Skill output - camelCase for frontend."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str
    category: str
    level: int
    icon: str | None = None
    color: str | None = None
    isActive: bool = Field(validation_alias="is_active", default=True)
    sortOrder: int = Field(validation_alias="sort_order", default=0)
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: datetime = Field(validation_alias="updated_at")


class SkillIn(Schema):
    name: str | None = None
    category: str | None = None
    level: int | None = None
    icon: str | None = None
    color: str | None = None
    isActive: bool | None = None
    sortOrder: int | None = None
