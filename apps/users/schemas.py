"""
User schemas for API.
"""

from datetime import datetime
from uuid import UUID
from ninja import Schema
from pydantic import Field, ConfigDict


class UserProfileOut(Schema):
    """User profile output - camelCase for frontend compatibility."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )

    id: UUID
    email: str
    name: str | None = None
    role: str
    isActive: bool = Field(validation_alias="is_active", default=True)
    createdAt: datetime = Field(validation_alias="created_at")


class AuthorOut(Schema):
    """Author info embedded in posts and series."""

    id: UUID
    name: str | None = None
    email: str | None = None
