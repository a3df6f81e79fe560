"""
Portfolio schemas for API.
"""

from datetime import datetime
from typing import Any
from uuid import UUID
from ninja import Schema
from pydantic import Field, ConfigDict


class SectionOut(Schema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str
    displayName: str = Field(validation_alias="display_name")
    sectionType: str = Field(validation_alias="section_type")
    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    content: dict[str, Any] = {}
    settings: dict[str, Any] = {}
    isActive: bool = Field(validation_alias="is_active", default=True)
    sortOrder: int = Field(validation_alias="sort_order", default=0)
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: datetime = Field(validation_alias="updated_at")


class SectionIn(Schema):
    sectionType: str | None = None
    displayName: str | None = None
    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    content: dict[str, Any] | None = None
    settings: dict[str, Any] | None = None
    isActive: bool | None = None
    sortOrder: int | None = None


class PageOut(Schema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    slug: str
    title: str
    description: str | None = None
    content: dict[str, Any] = {}
    metaTitle: str | None = Field(validation_alias="meta_title", default=None)
    metaDescription: str | None = Field(validation_alias="meta_description", default=None)
    isPublished: bool = Field(validation_alias="is_published", default=False)
    isHomepage: bool = Field(validation_alias="is_homepage", default=False)
    sortOrder: int = Field(validation_alias="sort_order", default=0)
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: datetime = Field(validation_alias="updated_at")


class PageIn(Schema):
    slug: str | None = None
    title: str | None = None
    description: str | None = None
    content: dict[str, Any] | None = None
    metaTitle: str | None = None
    metaDescription: str | None = None
    isPublished: bool | None = None
    isHomepage: bool | None = None
    sortOrder: int | None = None
