"""
Contact schemas for API.
"""

from datetime import datetime
from uuid import UUID
from ninja import Schema
from pydantic import Field, ConfigDict

from utils.pagination import PaginationOut


class ContactIn(Schema):
    name: str | None = None
    email: str | None = None
    subject: str | None = None
    message: str | None = None


class DemoRequestIn(Schema):
    name: str | None = None
    email: str | None = None
    description: str | None = None
    company: str | None = None
    position: str | None = None
    workType: str | None = None
    timeline: str | None = None


class SubmittedOut(Schema):
    message: str
    id: UUID


class ContactOut(Schema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str
    email: str
    subject: str
    message: str
    status: str
    createdAt: datetime = Field(validation_alias="created_at")


class DemoRequestOut(Schema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str
    email: str
    company: str | None = None
    position: str | None = None
    workType: str | None = Field(validation_alias="project_type", default=None)
    timeline: str | None = None
    description: str
    status: str
    createdAt: datetime = Field(validation_alias="created_at")


class ContactsListOut(Schema):
    items: list[ContactOut]
    pagination: PaginationOut


class DemoRequestsListOut(Schema):
    items: list[DemoRequestOut]
    pagination: PaginationOut
