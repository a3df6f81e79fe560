"""
Project schemas for API.
"""

from datetime import datetime
from uuid import UUID
from ninja import Schema
from pydantic import Field, ConfigDict


class ProjectOut(Schema):
    """Project output - camelCase for frontend."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str
    slug: str
    description: str
    shortDesc: str | None = Field(validation_alias="short_desc", default=None)
    image: str | None = None
    technologies: list[str] = []
    highlights: list[str] = []
    featured: bool = False
    flagship: bool = False
    isActive: bool = Field(validation_alias="is_active", default=True)
    isDemo: bool = Field(validation_alias="is_demo", default=False)
    demoCategory: str | None = Field(validation_alias="demo_category", default=None)
    status: str
    category: str
    liveUrl: str | None = Field(validation_alias="live_url", default=None)
    githubUrl: str | None = Field(validation_alias="github_url", default=None)
    demoUrl: str | None = Field(validation_alias="demo_url", default=None)
    detailedDescription: str | None = Field(validation_alias="detailed_description", default=None)
    challenges: str | None = None
    solutions: str | None = None
    results: str | None = None
    clientName: str | None = Field(validation_alias="client_name", default=None)
    projectDuration: str | None = Field(validation_alias="project_duration", default=None)
    teamSize: str | None = Field(validation_alias="team_size", default=None)
    myRole: str | None = Field(validation_alias="my_role", default=None)
    sortOrder: int = Field(validation_alias="sort_order", default=0)
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: datetime = Field(validation_alias="updated_at")


class ProjectIn(Schema):
    """Project create/update input. Every field is optional so PATCH works too."""

    title: str | None = None
    slug: str | None = None
    description: str | None = None
    shortDesc: str | None = None
    image: str | None = None
    technologies: list[str] | None = None
    highlights: list[str] | None = None
    featured: bool | None = None
    flagship: bool | None = None
    isActive: bool | None = None
    isDemo: bool | None = None
    demoCategory: str | None = None
    status: str | None = None
    category: str | None = None
    liveUrl: str | None = None
    githubUrl: str | None = None
    demoUrl: str | None = None
    detailedDescription: str | None = None
    challenges: str | None = None
    solutions: str | None = None
    results: str | None = None
    clientName: str | None = None
    projectDuration: str | None = None
    teamSize: str | None = None
    myRole: str | None = None
    sortOrder: int | None = None


class DemosOut(Schema):
    """Active demo projects grouped by showcase category."""

    fullstack: list[ProjectOut] = []
    frontend: list[ProjectOut] = []
    backend: list[ProjectOut] = []
