"""
Portfolio project model.
"""

import uuid
from django.db import models


class ProjectStatus(models.TextChoices):
    READY = "READY", "Ready"
    WIP = "WIP", "Work in progress"
    ARCHIVED = "ARCHIVED", "Archived"


class ProjectCategory(models.TextChoices):
    COMMERCIAL = "COMMERCIAL", "Commercial"
    CLIENT = "CLIENT", "Client"
    OPENSOURCE = "OPENSOURCE", "Open source"
    DEMO = "DEMO", "Demo"
    PERSONAL = "PERSONAL", "Personal"


class DemoCategory(models.TextChoices):
    FULLSTACK = "fullstack", "Full-stack"
    FRONTEND = "frontend", "Frontend"
    BACKEND = "backend", "Backend"


class Project(models.Model):
    """Project shown on the portfolio, optionally featured as a demo."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField()
    short_desc = models.CharField(max_length=500, null=True, blank=True, db_column="shortDesc")
    image = models.CharField(max_length=500, null=True, blank=True)
    technologies = models.JSONField(default=list)
    highlights = models.JSONField(default=list)

    featured = models.BooleanField(default=False)
    flagship = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True, db_column="isActive")
    is_demo = models.BooleanField(default=False, db_column="isDemo")
    demo_category = models.CharField(
        max_length=20, choices=DemoCategory.choices, null=True, blank=True, db_column="demoCategory"
    )
    status = models.CharField(max_length=20, choices=ProjectStatus.choices, default=ProjectStatus.READY)
    category = models.CharField(max_length=20, choices=ProjectCategory.choices, default=ProjectCategory.OPENSOURCE)

    live_url = models.URLField(max_length=500, null=True, blank=True, db_column="liveUrl")
    github_url = models.URLField(max_length=500, null=True, blank=True, db_column="githubUrl")
    demo_url = models.URLField(max_length=500, null=True, blank=True, db_column="demoUrl")

    detailed_description = models.TextField(null=True, blank=True, db_column="detailedDescription")
    challenges = models.TextField(null=True, blank=True)
    solutions = models.TextField(null=True, blank=True)
    results = models.TextField(null=True, blank=True)
    client_name = models.CharField(max_length=255, null=True, blank=True, db_column="clientName")
    project_duration = models.CharField(max_length=100, null=True, blank=True, db_column="projectDuration")
    team_size = models.CharField(max_length=100, null=True, blank=True, db_column="teamSize")
    my_role = models.CharField(max_length=255, null=True, blank=True, db_column="myRole")

    sort_order = models.IntegerField(default=0, db_column="sortOrder")
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")
    updated_at = models.DateTimeField(auto_now=True, db_column="updatedAt")

    class Meta:
        db_table = "projects"
        ordering = ["-flagship", "-featured", "sort_order", "-created_at"]

    def __str__(self) -> str:
        return self.title
