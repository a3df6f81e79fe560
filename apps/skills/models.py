"""
Skill model - technical and academic skills shown on the portfolio.
"""

import uuid
from django.db import models


class SkillCategory(models.TextChoices):
    FRONTEND = "FRONTEND", "Frontend"
    BACKEND = "BACKEND", "Backend"
    DATABASE = "DATABASE", "Database"
    DEVOPS = "DEVOPS", "DevOps"
    TOOLS = "TOOLS", "Tools"
    ACADEMIC = "ACADEMIC", "Academic"
    OTHER = "OTHER", "Other"


class Skill(models.Model):
    """A named skill with a 0-100 proficiency level."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    category = models.CharField(max_length=20, choices=SkillCategory.choices, default=SkillCategory.OTHER)
    level = models.IntegerField(default=50)
    icon = models.CharField(max_length=255, null=True, blank=True)
    color = models.CharField(max_length=50, null=True, blank=True)
    is_active = models.BooleanField(default=True, db_column="isActive")
    sort_order = models.IntegerField(default=0, db_column="sortOrder")
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")
    updated_at = models.DateTimeField(auto_now=True, db_column="updatedAt")

    class Meta:
        db_table = "skills"
        ordering = ["category", "sort_order", "name"]

    def __str__(self) -> str:
        return self.name
