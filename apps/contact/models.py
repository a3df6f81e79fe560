"""
Contact form submissions and work inquiries.
"""

import uuid
from django.db import models


class ContactStatus(models.TextChoices):
    NEW = "NEW", "New"
    READ = "READ", "Read"
    REPLIED = "REPLIED", "Replied"


class Contact(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    subject = models.CharField(max_length=255)
    message = models.TextField()
    status = models.CharField(max_length=20, choices=ContactStatus.choices, default=ContactStatus.NEW)
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")

    class Meta:
        db_table = "contacts"
        ordering = ["-created_at"]


class DemoRequest(models.Model):
    """A work inquiry sent from the demos page."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    company = models.CharField(max_length=255, null=True, blank=True)
    position = models.CharField(max_length=255, null=True, blank=True)
    project_type = models.CharField(max_length=255, null=True, blank=True, db_column="projectType")
    timeline = models.CharField(max_length=255, null=True, blank=True)
    description = models.TextField()
    status = models.CharField(max_length=20, choices=ContactStatus.choices, default=ContactStatus.NEW)
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")

    class Meta:
        db_table = "demo_requests"
        ordering = ["-created_at"]
