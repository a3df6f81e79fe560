"""
Site settings - a key/value store with typed values.
"""

import uuid
from django.db import models

from . import values
from .values import SettingValue


class SettingType(models.TextChoices):
    TEXT = values.TEXT, "Text"
    BOOLEAN = values.BOOLEAN, "Boolean"
    NUMBER = values.NUMBER, "Number"
    JSON = values.JSON, "JSON"


class SiteSetting(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    key = models.CharField(max_length=255, unique=True)
    value = models.TextField(blank=True, default="")
    type = models.CharField(max_length=20, choices=SettingType.choices, default=SettingType.TEXT)
    description = models.TextField(null=True, blank=True)
    is_public = models.BooleanField(default=False, db_column="isPublic")
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")
    updated_at = models.DateTimeField(auto_now=True, db_column="updatedAt")

    class Meta:
        db_table = "site_settings"
        ordering = ["key"]

    def __str__(self) -> str:
        return self.key

    @property
    def typed(self) -> SettingValue:
        return SettingValue.decode(self.value, self.type)
