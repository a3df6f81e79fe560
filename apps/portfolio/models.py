"""
Portfolio sections (homepage blocks) and standalone pages.
"""

import uuid
from django.db import models, transaction


class SectionType(models.TextChoices):
    HERO = "HERO", "Hero"
    ABOUT = "ABOUT", "About"
    PROJECTS = "PROJECTS", "Projects"
    SKILLS = "SKILLS", "Skills"
    EDUCATION = "EDUCATION", "Education"
    BLOG = "BLOG", "Blog"
    CONTACT = "CONTACT", "Contact"
    CUSTOM = "CUSTOM", "Custom"


class PortfolioSection(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    display_name = models.CharField(max_length=255, db_column="displayName")
    section_type = models.CharField(max_length=20, choices=SectionType.choices, db_column="sectionType")
    title = models.CharField(max_length=255, null=True, blank=True)
    subtitle = models.CharField(max_length=255, null=True, blank=True)
    description = models.TextField(null=True, blank=True)
    content = models.JSONField(default=dict, blank=True)
    settings = models.JSONField(default=dict, blank=True)
    is_active = models.BooleanField(default=True, db_column="isActive")
    sort_order = models.IntegerField(default=0, db_column="sortOrder")
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")
    updated_at = models.DateTimeField(auto_now=True, db_column="updatedAt")

    class Meta:
        db_table = "portfolio_sections"
        ordering = ["sort_order"]

    def __str__(self) -> str:
        return self.display_name


class PortfolioPage(models.Model):
    """A standalone page. At most one page is the homepage."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    slug = models.SlugField(max_length=255, unique=True)
    title = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    content = models.JSONField(default=dict, blank=True)
    meta_title = models.CharField(max_length=255, null=True, blank=True, db_column="metaTitle")
    meta_description = models.TextField(null=True, blank=True, db_column="metaDescription")
    is_published = models.BooleanField(default=False, db_column="isPublished")
    is_homepage = models.BooleanField(default=False, db_column="isHomepage")
    sort_order = models.IntegerField(default=0, db_column="sortOrder")
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")
    updated_at = models.DateTimeField(auto_now=True, db_column="updatedAt")

    class Meta:
        db_table = "portfolio_pages"
        ordering = ["sort_order"]
        constraints = [
            models.UniqueConstraint(
                fields=["is_homepage"],
                condition=models.Q(is_homepage=True),
                name="single_homepage",
            ),
        ]

    def __str__(self) -> str:
        return self.title

    def make_homepage(self) -> None:
        """Flag this page as the homepage and clear the flag everywhere else."""
        pages = PortfolioPage.objects.select_for_update()
        with transaction.atomic():
            # Lock the current homepage and this page before flipping flags
            list(pages.filter(models.Q(is_homepage=True) | models.Q(id=self.id)).values_list("id", flat=True))
            pages.filter(is_homepage=True).exclude(id=self.id).update(is_homepage=False)
            pages.filter(id=self.id).update(is_homepage=True)
        self.is_homepage = True
