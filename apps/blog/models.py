"""
Blog models - categories, series, posts, comments and post relations.
"""

import uuid
from django.db import models
from django.utils import timezone

from apps.users.models import User
from utils.text import reading_time


class PostStatus(models.TextChoices):
    DRAFT = "DRAFT", "Draft"
    PUBLISHED = "PUBLISHED", "Published"


class BlogCategory(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField(null=True, blank=True)
    color = models.CharField(max_length=50, null=True, blank=True)
    icon = models.CharField(max_length=255, null=True, blank=True)
    is_active = models.BooleanField(default=True, db_column="isActive")
    sort_order = models.IntegerField(default=0, db_column="sortOrder")
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")
    updated_at = models.DateTimeField(auto_now=True, db_column="updatedAt")

    class Meta:
        db_table = "blog_categories"
        ordering = ["sort_order", "name"]

    def __str__(self) -> str:
        return self.name


class BlogSeries(models.Model):
    """An ordered run of posts sharing a theme."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField(null=True, blank=True)
    cover_image = models.CharField(max_length=500, null=True, blank=True, db_column="coverImage")
    color = models.CharField(max_length=50, null=True, blank=True)
    icon = models.CharField(max_length=255, null=True, blank=True)
    is_active = models.BooleanField(default=True, db_column="isActive")
    sort_order = models.IntegerField(default=0, db_column="sortOrder")
    author = models.ForeignKey(
        User, on_delete=models.SET_NULL, null=True, blank=True, related_name="series", db_column="authorId"
    )
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")
    updated_at = models.DateTimeField(auto_now=True, db_column="updatedAt")

    class Meta:
        db_table = "blog_series"
        ordering = ["sort_order", "-created_at"]

    def __str__(self) -> str:
        return self.title


class BlogPost(models.Model):
    """Blog post model."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    content = models.TextField()
    excerpt = models.TextField(null=True, blank=True)
    cover_image = models.CharField(max_length=500, null=True, blank=True, db_column="coverImage")
    tags = models.JSONField(default=list, blank=True)
    status = models.CharField(max_length=20, choices=PostStatus.choices, default=PostStatus.DRAFT)
    featured = models.BooleanField(default=False)
    meta_title = models.CharField(max_length=255, null=True, blank=True, db_column="metaTitle")
    meta_description = models.TextField(null=True, blank=True, db_column="metaDescription")
    views = models.IntegerField(default=0)
    likes = models.IntegerField(default=0)
    author = models.ForeignKey(User, on_delete=models.CASCADE, related_name="posts", db_column="authorId")
    category = models.ForeignKey(
        BlogCategory, on_delete=models.PROTECT, related_name="posts", db_column="categoryId"
    )
    series = models.ForeignKey(
        BlogSeries, on_delete=models.PROTECT, null=True, blank=True, related_name="posts", db_column="seriesId"
    )
    series_order = models.IntegerField(null=True, blank=True, db_column="seriesOrder")
    published_at = models.DateTimeField(null=True, blank=True, db_column="publishedAt")
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")
    updated_at = models.DateTimeField(auto_now=True, db_column="updatedAt")

    class Meta:
        db_table = "blog_posts"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED

    @property
    def reading_time(self) -> int:
        return reading_time(self.content)

    def mark_status(self, status: str) -> None:
        """Change status. published_at is stamped on the first publish only."""
        self.status = status
        if status == PostStatus.PUBLISHED and self.published_at is None:
            self.published_at = timezone.now()


class BlogComment(models.Model):
    """Reader comment. Only approved comments are shown publicly."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    post = models.ForeignKey(BlogPost, on_delete=models.CASCADE, related_name="comments", db_column="postId")
    author = models.CharField(max_length=255)
    email = models.EmailField()
    website = models.CharField(max_length=500, null=True, blank=True)
    content = models.TextField()
    is_approved = models.BooleanField(default=False, db_column="isApproved")
    likes = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")
    updated_at = models.DateTimeField(auto_now=True, db_column="updatedAt")

    class Meta:
        db_table = "blog_comments"
        ordering = ["-created_at"]


class BlogPostRelation(models.Model):
    """Undirected "see also" link between two posts, stored once."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    source_post = models.ForeignKey(
        BlogPost, on_delete=models.CASCADE, related_name="outgoing_relations", db_column="sourcePostId"
    )
    target_post = models.ForeignKey(
        BlogPost, on_delete=models.CASCADE, related_name="incoming_relations", db_column="targetPostId"
    )
    relation_type = models.CharField(max_length=50, default="related", db_column="relationType")
    created_by = models.ForeignKey(
        User, on_delete=models.SET_NULL, null=True, blank=True, related_name="+", db_column="createdBy"
    )
    created_at = models.DateTimeField(auto_now_add=True, db_column="createdAt")

    class Meta:
        db_table = "blog_post_relations"
        constraints = [
            models.UniqueConstraint(fields=["source_post", "target_post"], name="unique_post_relation"),
        ]
