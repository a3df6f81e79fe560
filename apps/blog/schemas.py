"""
Blog schemas for API.
"""

from datetime import datetime
from uuid import UUID
from ninja import Schema
from pydantic import Field, ConfigDict

from apps.users.schemas import AuthorOut
from utils.pagination import PaginationOut


class CategoryRefOut(Schema):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str
    color: str | None = None
    icon: str | None = None


class SeriesRefOut(Schema):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    slug: str
    color: str | None = None
    icon: str | None = None


class CategoryOut(Schema):
    """Category with the number of published posts in it."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    name: str
    slug: str
    description: str | None = None
    color: str | None = None
    icon: str | None = None
    isActive: bool = Field(validation_alias="is_active", default=True)
    sortOrder: int = Field(validation_alias="sort_order", default=0)
    postCount: int = 0

    @staticmethod
    def resolve_postCount(obj):
        return getattr(obj, "post_count", 0)


class CategoryIn(Schema):
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    color: str | None = None
    icon: str | None = None
    isActive: bool | None = None
    sortOrder: int | None = None


class PostOut(Schema):
    """Post list output - camelCase for frontend."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str
    slug: str
    excerpt: str | None = None
    coverImage: str | None = Field(validation_alias="cover_image", default=None)
    status: str
    tags: list[str] = []
    featured: bool = False
    views: int = 0
    likes: int = 0
    readingTime: int = Field(validation_alias="reading_time", default=1)
    commentCount: int = 0
    authorId: UUID = Field(validation_alias="author_id")
    author: AuthorOut | None = None
    category: CategoryRefOut
    series: SeriesRefOut | None = None
    seriesOrder: int | None = Field(validation_alias="series_order", default=None)
    publishedAt: datetime | None = Field(validation_alias="published_at", default=None)
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: datetime = Field(validation_alias="updated_at")

    @staticmethod
    def resolve_commentCount(obj):
        return getattr(obj, "comment_count", 0)


class CommentOut(Schema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    postId: UUID = Field(validation_alias="post_id")
    author: str
    website: str | None = None
    content: str
    isApproved: bool = Field(validation_alias="is_approved")
    likes: int = 0
    createdAt: datetime = Field(validation_alias="created_at")


class PostDetailOut(PostOut):
    """Post detail output with content, SEO and latest approved comments."""

    content: str
    metaTitle: str | None = Field(validation_alias="meta_title", default=None)
    metaDescription: str | None = Field(validation_alias="meta_description", default=None)
    comments: list[CommentOut] = []

    @staticmethod
    def resolve_comments(obj):
        return list(obj.comments.filter(is_approved=True).order_by("-created_at")[:10])


class PostsListOut(Schema):
    """Paginated posts list response."""

    items: list[PostOut]
    pagination: PaginationOut


class RelatedPostOut(Schema):
    id: UUID
    title: str
    slug: str
    excerpt: str | None = None
    status: str
    coverImage: str | None = None
    category: CategoryRefOut | None = None
    author: AuthorOut | None = None
    publishedAt: datetime | None = None
    relationType: str
    relationId: UUID


class LikeIn(Schema):
    action: str = "like"


class LikesOut(Schema):
    likes: int


class CommentIn(Schema):
    content: str | None = None
    author: str | None = None
    email: str | None = None
    website: str | None = None


class ReportIn(Schema):
    reason: str | None = None


class SeriesPostOut(Schema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str
    slug: str
    excerpt: str | None = None
    coverImage: str | None = Field(validation_alias="cover_image", default=None)
    status: str
    seriesOrder: int | None = Field(validation_alias="series_order", default=None)
    readingTime: int = Field(validation_alias="reading_time", default=1)
    views: int = 0
    likes: int = 0
    tags: list[str] = []
    publishedAt: datetime | None = Field(validation_alias="published_at", default=None)


class SeriesOut(Schema):
    """Series with member count and total estimated reading time."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str
    slug: str
    description: str | None = None
    coverImage: str | None = Field(validation_alias="cover_image", default=None)
    color: str | None = None
    icon: str | None = None
    isActive: bool = Field(validation_alias="is_active", default=True)
    sortOrder: int = Field(validation_alias="sort_order", default=0)
    author: AuthorOut | None = None
    totalPosts: int = 0
    estimatedTime: int = 0
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: datetime = Field(validation_alias="updated_at")

    @staticmethod
    def resolve_totalPosts(obj):
        return len(_member_posts(obj))

    @staticmethod
    def resolve_estimatedTime(obj):
        return sum(post.reading_time for post in _member_posts(obj))


class SeriesDetailOut(SeriesOut):
    posts: list[SeriesPostOut] = []

    @staticmethod
    def resolve_posts(obj):
        return _member_posts(obj)


class SeriesListOut(Schema):
    items: list[SeriesOut]
    pagination: PaginationOut


class SeriesIn(Schema):
    title: str | None = None
    slug: str | None = None
    description: str | None = None
    coverImage: str | None = None
    color: str | None = None
    icon: str | None = None
    isActive: bool | None = None
    sortOrder: int | None = None


def _member_posts(series) -> list:
    # Views prefetch the visible members into `member_posts`
    if hasattr(series, "member_posts"):
        return series.member_posts
    return list(series.posts.order_by("series_order", "-published_at"))
