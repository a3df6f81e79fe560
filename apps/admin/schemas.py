"""
Admin schemas for API.
"""

from datetime import datetime
from uuid import UUID
from ninja import Schema
from pydantic import Field, ConfigDict

from apps.blog.schemas import PostOut
from utils.pagination import PaginationOut


class AdminStatsOut(Schema):
    """Dashboard counters."""

    totalPosts: int
    publishedPosts: int
    draftPosts: int
    totalViews: int
    totalLikes: int
    totalComments: int
    pendingComments: int
    categories: int
    series: int
    projects: int
    skills: int
    contacts: int
    demoRequests: int


class AdminPostOut(PostOut):
    content: str
    metaTitle: str | None = Field(validation_alias="meta_title", default=None)
    metaDescription: str | None = Field(validation_alias="meta_description", default=None)


class AdminPostsListOut(Schema):
    items: list[PostOut]
    pagination: PaginationOut


class PostIn(Schema):
    """Post create/update input. Create requires title, content and categoryId."""

    title: str | None = None
    slug: str | None = None
    content: str | None = None
    excerpt: str | None = None
    coverImage: str | None = None
    tags: list[str] | None = None
    status: str | None = None
    featured: bool | None = None
    metaTitle: str | None = None
    metaDescription: str | None = None
    categoryId: UUID | None = None
    seriesId: UUID | None = None
    seriesOrder: int | None = None


class RelationIn(Schema):
    targetPostId: UUID
    relationType: str = "related"


class RelationOut(Schema):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    sourcePostId: UUID = Field(validation_alias="source_post_id")
    targetPostId: UUID = Field(validation_alias="target_post_id")
    relationType: str = Field(validation_alias="relation_type")
    createdAt: datetime = Field(validation_alias="created_at")


class AdminCommentPostOut(Schema):
    id: UUID
    title: str
    slug: str


class AdminCommentOut(Schema):
    """Comment as seen by the moderator, email included."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    postId: UUID = Field(validation_alias="post_id")
    post: AdminCommentPostOut
    author: str
    email: str
    website: str | None = None
    content: str
    isApproved: bool = Field(validation_alias="is_approved")
    likes: int = 0
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: datetime = Field(validation_alias="updated_at")


class CommentSummaryOut(Schema):
    total: int
    approved: int
    pending: int


class AdminCommentsListOut(Schema):
    items: list[AdminCommentOut]
    pagination: PaginationOut
    summary: CommentSummaryOut


class CommentActionIn(Schema):
    commentId: UUID
    action: str
