"""
Admin API endpoints - dashboard stats, blog management and comment moderation.
"""

import logging

from django.db import transaction
from django.db.models import Count, Max, Q, Sum
from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from utils.auth import AuthBearer, require_admin
from utils.identifiers import get_by_id
from utils.pagination import paginate
from utils.text import slugify, unique_slug
from apps.blog.api import post_queryset, series_members
from apps.blog.models import BlogCategory, BlogComment, BlogPost, BlogPostRelation, BlogSeries, PostStatus
from apps.blog.moderation import CommentAction
from apps.blog.schemas import CategoryIn, CategoryOut, SeriesDetailOut, SeriesIn, SeriesOut
from apps.contact.models import Contact, DemoRequest
from apps.projects.models import Project
from apps.skills.models import Skill
from .schemas import (
    AdminCommentsListOut,
    AdminPostOut,
    AdminPostsListOut,
    AdminStatsOut,
    CommentActionIn,
    PostIn,
    RelationIn,
    RelationOut,
)

logger = logging.getLogger(__name__)

router = Router(auth=AuthBearer())


@router.get("/stats", response=AdminStatsOut)
def get_stats(request: HttpRequest):
    """Get admin dashboard stats."""
    require_admin(request)

    posts = BlogPost.objects.aggregate(
        total=Count("id"),
        published=Count("id", filter=Q(status=PostStatus.PUBLISHED)),
        views=Sum("views"),
        likes=Sum("likes"),
    )
    comments = BlogComment.objects.aggregate(
        total=Count("id"),
        pending=Count("id", filter=Q(is_approved=False)),
    )

    return AdminStatsOut(
        totalPosts=posts["total"],
        publishedPosts=posts["published"],
        draftPosts=posts["total"] - posts["published"],
        totalViews=posts["views"] or 0,
        totalLikes=posts["likes"] or 0,
        totalComments=comments["total"],
        pendingComments=comments["pending"],
        categories=BlogCategory.objects.count(),
        series=BlogSeries.objects.count(),
        projects=Project.objects.count(),
        skills=Skill.objects.count(),
        contacts=Contact.objects.count(),
        demoRequests=DemoRequest.objects.count(),
    )


# ============== Posts ==============


def _check_status(status: str | None) -> None:
    if status is not None and status not in PostStatus.values:
        raise HttpError(400, f"Invalid status. Use one of: {', '.join(PostStatus.values)}")


def _admin_post(post_id: str) -> BlogPost:
    return get_by_id(post_queryset(), post_id, not_found="Post not found")


@router.get("/blog/posts", response=AdminPostsListOut)
def list_posts(
    request: HttpRequest,
    page: int = 1,
    limit: int = 20,
    status: str | None = None,
    category: str | None = None,
    search: str | None = None,
):
    """List all posts, drafts included (admin only)."""
    require_admin(request)

    queryset = post_queryset()
    if status:
        queryset = queryset.filter(status=status.upper())
    if category:
        queryset = queryset.filter(category__slug=category)
    if search:
        queryset = queryset.filter(Q(title__icontains=search) | Q(excerpt__icontains=search))

    items, pagination = paginate(queryset.order_by("-updated_at"), page, limit)
    return {"items": items, "pagination": pagination}


@router.post("/blog/posts", response={201: AdminPostOut})
def create_post(request: HttpRequest, data: PostIn):
    """Create a new post (admin only)."""
    user = require_admin(request)

    if not data.title or not data.content or not data.categoryId:
        raise HttpError(400, "Title, content and category are required")
    _check_status(data.status)

    slug = slugify(data.slug or data.title)
    if not slug:
        raise HttpError(400, "Slug could not be derived from title")
    if BlogPost.objects.filter(slug=slug).exists():
        raise HttpError(409, "Slug already exists")

    category = get_by_id(BlogCategory.objects.all(), data.categoryId, not_found="Category not found")
    series = None
    if data.seriesId:
        series = get_by_id(BlogSeries.objects.all(), data.seriesId, not_found="Series not found")

    post = BlogPost(
        title=data.title,
        slug=slug,
        content=data.content,
        excerpt=data.excerpt,
        cover_image=data.coverImage,
        tags=data.tags or [],
        featured=bool(data.featured),
        meta_title=data.metaTitle,
        meta_description=data.metaDescription,
        author=user,
        category=category,
        series=series,
        series_order=data.seriesOrder,
    )
    post.mark_status(data.status or PostStatus.DRAFT)

    with transaction.atomic():
        post.save()

    logger.info(f"[Blog] Post '{post.slug}' created by {user.email}")
    return 201, _admin_post(str(post.id))


@router.get("/blog/posts/{post_id}", response=AdminPostOut)
def get_post(request: HttpRequest, post_id: str):
    require_admin(request)
    return _admin_post(post_id)


@router.put("/blog/posts/{post_id}", response=AdminPostOut)
def update_post(request: HttpRequest, post_id: str, data: PostIn):
    """Update a post (admin only)."""
    require_admin(request)
    post = get_by_id(BlogPost.objects.all(), post_id, not_found="Post not found")
    _check_status(data.status)

    if data.title is not None:
        post.title = data.title
    if data.slug is not None:
        slug = slugify(data.slug)
        if not slug:
            raise HttpError(400, "Slug cannot be empty")
        if BlogPost.objects.filter(slug=slug).exclude(id=post.id).exists():
            raise HttpError(409, "Slug already exists")
        post.slug = slug
    if data.content is not None:
        post.content = data.content
    if data.excerpt is not None:
        post.excerpt = data.excerpt
    if data.coverImage is not None:
        post.cover_image = data.coverImage
    if data.tags is not None:
        post.tags = data.tags
    if data.featured is not None:
        post.featured = data.featured
    if data.metaTitle is not None:
        post.meta_title = data.metaTitle
    if data.metaDescription is not None:
        post.meta_description = data.metaDescription
    if data.categoryId is not None:
        post.category = get_by_id(BlogCategory.objects.all(), data.categoryId, not_found="Category not found")
    if "seriesId" in data.model_fields_set:
        post.series = (
            get_by_id(BlogSeries.objects.all(), data.seriesId, not_found="Series not found")
            if data.seriesId
            else None
        )
    if data.seriesOrder is not None:
        post.series_order = data.seriesOrder
    if data.status is not None:
        post.mark_status(data.status)

    post.save()
    return _admin_post(str(post.id))


@router.delete("/blog/posts/{post_id}")
def delete_post(request: HttpRequest, post_id: str):
    """Delete a post with its comments and relations (admin only)."""
    require_admin(request)
    get_by_id(BlogPost.objects.all(), post_id, not_found="Post not found").delete()
    return {"message": "Post deleted"}


@router.post("/blog/posts/{post_id}/duplicate", response={201: AdminPostOut})
def duplicate_post(request: HttpRequest, post_id: str):
    """Copy a post as a new draft (admin only)."""
    user = require_admin(request)
    original = get_by_id(BlogPost.objects.all(), post_id, not_found="Post not found")

    copy = BlogPost.objects.create(
        title=f"{original.title} (Copy)",
        slug=unique_slug(BlogPost, f"{original.slug}-copy"),
        content=original.content,
        excerpt=original.excerpt,
        cover_image=original.cover_image,
        tags=list(original.tags or []),
        featured=False,
        meta_title=original.meta_title,
        meta_description=original.meta_description,
        category_id=original.category_id,
        author=user,
        status=PostStatus.DRAFT,
        published_at=None,
    )
    return 201, _admin_post(str(copy.id))


@router.post("/blog/posts/{post_id}/related", response={201: RelationOut})
def add_related_post(request: HttpRequest, post_id: str, data: RelationIn):
    """Link two posts (admin only)."""
    user = require_admin(request)
    source = get_by_id(BlogPost.objects.all(), post_id, not_found="Source post not found")
    target = get_by_id(BlogPost.objects.all(), data.targetPostId, not_found="Target post not found")

    if source.id == target.id:
        raise HttpError(400, "A post cannot be related to itself")

    exists = BlogPostRelation.objects.filter(
        Q(source_post=source, target_post=target) | Q(source_post=target, target_post=source)
    ).exists()
    if exists:
        raise HttpError(409, "Posts are already related")

    relation = BlogPostRelation.objects.create(
        source_post=source,
        target_post=target,
        relation_type=data.relationType or "related",
        created_by=user,
    )
    return 201, relation


@router.delete("/blog/posts/{post_id}/related/{relation_id}")
def remove_related_post(request: HttpRequest, post_id: str, relation_id: str):
    require_admin(request)
    post = get_by_id(BlogPost.objects.all(), post_id, not_found="Post not found")
    relation = get_by_id(
        BlogPostRelation.objects.filter(Q(source_post=post) | Q(target_post=post)),
        relation_id,
        not_found="Relation not found",
    )
    relation.delete()
    return {"message": "Relation removed"}


# ============== Categories ==============


@router.get("/blog/categories", response=list[CategoryOut])
def list_categories(request: HttpRequest):
    """All categories with total post counts (admin only)."""
    require_admin(request)
    return list(BlogCategory.objects.annotate(post_count=Count("posts")))


@router.post("/blog/categories", response={201: CategoryOut})
def create_category(request: HttpRequest, data: CategoryIn):
    require_admin(request)

    if not data.name or not data.name.strip():
        raise HttpError(400, "Name is required")

    slug = slugify(data.slug or data.name)
    if not slug:
        raise HttpError(400, "Slug cannot be empty")
    if BlogCategory.objects.filter(slug=slug).exists():
        raise HttpError(409, "Category with this slug already exists")

    category = BlogCategory.objects.create(
        name=data.name.strip(),
        slug=slug,
        description=data.description,
        color=data.color,
        icon=data.icon,
        is_active=data.isActive if data.isActive is not None else True,
        sort_order=data.sortOrder or 0,
    )
    return 201, category


@router.put("/blog/categories/{category_id}", response=CategoryOut)
def update_category(request: HttpRequest, category_id: str, data: CategoryIn):
    require_admin(request)
    category = get_by_id(BlogCategory.objects.all(), category_id, not_found="Category not found")

    if data.name is not None:
        category.name = data.name.strip()
    if data.slug is not None:
        slug = slugify(data.slug)
        if not slug:
            raise HttpError(400, "Slug cannot be empty")
        if BlogCategory.objects.filter(slug=slug).exclude(id=category.id).exists():
            raise HttpError(409, "Category with this slug already exists")
        category.slug = slug
    if data.description is not None:
        category.description = data.description
    if data.color is not None:
        category.color = data.color
    if data.icon is not None:
        category.icon = data.icon
    if data.isActive is not None:
        category.is_active = data.isActive
    if data.sortOrder is not None:
        category.sort_order = data.sortOrder

    category.save()
    return category


@router.delete("/blog/categories/{category_id}")
def delete_category(request: HttpRequest, category_id: str):
    """Delete an empty category (admin only)."""
    require_admin(request)
    category = get_by_id(BlogCategory.objects.all(), category_id, not_found="Category not found")

    post_count = category.posts.count()
    if post_count:
        raise HttpError(400, f"Cannot delete category with existing posts ({post_count}). Move or delete them first.")

    category.delete()
    return {"message": "Category deleted"}


# ============== Series ==============


def _series_queryset():
    return BlogSeries.objects.select_related("author").prefetch_related(series_members(published_only=False))


@router.get("/blog/series", response=list[SeriesOut])
def list_series(request: HttpRequest):
    require_admin(request)
    return list(_series_queryset().order_by("sort_order"))


@router.post("/blog/series", response={201: SeriesOut})
def create_series(request: HttpRequest, data: SeriesIn):
    """Create a series at the end of the current order (admin only)."""
    user = require_admin(request)

    if not data.title or not data.title.strip():
        raise HttpError(400, "Title is required")

    slug = slugify(data.slug or data.title)
    if not slug:
        raise HttpError(400, "Slug cannot be empty")
    if BlogSeries.objects.filter(slug=slug).exists():
        raise HttpError(409, "Series with this slug already exists")

    if data.sortOrder is not None:
        sort_order = data.sortOrder
    else:
        last = BlogSeries.objects.aggregate(last=Max("sort_order"))["last"]
        sort_order = (last or 0) + 1

    series = BlogSeries.objects.create(
        title=data.title.strip(),
        slug=slug,
        description=data.description,
        cover_image=data.coverImage,
        color=data.color,
        icon=data.icon,
        is_active=data.isActive if data.isActive is not None else True,
        sort_order=sort_order,
        author=user,
    )
    return 201, series


@router.get("/blog/series/{series_id}", response=SeriesDetailOut)
def get_series(request: HttpRequest, series_id: str):
    require_admin(request)
    return get_by_id(_series_queryset(), series_id, not_found="Series not found")


@router.put("/blog/series/{series_id}", response=SeriesOut)
def update_series(request: HttpRequest, series_id: str, data: SeriesIn):
    require_admin(request)
    series = get_by_id(BlogSeries.objects.all(), series_id, not_found="Series not found")

    if data.title is not None:
        series.title = data.title.strip()
    if data.slug is not None:
        slug = slugify(data.slug)
        if not slug:
            raise HttpError(400, "Slug cannot be empty")
        if BlogSeries.objects.filter(slug=slug).exclude(id=series.id).exists():
            raise HttpError(409, "Series with this slug already exists")
        series.slug = slug
    if data.description is not None:
        series.description = data.description
    if data.coverImage is not None:
        series.cover_image = data.coverImage
    if data.color is not None:
        series.color = data.color
    if data.icon is not None:
        series.icon = data.icon
    if data.isActive is not None:
        series.is_active = data.isActive
    if data.sortOrder is not None:
        series.sort_order = data.sortOrder

    series.save()
    return get_by_id(_series_queryset(), series_id)


@router.delete("/blog/series/{series_id}")
def delete_series(request: HttpRequest, series_id: str):
    """Delete an empty series (admin only)."""
    require_admin(request)
    series = get_by_id(BlogSeries.objects.all(), series_id, not_found="Series not found")

    post_count = series.posts.count()
    if post_count:
        raise HttpError(
            400,
            f"Cannot delete series with existing posts ({post_count}). Remove posts from the series first.",
        )

    series.delete()
    return {"message": "Series deleted"}


# ============== Comments ==============


@router.get("/comments", response=AdminCommentsListOut)
def list_comments(
    request: HttpRequest,
    status: str = "all",
    postId: str | None = None,
    page: int = 1,
    limit: int = 20,
):
    """Comments for moderation, with approval counts (admin only)."""
    require_admin(request)

    scope = BlogComment.objects.all()
    if postId:
        scope = scope.filter(post_id=get_by_id(BlogPost.objects.all(), postId, not_found="Post not found").id)

    queryset = scope.select_related("post").order_by("-created_at")
    if status == "pending":
        queryset = queryset.filter(is_approved=False)
    elif status == "approved":
        queryset = queryset.filter(is_approved=True)
    elif status != "all":
        raise HttpError(400, "Invalid status. Use 'pending', 'approved' or 'all'")

    items, pagination = paginate(queryset, page, limit)
    summary = scope.aggregate(
        total=Count("id"),
        approved=Count("id", filter=Q(is_approved=True)),
    )

    return {
        "items": items,
        "pagination": pagination,
        "summary": {
            "total": summary["total"],
            "approved": summary["approved"],
            "pending": summary["total"] - summary["approved"],
        },
    }


@router.patch("/comments")
def moderate_comment(request: HttpRequest, data: CommentActionIn):
    """Approve, reject or delete a comment (admin only)."""
    user = require_admin(request)

    if data.action not in CommentAction.ALL:
        raise HttpError(400, "Invalid action. Use 'approve', 'reject' or 'delete'")

    comment = BlogComment.objects.filter(id=data.commentId).first()
    if comment is None:
        raise HttpError(404, "Comment not found")

    if data.action == CommentAction.DELETE:
        comment.delete()
        logger.info(f"[Comments] Comment {data.commentId} deleted by {user.email}")
        return {"message": "Comment deleted"}

    comment.is_approved = data.action == CommentAction.APPROVE
    comment.save(update_fields=["is_approved", "updated_at"])
    outcome = "approved" if comment.is_approved else "rejected"
    logger.info(f"[Comments] Comment {comment.id} {outcome} by {user.email}")
    return {"message": f"Comment {outcome}", "id": str(comment.id), "isApproved": comment.is_approved}
