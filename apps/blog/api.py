"""
Public blog API endpoints - posts, comments, categories and series.
"""

import logging

from django.db import connection
from django.db.models import Count, F, Prefetch, Q
from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from utils.auth import get_optional_user, is_admin
from utils.identifiers import get_by_id, resolve_identifier
from utils.pagination import paginate
from .models import BlogCategory, BlogComment, BlogPost, BlogPostRelation, BlogSeries, PostStatus
from .moderation import is_spam, notify_new_comment, validate_comment
from .schemas import (
    CategoryOut,
    CommentIn,
    CommentOut,
    LikeIn,
    LikesOut,
    PostDetailOut,
    PostsListOut,
    RelatedPostOut,
    ReportIn,
    SeriesDetailOut,
    SeriesListOut,
)

logger = logging.getLogger(__name__)

router = Router()


def filter_by_tag(queryset, tag: str):
    """Narrow `queryset` to posts carrying `tag`."""
    if connection.vendor == "postgresql":
        return queryset.filter(tags__contains=[tag])

    # SQLite has no JSON containment lookup
    ids = [post.id for post in queryset.only("id", "tags") if tag in (post.tags or [])]
    return queryset.filter(id__in=ids)


def post_queryset():
    return BlogPost.objects.select_related("author", "category", "series").annotate(
        comment_count=Count("comments", filter=Q(comments__is_approved=True))
    )


def get_visible_post(request: HttpRequest, identifier: str, queryset=None) -> BlogPost:
    """Resolve a post by id or slug; unpublished posts are admin-only."""
    admin = is_admin(get_optional_user(request))
    post = resolve_identifier(
        queryset if queryset is not None else BlogPost.objects.all(),
        identifier,
        public_filters={"status": PostStatus.PUBLISHED},
        is_admin=admin,
        not_found="Post not found",
    )
    if not admin and not post.is_published:
        raise HttpError(404, "Post not found")
    return post


# ============== Posts ==============


@router.get("/posts", response=PostsListOut)
def list_posts(
    request: HttpRequest,
    page: int = 1,
    limit: int = 10,
    category: str | None = None,
    series: str | None = None,
    tag: str | None = None,
    search: str | None = None,
    status: str | None = None,
    published: bool | None = None,
):
    """List posts, paginated. Only admins can see drafts."""
    queryset = post_queryset()

    if is_admin(get_optional_user(request)):
        if published or (status and status.upper() == PostStatus.PUBLISHED):
            queryset = queryset.filter(status=PostStatus.PUBLISHED)
        elif status:
            queryset = queryset.filter(status=status.upper())
    else:
        queryset = queryset.filter(status=PostStatus.PUBLISHED)

    if category:
        queryset = queryset.filter(category__slug=category)
    if series:
        queryset = queryset.filter(series__slug=series)
    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) | Q(excerpt__icontains=search) | Q(content__icontains=search)
        )
    if tag:
        queryset = filter_by_tag(queryset, tag)

    queryset = queryset.order_by(
        F("series__sort_order").asc(nulls_last=True),
        F("series_order").asc(nulls_last=True),
        F("published_at").desc(nulls_last=True),
        "-created_at",
    )

    items, pagination = paginate(queryset, page, limit)
    return {"items": items, "pagination": pagination}


@router.get("/posts/{identifier}", response=PostDetailOut)
def get_post(request: HttpRequest, identifier: str):
    """Get a post by id or slug. Public reads count as views."""
    post = get_visible_post(request, identifier, post_queryset())

    if not is_admin(get_optional_user(request)):
        BlogPost.objects.filter(id=post.id).update(views=F("views") + 1)
        post.refresh_from_db(fields=["views"])

    return post


@router.post("/posts/{identifier}/like", response=LikesOut)
def like_post(request: HttpRequest, identifier: str, data: LikeIn):
    """Like or unlike a post. The counter never drops below zero."""
    post = get_visible_post(request, identifier)

    if data.action == "like":
        BlogPost.objects.filter(id=post.id).update(likes=F("likes") + 1)
    elif data.action == "unlike":
        BlogPost.objects.filter(id=post.id, likes__gt=0).update(likes=F("likes") - 1)
    else:
        raise HttpError(400, "Invalid action. Use 'like' or 'unlike'")

    post.refresh_from_db(fields=["likes"])
    return {"likes": post.likes}


@router.get("/posts/{identifier}/related", response=list[RelatedPostOut])
def list_related_posts(request: HttpRequest, identifier: str):
    """Posts linked to this one, in either direction."""
    admin = is_admin(get_optional_user(request))
    post = get_visible_post(request, identifier)

    relations = BlogPostRelation.objects.filter(Q(source_post=post) | Q(target_post=post)).select_related(
        "source_post__category", "source_post__author", "target_post__category", "target_post__author"
    )

    related = []
    for relation in relations.order_by("created_at"):
        other = relation.target_post if relation.source_post_id == post.id else relation.source_post
        if not admin and not other.is_published:
            continue
        related.append(
            {
                "id": other.id,
                "title": other.title,
                "slug": other.slug,
                "excerpt": other.excerpt,
                "status": other.status,
                "coverImage": other.cover_image,
                "category": other.category,
                "author": other.author,
                "publishedAt": other.published_at,
                "relationType": relation.relation_type,
                "relationId": relation.id,
            }
        )
    return related


# ============== Comments ==============


@router.get("/posts/{identifier}/comments", response=list[CommentOut])
def list_comments(request: HttpRequest, identifier: str):
    """Approved comments on a post, newest first."""
    post = get_visible_post(request, identifier)
    return list(post.comments.filter(is_approved=True).order_by("-created_at"))


@router.post("/posts/{identifier}/comments", response={201: CommentOut})
def create_comment(request: HttpRequest, identifier: str, data: CommentIn):
    """Submit a comment. Clean comments are published straight away."""
    submission = validate_comment(data.content, data.author, data.email, data.website)
    post = get_visible_post(request, identifier)

    spam = is_spam(submission.content, submission.author)
    comment = BlogComment.objects.create(
        post=post,
        content=submission.content,
        author=submission.author,
        email=submission.email,
        website=submission.website,
        is_approved=not spam,
    )

    if spam:
        logger.warning(f"[Comments] Comment {comment.id} on post {post.id} held as possible spam")

    notify_new_comment(comment)
    return 201, comment


@router.post("/comments/{comment_id}/like", response=LikesOut)
def like_comment(request: HttpRequest, comment_id: str):
    comment = get_by_id(BlogComment.objects.all(), comment_id, not_found="Comment not found")
    if not comment.is_approved:
        raise HttpError(403, "Cannot like an unapproved comment")

    BlogComment.objects.filter(id=comment.id).update(likes=F("likes") + 1)
    comment.refresh_from_db(fields=["likes"])
    return {"likes": comment.likes}


@router.post("/comments/{comment_id}/report")
def report_comment(request: HttpRequest, comment_id: str, data: ReportIn):
    """Flag a comment for the site owner's attention."""
    comment = get_by_id(BlogComment.objects.all(), comment_id, not_found="Comment not found")
    logger.warning(f"[Comments] Comment {comment.id} reported: {data.reason or 'no reason given'}")
    return {"message": "Comment reported"}


# ============== Categories ==============


@router.get("/categories", response=list[CategoryOut])
def list_categories(request: HttpRequest):
    """Active categories with published post counts."""
    return list(
        BlogCategory.objects.filter(is_active=True).annotate(
            post_count=Count("posts", filter=Q(posts__status=PostStatus.PUBLISHED))
        )
    )


# ============== Series ==============


def series_members(published_only: bool) -> Prefetch:
    posts = BlogPost.objects.order_by(F("series_order").asc(nulls_last=True), "-published_at")
    if published_only:
        posts = posts.filter(status=PostStatus.PUBLISHED)
    return Prefetch("posts", queryset=posts, to_attr="member_posts")


@router.get("/series", response=SeriesListOut)
def list_series(
    request: HttpRequest,
    page: int = 1,
    limit: int = 10,
    search: str | None = None,
    published: bool | None = None,
):
    """List series, paginated, with post counts and estimated reading time."""
    admin = is_admin(get_optional_user(request))
    queryset = BlogSeries.objects.select_related("author")

    if not admin:
        queryset = queryset.filter(is_active=True)
    if search:
        queryset = queryset.filter(Q(title__icontains=search) | Q(description__icontains=search))
    if published:
        published_ids = BlogPost.objects.filter(status=PostStatus.PUBLISHED, series__isnull=False).values(
            "series_id"
        )
        queryset = queryset.filter(id__in=published_ids)

    queryset = queryset.prefetch_related(series_members(published_only=bool(published) or not admin))
    queryset = queryset.order_by("sort_order", "-created_at")

    items, pagination = paginate(queryset, page, limit)
    return {"items": items, "pagination": pagination}


@router.get("/series/{identifier}", response=SeriesDetailOut)
def get_series(request: HttpRequest, identifier: str):
    """Get a series by id or slug with its posts in order."""
    admin = is_admin(get_optional_user(request))
    queryset = BlogSeries.objects.select_related("author").prefetch_related(
        series_members(published_only=not admin)
    )
    return resolve_identifier(
        queryset,
        identifier,
        public_filters={"is_active": True},
        is_admin=admin,
        not_found="Series not found",
    )
