"""
RSS feed and sitemap endpoints.
"""

import logging

from django.conf import settings
from django.http import HttpRequest, HttpResponse
from django.template.loader import render_to_string
from django.utils.feedgenerator import Rss201rev2Feed
from ninja import Router

from apps.blog.models import BlogPost, PostStatus
from .sitemaps import build_urls

logger = logging.getLogger(__name__)

router = Router()

FEED_SIZE = 50
FEED_HEADERS = {"Cache-Control": "public, max-age=3600, s-maxage=3600"}


def xml_response(content: str) -> HttpResponse:
    response = HttpResponse(content, content_type="application/xml")
    for header, value in FEED_HEADERS.items():
        response[header] = value
    return response


def build_feed(request: HttpRequest) -> Rss201rev2Feed:
    """RSS 2.0 feed of the latest published posts."""
    site_url = settings.SITE_URL
    feed = Rss201rev2Feed(
        title=settings.SITE_NAME,
        link=site_url,
        description=settings.SITE_DESCRIPTION,
        language="en-us",
        feed_url=request.build_absolute_uri(),
    )

    posts = (
        BlogPost.objects.filter(status=PostStatus.PUBLISHED)
        .select_related("author", "category")
        .order_by("-published_at")[:FEED_SIZE]
    )
    for post in posts:
        feed.add_item(
            title=post.title,
            link=f"{site_url}/blog/{post.slug}",
            description=post.excerpt or "",
            unique_id=str(post.id),
            unique_id_is_permalink=False,
            author_name=post.author.name or post.author.email,
            author_email=post.author.email,
            pubdate=post.published_at,
            updateddate=post.updated_at,
            categories=[post.category.name, *(post.tags or [])],
        )
    return feed


@router.get("/rss")
def rss(request: HttpRequest):
    feed = build_feed(request)
    return xml_response(feed.writeString("utf-8"))


@router.get("/sitemap")
def sitemap(request: HttpRequest):
    urls = build_urls(settings.SITE_URL)
    logger.debug(f"[Feeds] Sitemap built with {len(urls)} entries")
    return xml_response(render_to_string("sitemap.xml", {"urlset": urls}))
