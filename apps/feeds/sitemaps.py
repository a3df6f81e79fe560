"""
Sitemap sections for the public site.

Locations are paths on the public frontend (SITE_URL), not on this API.
"""

from urllib.parse import urlsplit

from django.conf import settings
from django.contrib.sitemaps import Sitemap

from apps.blog.models import BlogCategory, BlogPost, PostStatus
from apps.projects.models import Project


class ConfiguredSite:
    """Stand-in for a Site row, built from SITE_URL."""

    def __init__(self, site_url: str):
        parts = urlsplit(site_url)
        self.protocol = parts.scheme or "https"
        self.domain = parts.netloc
        self.name = settings.SITE_NAME


class StaticSitemap(Sitemap):
    pages = {
        "/": ("weekly", 1.0),
        "/projects": ("weekly", 0.8),
        "/blog": ("daily", 0.8),
        "/skills": ("monthly", 0.7),
        "/education": ("monthly", 0.7),
        "/contact": ("yearly", 0.6),
    }

    def items(self):
        return list(self.pages)

    def location(self, item):
        return item

    def changefreq(self, item):
        return self.pages[item][0]

    def priority(self, item):
        return self.pages[item][1]


class BlogPostSitemap(Sitemap):
    changefreq = "weekly"
    priority = 0.6

    def items(self):
        return BlogPost.objects.filter(status=PostStatus.PUBLISHED).only("slug", "updated_at").order_by("-published_at")

    def location(self, item):
        return f"/blog/{item.slug}"

    def lastmod(self, item):
        return item.updated_at


class BlogCategorySitemap(Sitemap):
    changefreq = "weekly"
    priority = 0.5

    def items(self):
        return BlogCategory.objects.filter(is_active=True).only("slug", "updated_at")

    def location(self, item):
        return f"/blog?category={item.slug}"

    def lastmod(self, item):
        return item.updated_at


class ProjectSitemap(Sitemap):
    changefreq = "monthly"
    priority = 0.7

    def items(self):
        return Project.objects.filter(is_active=True).only("slug", "updated_at")

    def location(self, item):
        return f"/projects/{item.slug}"

    def lastmod(self, item):
        return item.updated_at


SITEMAPS = {
    "static": StaticSitemap,
    "posts": BlogPostSitemap,
    "categories": BlogCategorySitemap,
    "projects": ProjectSitemap,
}


def build_urls(site_url: str) -> list[dict]:
    """Every sitemap entry as the dicts the sitemap.xml template expects."""
    site = ConfiguredSite(site_url)
    urls = []
    for sitemap_class in SITEMAPS.values():
        urls.extend(sitemap_class().get_urls(site=site, protocol=site.protocol))
    return urls
