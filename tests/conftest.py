"""
Pytest configuration and fixtures.
"""

import json
import pytest
from django.test import Client

from apps.auth.passwords import hash_password
from apps.blog.models import BlogCategory, BlogPost, BlogSeries, PostStatus
from apps.users.models import User, UserRole
from utils.auth import create_token


class APIClient:
    """Wrapper around Django test client for API testing."""

    def __init__(self):
        self.client = Client()

    def _make_request(self, method, path, data=None, headers=None):
        """Make HTTP request."""
        kwargs = {"content_type": "application/json"}

        if headers:
            kwargs.update(headers)

        if data is not None:
            kwargs["data"] = json.dumps(data)

        # Prepend /api if not present
        if not path.startswith("/api"):
            path = f"/api{path}"

        response = getattr(self.client, method.lower())(path, **kwargs)
        return APIResponse(response)

    def get(self, path, headers=None, **kwargs):
        return self._make_request("GET", path, headers=headers)

    def post(self, path, json=None, headers=None, **kwargs):
        return self._make_request("POST", path, data=json, headers=headers)

    def put(self, path, json=None, headers=None, **kwargs):
        return self._make_request("PUT", path, data=json, headers=headers)

    def patch(self, path, json=None, headers=None, **kwargs):
        return self._make_request("PATCH", path, data=json, headers=headers)

    def delete(self, path, headers=None, **kwargs):
        return self._make_request("DELETE", path, headers=headers)

    def upload(self, path, data, headers=None):
        """POST multipart form data (files included)."""
        if not path.startswith("/api"):
            path = f"/api{path}"
        response = self.client.post(path, data=data, **(headers or {}))
        return APIResponse(response)


class APIResponse:
    """Wrapper around Django response for easier testing."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code
        self.headers = response.headers
        self.content = response.content

    def json(self):
        return json.loads(self._response.content)


@pytest.fixture
def api_client():
    """API test client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    """Create admin user for testing."""
    return User.objects.create(
        email="admin@test.com",
        name="Admin User",
        role=UserRole.ADMIN,
        password=hash_password("Admin@123456"),
    )


@pytest.fixture
def regular_user(db):
    """Create regular user for testing."""
    return User.objects.create(
        email="user@test.com",
        name="Regular User",
        role=UserRole.USER,
        password=hash_password("User@123456"),
    )


@pytest.fixture
def auth_headers(admin_user):
    """Get auth headers for admin user."""
    return {"HTTP_AUTHORIZATION": f"Bearer {create_token(admin_user)}"}


@pytest.fixture
def user_auth_headers(regular_user):
    """Get auth headers for regular user."""
    return {"HTTP_AUTHORIZATION": f"Bearer {create_token(regular_user)}"}


@pytest.fixture
def category(db):
    return BlogCategory.objects.create(name="Engineering", slug="engineering")


@pytest.fixture
def series(admin_user):
    return BlogSeries.objects.create(title="Django Deep Dive", slug="django-deep-dive", author=admin_user)


@pytest.fixture
def make_post(admin_user, category):
    """Factory for blog posts; published unless told otherwise."""

    def _make_post(title="Hello World", status=PostStatus.PUBLISHED, **fields):
        post = BlogPost(
            title=title,
            slug=fields.pop("slug", title.lower().replace(" ", "-")),
            content=fields.pop("content", "Some words about things. " * 20),
            author=admin_user,
            category=fields.pop("category", category),
            **fields,
        )
        post.mark_status(status)
        post.save()
        return post

    return _make_post


@pytest.fixture
def published_post(make_post):
    return make_post("Hello World", tags=["django", "python"], excerpt="A first post")


@pytest.fixture
def draft_post(make_post):
    return make_post("Work In Progress", status=PostStatus.DRAFT)
