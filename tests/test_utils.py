"""
Tests for shared helpers: pagination, identifiers, slugs and email.
"""

import httpx
import pytest
from ninja.errors import HttpError

from apps.skills.models import Skill
from utils.email import send_email
from utils.identifiers import get_by_id, is_uuid, resolve_identifier
from utils.pagination import build_pagination, paginate
from utils.text import reading_time, slugify, unique_slug
from apps.projects.models import Project


class TestPagination:
    def test_build(self):
        pagination = build_pagination(page=2, limit=10, total_count=23)
        assert pagination.totalPages == 3
        assert pagination.hasNextPage is True
        assert pagination.hasPreviousPage is True

    def test_last_page(self):
        pagination = build_pagination(page=3, limit=10, total_count=23)
        assert pagination.hasNextPage is False

    def test_empty(self):
        pagination = build_pagination(page=1, limit=10, total_count=0)
        assert pagination.totalPages == 0
        assert pagination.hasNextPage is False
        assert pagination.hasPreviousPage is False

    @pytest.mark.django_db
    def test_paginate_coerces_bounds(self):
        for i in range(5):
            Skill.objects.create(name=f"Skill {i}", category="TOOLS")

        items, pagination = paginate(Skill.objects.all(), page=0, limit=500)
        assert len(items) == 5
        assert pagination.page == 1
        assert pagination.limit == 100


class TestIdentifiers:
    def test_is_uuid(self):
        assert is_uuid("3f2504e0-4f89-11d3-9a0c-0305e82c3301")
        assert not is_uuid("hello-world")
        assert not is_uuid("")

    @pytest.mark.django_db
    def test_slug_lookup_narrowed_for_public(self):
        project = Project.objects.create(title="Hidden", slug="hidden", description="x", is_active=False)
        queryset = Project.objects.all()

        with pytest.raises(HttpError) as exc:
            resolve_identifier(queryset, "hidden", public_filters={"is_active": True}, not_found="Project not found")
        assert exc.value.status_code == 404

        assert resolve_identifier(queryset, "hidden", public_filters={"is_active": True}, is_admin=True) == project
        assert resolve_identifier(queryset, str(project.id)) == project

    @pytest.mark.django_db
    def test_get_by_id_rejects_malformed(self):
        with pytest.raises(HttpError) as exc:
            get_by_id(Project.objects.all(), "42")
        assert exc.value.status_code == 404


class TestText:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Hello World", "hello-world"),
            ("  Django & Ninja!  ", "django-ninja"),
            ("snake_case title", "snake-case-title"),
            ("---", ""),
        ],
    )
    def test_slugify(self, text, expected):
        assert slugify(text) == expected

    def test_reading_time(self):
        assert reading_time(None) == 1
        assert reading_time("word " * 200) == 1
        assert reading_time("word " * 201) == 2

    @pytest.mark.django_db
    def test_unique_slug(self):
        Project.objects.create(title="A", slug="app", description="x")
        Project.objects.create(title="B", slug="app-1", description="x")
        assert unique_slug(Project, "app") == "app-2"
        assert unique_slug(Project, "fresh") == "fresh"


class TestSendEmail:
    def test_skips_without_api_key(self, settings):
        settings.RESEND_API_KEY = ""
        result = send_email("a@x.io", "Hi", "contact/confirmation.html", {"contact": {"name": "Ann"}})
        assert result["success"] is False

    def test_posts_to_provider(self, settings, monkeypatch):
        settings.RESEND_API_KEY = "re_test"
        calls = []

        def fake_post(url, headers, json, timeout):
            calls.append(json)
            return httpx.Response(200, json={"id": "msg_1"}, request=httpx.Request("POST", url))

        monkeypatch.setattr(httpx, "post", fake_post)
        result = send_email("a@x.io", "Hi", "contact/confirmation.html", {"contact": {"name": "Ann"}})

        assert result == {"success": True, "id": "msg_1"}
        assert calls[0]["to"] == ["a@x.io"]
        assert calls[0]["subject"] == "Hi"

    def test_transport_error_is_reported(self, settings, monkeypatch):
        settings.RESEND_API_KEY = "re_test"

        def failing_post(*args, **kwargs):
            raise httpx.ConnectError("refused")

        monkeypatch.setattr(httpx, "post", failing_post)
        result = send_email("a@x.io", "Hi", "contact/confirmation.html", {"contact": {"name": "Ann"}})
        assert result["success"] is False
