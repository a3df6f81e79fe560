"""
Tests for portfolio sections and pages.
"""

import pytest

from apps.portfolio.models import PortfolioPage, PortfolioSection


@pytest.fixture
def make_page(db):
    def _make(slug, **fields):
        fields.setdefault("title", slug.title())
        fields.setdefault("is_published", True)
        return PortfolioPage.objects.create(slug=slug, **fields)

    return _make


@pytest.mark.django_db
class TestSections:
    def test_create_appends(self, api_client, auth_headers):
        PortfolioSection.objects.create(name="hero", display_name="Hero", section_type="HERO", sort_order=3)

        response = api_client.post(
            "/sections/",
            json={"sectionType": "ABOUT", "displayName": "About Me", "content": {"body": "Hi"}},
            headers=auth_headers,
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "about-me"
        assert data["sortOrder"] == 4
        assert data["content"] == {"body": "Hi"}

    def test_create_validates(self, api_client, auth_headers):
        missing = api_client.post("/sections/", json={"sectionType": "ABOUT"}, headers=auth_headers)
        assert missing.status_code == 400
        assert missing.json()["error"] == "Section type and display name are required"

        bad_type = api_client.post(
            "/sections/", json={"sectionType": "FOOTER", "displayName": "Footer"}, headers=auth_headers
        )
        assert bad_type.status_code == 400

    def test_inactive_hidden_from_public(self, api_client):
        PortfolioSection.objects.create(name="hero", display_name="Hero", section_type="HERO", sort_order=1)
        hidden = PortfolioSection.objects.create(
            name="blog", display_name="Blog", section_type="BLOG", sort_order=2, is_active=False
        )

        data = api_client.get("/sections/").json()["data"]
        assert [s["name"] for s in data] == ["hero"]
        assert api_client.get(f"/sections/{hidden.id}").status_code == 404

    def test_update_and_delete(self, api_client, auth_headers):
        section = PortfolioSection.objects.create(name="hero", display_name="Hero", section_type="HERO")

        response = api_client.put(
            f"/sections/{section.id}", json={"displayName": "Welcome Banner"}, headers=auth_headers
        )
        assert response.json()["data"]["name"] == "welcome-banner"

        assert api_client.delete(f"/sections/{section.id}", headers=auth_headers).status_code == 200
        assert PortfolioSection.objects.count() == 0


@pytest.mark.django_db
class TestPages:
    def test_unpublished_hidden(self, api_client, make_page):
        make_page("about")
        make_page("secret", is_published=False)

        assert [p["slug"] for p in api_client.get("/pages/").json()["data"]] == ["about"]
        assert api_client.get("/pages/secret").status_code == 404
        assert api_client.get("/pages/about").status_code == 200

    def test_create_duplicate_slug(self, api_client, auth_headers, make_page):
        make_page("about")
        response = api_client.post("/pages/", json={"title": "About"}, headers=auth_headers)
        assert response.status_code == 409

    def test_no_homepage(self, api_client):
        response = api_client.get("/pages/homepage")
        assert response.status_code == 404
        assert response.json()["error"] == "No homepage set"

    def test_homepage_is_exclusive(self, api_client, auth_headers, make_page):
        first = make_page("home", is_homepage=True)
        second = make_page("landing")

        response = api_client.post(f"/pages/{second.id}/homepage", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["data"]["isHomepage"] is True

        first.refresh_from_db()
        assert first.is_homepage is False
        assert PortfolioPage.objects.filter(is_homepage=True).count() == 1
        assert api_client.get("/pages/homepage").json()["data"]["slug"] == "landing"

    def test_create_as_homepage_moves_flag(self, api_client, auth_headers, make_page):
        make_page("home", is_homepage=True)

        response = api_client.post(
            "/pages/",
            json={"title": "New Home", "isPublished": True, "isHomepage": True},
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert list(PortfolioPage.objects.filter(is_homepage=True).values_list("slug", flat=True)) == ["new-home"]

    def test_update_page(self, api_client, auth_headers, make_page):
        page = make_page("about")
        response = api_client.put(
            f"/pages/{page.id}", json={"title": "About Us", "isHomepage": True}, headers=auth_headers
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "About Us"
        assert data["isHomepage"] is True

    def test_mutations_require_admin(self, api_client, user_auth_headers):
        assert api_client.post("/pages/", json={"title": "X"}, headers=user_auth_headers).status_code == 403
