"""
Tests for contact and work-inquiry submissions.
"""

import pytest

from apps.contact.models import Contact, DemoRequest


@pytest.fixture
def sent_emails(monkeypatch):
    """Capture outgoing email instead of calling the provider."""
    sent = []

    def fake_send_email(to, subject, template, context):
        sent.append({"to": to, "subject": subject, "template": template})
        return {"success": True, "id": "test"}

    monkeypatch.setattr("apps.contact.api.send_email", fake_send_email)
    return sent


@pytest.mark.django_db
class TestContactForm:
    def test_submit(self, api_client, sent_emails, settings):
        settings.CONTACT_EMAIL = "owner@example.com"
        response = api_client.post(
            "/contact",
            json={"name": "Ann", "email": "ann@example.com", "subject": "Hello", "message": "Hi there"},
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["message"] == "Contact form submitted successfully"

        contact = Contact.objects.get(id=data["id"])
        assert contact.status == "NEW"
        assert [e["to"] for e in sent_emails] == ["owner@example.com", "ann@example.com"]
        assert sent_emails[0]["template"] == "contact/notification.html"

    def test_all_fields_required(self, api_client, sent_emails):
        response = api_client.post("/contact", json={"name": "Ann", "email": "ann@example.com", "subject": " "})
        assert response.status_code == 400
        assert response.json()["error"] == "All fields are required"
        assert sent_emails == []
        assert Contact.objects.count() == 0

    def test_email_failure_does_not_fail_submission(self, api_client, monkeypatch):
        monkeypatch.setattr(
            "apps.contact.api.send_email", lambda **kwargs: {"success": False, "error": "provider down"}
        )
        response = api_client.post(
            "/contact",
            json={"name": "Ann", "email": "ann@example.com", "subject": "Hello", "message": "Hi"},
        )
        assert response.status_code == 201

    def test_admin_lists_contacts(self, api_client, auth_headers):
        Contact.objects.create(name="Ann", email="a@x.io", subject="Hi", message="Hello")
        data = api_client.get("/contacts", headers=auth_headers).json()["data"]
        assert data["pagination"]["totalCount"] == 1
        assert data["items"][0]["name"] == "Ann"

    def test_list_requires_admin(self, api_client, user_auth_headers):
        assert api_client.get("/contacts", headers=user_auth_headers).status_code == 403


@pytest.mark.django_db
class TestWorkInquiry:
    def test_submit(self, api_client, sent_emails):
        response = api_client.post(
            "/demo-request",
            json={
                "name": "Bob",
                "email": "bob@example.com",
                "description": "Need a dashboard",
                "company": "Acme",
                "workType": "fullstack",
            },
        )
        assert response.status_code == 201
        inquiry = DemoRequest.objects.get(id=response.json()["data"]["id"])
        assert inquiry.project_type == "fullstack"
        assert len(sent_emails) == 2

    def test_required_fields(self, api_client, sent_emails):
        response = api_client.post("/demo-request", json={"name": "Bob", "email": "bob@example.com"})
        assert response.status_code == 400
        assert response.json()["error"] == "Name, email, and description are required"

    def test_admin_lists_inquiries(self, api_client, auth_headers):
        DemoRequest.objects.create(name="Bob", email="b@x.io", description="Site", project_type="frontend")
        data = api_client.get("/demo-requests", headers=auth_headers).json()["data"]
        assert data["items"][0]["workType"] == "frontend"
