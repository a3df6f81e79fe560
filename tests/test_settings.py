"""
Tests for site settings: typed values and the settings API.
"""

import pytest

from apps.site_settings.models import SiteSetting
from apps.site_settings.values import SettingValue


class TestSettingValue:
    @pytest.mark.parametrize(
        "raw,type_,expected",
        [
            ("true", "boolean", True),
            ("TRUE", "boolean", True),
            ("yes", "boolean", False),
            ("42", "number", 42),
            ("2.5", "number", 2.5),
            ("many", "number", "many"),
            ("inf", "number", "inf"),
            ("nan", "number", "nan"),
            ('{"a": [1, 2]}', "json", {"a": [1, 2]}),
            ("{broken", "json", "{broken"),
            ("hello", "text", "hello"),
            ("hello", "mystery", "hello"),
        ],
    )
    def test_decode(self, raw, type_, expected):
        assert SettingValue.decode(raw, type_).value == expected

    def test_encode(self):
        assert SettingValue("boolean", True).encode() == "true"
        assert SettingValue("number", 3).encode() == "3"
        assert SettingValue("json", {"a": 1}).encode() == '{"a": 1}'
        assert SettingValue("text", None).encode() == ""

    def test_from_input_coerces(self):
        assert SettingValue.from_input("false", "boolean").value is False
        assert SettingValue.from_input("7", "number").value == 7
        assert SettingValue.from_input(["a"], "text").value == '["a"]'
        assert SettingValue.from_input(float("inf"), "number").value == "inf"

    def test_from_input_rejects_unknown_type(self):
        with pytest.raises(ValueError):
            SettingValue.from_input("x", "color")


@pytest.mark.django_db
class TestSettingsAPI:
    def test_public_settings_are_flat_and_uncached(self, api_client):
        SiteSetting.objects.create(key="maintenance", value="false", type="boolean", is_public=True)
        SiteSetting.objects.create(key="heroCount", value="3", type="number", is_public=True)
        SiteSetting.objects.create(key="apiSecret", value="s3cret", type="text", is_public=False)

        response = api_client.get("/settings/public")
        assert response.status_code == 200
        assert response.json()["data"] == {"maintenance": False, "heroCount": 3}
        assert "no-store" in response.headers["Cache-Control"]
        assert response.headers["Pragma"] == "no-cache"

    def test_list_requires_admin(self, api_client, user_auth_headers):
        assert api_client.get("/settings/", headers=user_auth_headers).status_code == 403

    def test_upsert_creates_with_defaults(self, api_client, auth_headers):
        response = api_client.put("/settings/theme", json={"value": {"dark": True}}, headers=auth_headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["type"] == "json"
        assert data["value"] == {"dark": True}
        assert data["isPublic"] is True
        assert data["description"] == "Updated theme"

    def test_upsert_keeps_existing_type(self, api_client, auth_headers):
        SiteSetting.objects.create(key="perPage", value="10", type="number", is_public=False, description="Page size")

        response = api_client.put("/settings/perPage", json={"value": "25"}, headers=auth_headers)
        data = response.json()["data"]
        assert data["value"] == 25
        assert data["isPublic"] is False
        assert data["description"] == "Page size"
        assert SiteSetting.objects.filter(key="perPage").count() == 1

    def test_upsert_metadata_only_keeps_value(self, api_client, auth_headers):
        SiteSetting.objects.create(key="tagline", value="Hello", type="text", is_public=True)

        response = api_client.put("/settings/tagline", json={"isPublic": False}, headers=auth_headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["value"] == "Hello"
        assert data["isPublic"] is False
        assert SiteSetting.objects.get(key="tagline").value == "Hello"

    def test_upsert_type_change_without_value_recodes(self, api_client, auth_headers):
        SiteSetting.objects.create(key="limit", value="5", type="text")

        response = api_client.put("/settings/limit", json={"type": "number"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["data"]["value"] == 5

    def test_upsert_create_requires_value(self, api_client, auth_headers):
        response = api_client.put("/settings/newKey", json={"description": "No value"}, headers=auth_headers)
        assert response.status_code == 400
        assert not SiteSetting.objects.filter(key="newKey").exists()

    def test_upsert_rejects_unknown_type(self, api_client, auth_headers):
        response = api_client.put("/settings/x", json={"value": 1, "type": "color"}, headers=auth_headers)
        assert response.status_code == 400

    def test_get_and_delete(self, api_client, auth_headers):
        SiteSetting.objects.create(key="tagline", value="Hello", type="text")

        assert api_client.get("/settings/tagline", headers=auth_headers).json()["data"]["value"] == "Hello"
        assert api_client.delete("/settings/tagline", headers=auth_headers).status_code == 200
        assert api_client.get("/settings/tagline", headers=auth_headers).status_code == 404
        assert api_client.delete("/settings/tagline", headers=auth_headers).status_code == 404
