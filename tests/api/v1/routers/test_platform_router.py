"""Unit tests for platform router endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from multistream.api.errors import app_error_handler
from multistream.api.v1.dependency import get_platform_registry
from multistream.api.v1.routers.platform import router
from multistream.domain.platforms import PlatformAdapter, PlatformRegistry, TextField, youtube_adapter
from multistream.utils.app_errors import AppError


@pytest.fixture
def registry() -> PlatformRegistry:
    second = PlatformAdapter(
        id="custom",
        display_name="Custom RTMP",
        protocol="rtmp",
        fields=(TextField(id="name", label="Name", required=True),),
    )
    return PlatformRegistry([youtube_adapter, second])


@pytest.fixture
def client(registry: PlatformRegistry) -> TestClient:
    app = FastAPI()
    app.dependency_overrides[get_platform_registry] = lambda: registry
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.include_router(router)
    return TestClient(app)


class TestListPlatforms:
    def test_lists_in_registration_order(self, client: TestClient):
        response = client.get("/platform/list_platforms")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert [p["id"] for p in data["results"]["platforms"]] == ["youtube", "custom"]

    def test_fields_carry_type_tag(self, client: TestClient):
        data = client.get("/platform/list_platforms").json()

        youtube = data["results"]["platforms"][0]
        assert [f["type"] for f in youtube["fields"]] == ["text", "text", "text", "number"]
        assert youtube["fields"][2]["sensitive"] is True


class TestGetPlatform:
    def test_found(self, client: TestClient):
        response = client.get("/platform/get_platform", params={"platform_id": "youtube"})

        assert response.status_code == 200
        assert response.json()["results"]["display_name"] == "YouTube"

    def test_not_found(self, client: TestClient):
        response = client.get("/platform/get_platform", params={"platform_id": "twitch"})

        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["errcode"] == "E_PLATFORM_NOT_FOUND"


class TestValidateFields:
    def test_valid(self, client: TestClient, youtube_values):
        response = client.post(
            "/platform/validate_fields",
            json={"platform_id": "youtube", "values": youtube_values},
        )

        assert response.status_code == 200
        assert response.json()["results"] == {"valid": True, "errors": {}}

    def test_reports_all_errors(self, client: TestClient):
        response = client.post(
            "/platform/validate_fields",
            json={"platform_id": "youtube", "values": {"ingestUrl": "bad", "maxBitrate": -5}},
        )

        results = response.json()["results"]
        assert results["valid"] is False
        assert set(results["errors"]) == {"name", "ingestUrl", "streamKey", "maxBitrate"}

    def test_unknown_platform(self, client: TestClient):
        response = client.post(
            "/platform/validate_fields", json={"platform_id": "nope", "values": {}}
        )

        assert response.status_code == 404
