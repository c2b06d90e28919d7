"""Unit tests for session router endpoints."""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.testclient import TestClient

from multistream.api.errors import (
    app_error_handler,
    request_validation_error_handler,
    session_store_error_handler,
)
from multistream.api.v1.dependency import (
    get_quick_start_preferences,
    get_session_service,
    get_verification_preferences,
)
from multistream.api.v1.routers.session import router
from multistream.domain.live.session.quick_start import QuickStartError
from multistream.domain.live.session.session_domain import SessionService
from multistream.domain.live.session.session_store import SessionStoreError
from multistream.services.preferences import InMemoryPreferenceStore, VerificationPreferences
from multistream.utils.app_errors import AppError


@pytest.fixture
def verification_preferences() -> VerificationPreferences:
    return VerificationPreferences(InMemoryPreferenceStore())


def _build_app(service, quick_start_preferences, verification_preferences) -> FastAPI:
    app = FastAPI()
    app.dependency_overrides[get_session_service] = lambda: service
    app.dependency_overrides[get_quick_start_preferences] = lambda: quick_start_preferences
    app.dependency_overrides[get_verification_preferences] = lambda: verification_preferences
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SessionStoreError, session_store_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore[arg-type]
    app.include_router(router)
    return app


@pytest.fixture
def client(session_service, quick_start_preferences, verification_preferences) -> TestClient:
    return TestClient(
        _build_app(session_service, quick_start_preferences, verification_preferences)
    )


@pytest.fixture
def quick_start_body(youtube_values) -> dict:
    return {
        "title": "Cozy Fireplace",
        "video_source_url": "https://drive.google.com/file/d/abc/view",
        "platform_id": "youtube",
        "field_values": youtube_values,
    }


class TestQuickStart:
    def test_success_masks_stream_key(self, client: TestClient, quick_start_body):
        response = client.post("/session/quick_start", json=quick_start_body)

        assert response.status_code == 200
        results = response.json()["results"]
        assert results["session_id"].startswith("session-")
        assert results["output"]["stream_key_masked"] == "****mnop"
        assert "stream_key" not in results["output"]
        assert results["output"]["max_bitrate"] == 6000
        assert results["video_source"]["is_google_drive"] is True
        assert results["video_source"]["guidance"]

    def test_session_is_live_afterwards(self, client: TestClient, quick_start_body):
        session_id = client.post("/session/quick_start", json=quick_start_body).json()["results"][
            "session_id"
        ]

        active = client.get("/session/list_active_sessions").json()["results"]
        assert [s["id"] for s in active] == [session_id]

    def test_field_errors_returned(self, client: TestClient, quick_start_body):
        quick_start_body["field_values"] = {"name": "x"}

        response = client.post("/session/quick_start", json=quick_start_body)

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["errcode"] == "E_INVALID_PARAMS"
        assert set(data["errdata"]["field_errors"]) == {"ingestUrl", "streamKey"}

    def test_missing_platform(self, client: TestClient, quick_start_body):
        quick_start_body["platform_id"] = ""

        response = client.post("/session/quick_start", json=quick_start_body)

        assert response.status_code == 400
        assert response.json()["errmesg"] == "Please select a platform"

    def test_store_failure_reports_failed_step(
        self, quick_start_preferences, verification_preferences, quick_start_body
    ):
        service = AsyncMock(spec=SessionService)
        service.quick_start_with_platform.side_effect = QuickStartError(
            session_id="session-1",
            failed_step="add_output",
            completed_steps=["create_session", "set_video_source"],
            reason="rejected",
        )
        client = TestClient(_build_app(service, quick_start_preferences, verification_preferences))

        response = client.post("/session/quick_start", json=quick_start_body)

        assert response.status_code == 502
        data = response.json()
        assert data["errcode"] == "E_SESSION_STORE_FAILURE"
        assert data["errdata"]["failed_step"] == "add_output"
        assert data["errdata"]["completed_steps"] == ["create_session", "set_video_source"]

    def test_malformed_body(self, client: TestClient):
        response = client.post("/session/quick_start", json={"title": "only"})

        assert response.status_code == 422
        assert response.json()["errcode"] == "E_INVALID_PARAMS"

    def test_defaults_remembered(self, client: TestClient, quick_start_body):
        client.post("/session/quick_start", json=quick_start_body)

        defaults = client.get("/session/quick_start_defaults").json()["results"]

        assert defaults == {
            "title": "Cozy Fireplace",
            "video_source_url": "https://drive.google.com/file/d/abc/view",
        }


class TestApplyPreset:
    def test_apply_preset(self, client: TestClient):
        body = {
            "preset": {
                "title": "Preset",
                "video_link": "https://example.com/v.mp4",
                "ingest_url": "rtmp://a.rtmp.youtube.com/live2",
                "stream_key": "preset-key-1234",
            }
        }

        response = client.post("/session/apply_preset", json=body)

        assert response.status_code == 200
        results = response.json()["results"]
        assert results["output"]["name"] == "Preset"
        assert results["output"]["max_bitrate"] == 4500
        assert results["video_source"]["is_google_drive"] is False


class TestSessionEndpoints:
    def test_manual_configuration_flow(self, client: TestClient, youtube_values):
        session_id = client.post("/session/create_session", json={"title": "Manual"}).json()[
            "results"
        ]["session_id"]

        notice = client.post(
            "/session/set_video_source",
            json={"session_id": session_id, "video_source_url": "https://example.com/v.mp4"},
        ).json()["results"]
        assert notice["is_google_drive"] is False

        output_id = client.post(
            "/session/add_output",
            json={"session_id": session_id, "platform_id": "youtube", "values": youtube_values},
        ).json()["results"]["output_id"]

        layer_id = client.post(
            "/session/add_layer",
            json={
                "session_id": session_id,
                "name": "logo",
                "source_url": "https://example.com/logo.png",
                "width": 200,
                "height": 100,
            },
        ).json()["results"]["layer_id"]

        readiness = client.get("/session/readiness", params={"session_id": session_id}).json()
        assert readiness["results"]["ready"] is True

        output = client.get("/session/get_output", params={"output_id": output_id}).json()
        assert output["results"]["ingest_categories"] == ["youtube", "live"]

        layer = client.get("/session/get_layer", params={"layer_id": layer_id}).json()
        assert layer["results"]["size"] == {"width": 200, "height": 100}

        by_category = client.get(
            "/session/list_outputs_by_category", params={"category_id": "youtube"}
        ).json()
        assert [o["id"] for o in by_category["results"]] == [output_id]

        assert client.post("/session/start_session", json={"session_id": session_id}).status_code == 200
        session = client.get("/session/get_session", params={"session_id": session_id}).json()
        assert session["results"]["is_active"] is True

        client.post("/session/stop_session", json={"session_id": session_id})
        assert client.get("/session/list_active_sessions").json()["results"] == []

    def test_unknown_session_is_bad_gateway(self, client: TestClient):
        response = client.get("/session/get_session", params={"session_id": "missing"})

        assert response.status_code == 502
        data = response.json()
        assert data["errcode"] == "E_SESSION_STORE_FAILURE"
        assert data["errdata"] == {"operation": "get_session"}


class TestHelpers:
    def test_suggest_title(self, client: TestClient):
        title = client.get("/session/suggest_title").json()["results"]["title"]

        assert " - " in title

    def test_network_assessment(self, client: TestClient):
        response = client.post(
            "/session/network_assessment", json={"effective_type": "3g", "downlink": 0.4}
        )

        results = response.json()["results"]
        assert results["is_low_bandwidth"] is True
        assert results["recommendations"]

    def test_verification_round_trip(self, client: TestClient):
        initial = client.get("/session/verification", params={"session_id": "s1"}).json()
        assert initial["results"]["status"] == "not-checked"

        stored = client.post(
            "/session/verification",
            json={
                "session_id": "s1",
                "status": "verified",
                "platform_url": "https://studio.youtube.com",
            },
        ).json()["results"]
        assert stored["status"] == "verified"
        assert stored["last_checked"] is not None

        fetched = client.get("/session/verification", params={"session_id": "s1"}).json()
        assert fetched["results"] == stored
