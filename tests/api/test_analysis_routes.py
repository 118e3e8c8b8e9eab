"""Tests for the race analysis API routes."""

import pytest
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from hyrox_analyzer.api.deps import get_analysis_service
from hyrox_analyzer.main import app
from hyrox_analyzer.services.analysis_service import AnalysisService


@pytest.fixture
def service():
    """Deterministic service with no enrichment."""
    return AnalysisService()


@pytest.fixture
def client(service):
    app.dependency_overrides[get_analysis_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestAnalyzeEndpoint:
    """Tests for POST /api/v1/analysis."""

    def test_returns_success_envelope(self, client, analysis_request):
        response = client.post("/api/v1/analysis", json=analysis_request)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True

        data = body["data"]
        assert data["level"] == "elite"
        assert data["overallScore"] == 100
        assert data["totalTime"] == 3560
        assert data["formattedTotalTime"] == "59:20"
        assert len(data["recommendations"]) == 3
        assert len(data["pacingAnalysis"]["runs"]) == 8
        assert data["predictedImprovement"] == (
            "5-10% improvement possible with consistent training"
        )

    def test_weakness_fields_are_camel_case(self, client, analysis_request):
        response = client.post("/api/v1/analysis", json=analysis_request)

        weakness = response.json()["data"]["weaknesses"][0]
        assert set(weakness) == {
            "station", "displayName", "time", "formattedTime", "gap", "gapPercent",
        }

    def test_missing_split(self, client, analysis_request):
        del analysis_request["splits"]["wallBalls"]

        response = client.post("/api/v1/analysis", json=analysis_request)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Missing splits: wallBalls",
                "details": {"missing_splits": ["wallBalls"], "field": "splits"},
            },
        }

    def test_negative_split(self, client, analysis_request):
        analysis_request["splits"]["run3"] = -10

        response = client.post("/api/v1/analysis", json=analysis_request)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["details"]["invalid_splits"] == ["run3"]

    def test_invalid_gender(self, client, analysis_request):
        analysis_request["athleteInfo"]["gender"] = "other"

        response = client.post("/api/v1/analysis", json=analysis_request)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Invalid gender: other. Must be 'male' or 'female'"
        assert error["details"]["field"] == "athleteInfo.gender"

    def test_body_must_be_an_object(self, client):
        response = client.post("/api/v1/analysis", json=[1, 2, 3])

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_unexpected_error_returns_500(self, service, analysis_request):
        service.analyze = AsyncMock(side_effect=RuntimeError("boom"))
        app.dependency_overrides[get_analysis_service] = lambda: service
        try:
            client = TestClient(app, raise_server_exceptions=False)
            response = client.post("/api/v1/analysis", json=analysis_request)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            },
        }

    def test_analysis_failure_hides_internal_detail(self, client, analysis_request):
        with patch(
            "hyrox_analyzer.services.analysis_service.determine_level",
            side_effect=RuntimeError("disk /var/db unreadable"),
        ):
            response = client.post("/api/v1/analysis", json=analysis_request)

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {
                "code": "ANALYSIS_FAILED",
                "message": "Failed to generate analysis",
            },
        }
        assert "/var/db" not in response.text


class TestQuickEndpoint:
    """Tests for POST /api/v1/analysis/quick."""

    def test_quick_analysis(self, client, analysis_request):
        response = client.post("/api/v1/analysis/quick", json=analysis_request)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["level"] == "elite"
        assert data["totalTime"] == 3560
        assert len(data["stations"]) == 7
        assert data["runAnalysis"]["degradation"] == 0
        assert data["runAnalysis"]["firstRun"] == 270

    def test_stations_listed_fastest_first(self, client, intermediate_split_payload):
        response = client.post(
            "/api/v1/analysis/quick",
            json={"splits": intermediate_split_payload, "athleteInfo": {"gender": "male"}},
        )

        stations = response.json()["data"]["stations"]
        assert [s["station"] for s in stations] == [
            "farmersCarry",
            "burpeeBroadJump",
            "skiErg",
            "rowing",
            "sledPush",
            "sandbagLunges",
            "wallBalls",
        ]
        assert [s["time"] for s in stations] == sorted(s["time"] for s in stations)

    def test_quick_analysis_validates(self, client, analysis_request):
        del analysis_request["splits"]["run1"]

        response = client.post("/api/v1/analysis/quick", json=analysis_request)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Missing splits: run1"


class TestBenchmarksEndpoint:
    """Tests for GET /api/v1/analysis/benchmarks."""

    def test_defaults_to_male(self, client):
        response = client.get("/api/v1/analysis/benchmarks")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["elite"]["totalTime"] == {"min": 3300, "max": 3600}

    def test_female(self, client):
        response = client.get("/api/v1/analysis/benchmarks", params={"gender": "female"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert set(data) == {"elite", "intermediate", "beginner", "runs"}
        assert data["elite"]["totalTime"]["max"] > 3600

    def test_unknown_gender(self, client):
        response = client.get("/api/v1/analysis/benchmarks", params={"gender": "other"})

        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == "gender"


class TestHealth:
    """Tests for the root and health endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["name"] == "HYROX Analyzer API"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
