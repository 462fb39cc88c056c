"""Tests for main API endpoints"""

import pytest
from fastapi.testclient import TestClient

import survey_schedule.main as main_module
from survey_schedule.main import app


def test_root_endpoint(client: TestClient):
    """Test root endpoint returns expected response"""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "測量工程表管理システム API"
    assert data["status"] == "running"


def test_health_check(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert data["timestamp"].endswith("Z")


@pytest.mark.unit
def test_api_version(client: TestClient):
    """Test API version is returned"""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"


def test_cors_preflight_allows_put(client: TestClient):
    """Test that the frontend origin may send PUT requests"""
    response = client.options(
        "/api/projects/1",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "PUT",
        },
    )
    assert response.status_code == 200
    assert "PUT" in response.headers["access-control-allow-methods"]


def test_startup_initializes_schema(monkeypatch):
    """Test that entering the app lifespan creates the schema once"""
    calls = []

    async def fake_init_db():
        calls.append("init_db")

    monkeypatch.setattr(main_module, "init_db", fake_init_db)

    with TestClient(app) as lifespan_client:
        assert lifespan_client.get("/").status_code == 200

    assert calls == ["init_db"]
