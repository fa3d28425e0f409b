import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock
from sqlalchemy.exc import OperationalError

from semantic_search.api.main import create_app
from semantic_search.boundary.db import get_async_db


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


@pytest.fixture
def mock_db():
    return AsyncMock()


@pytest.fixture
def db_client(client, mock_db):
    async def override_get_async_db():
        yield mock_db

    client.app.dependency_overrides[get_async_db] = override_get_async_db
    return client


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(db_client, mock_db):
    response = db_client.get("/api/v1/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}
    mock_db.execute.assert_awaited_once()


def test_health_check_db_unavailable(db_client, mock_db):
    mock_db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))

    response = db_client.get("/api/v1/health/db")

    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "message": "Database connection failed"}


def test_health_generates_correlation_id(client):
    response = client.get("/api/v1/health")
    assert response.headers["X-Correlation-ID"]
