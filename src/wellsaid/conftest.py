"""Pytest configuration and shared fixtures."""

from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from src.wellsaid.main import app
from src.wellsaid.services.auth.client import get_auth_client
from src.wellsaid.services.auth.dependencies import get_current_user
from src.wellsaid.services.rate_limiter import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate limit counters."""
    limiter.reset()
    yield


@pytest.fixture
def client() -> TestClient:
    """
    Provide FastAPI test client for API testing.

    Example:
        >>> def test_health(client):
        >>>     response = client.get("/health")
        >>>     assert response.status_code == 200
    """
    return TestClient(app)


@pytest.fixture
def mock_supabase() -> MagicMock:
    """Mock request-scoped Supabase client."""
    return MagicMock()


@pytest.fixture
def client_with_supabase(client: TestClient, mock_supabase: MagicMock):
    """Test client whose auth client dependency returns ``mock_supabase``."""
    app.dependency_overrides[get_auth_client] = lambda: mock_supabase
    yield client
    app.dependency_overrides = {}


@pytest.fixture
def signed_in_client(client: TestClient):
    """Test client whose requests resolve to a signed-in user."""
    app.dependency_overrides[get_current_user] = lambda: SimpleNamespace(
        id=UUID("123e4567-e89b-12d3-a456-426614174000")
    )
    yield client
    app.dependency_overrides = {}
