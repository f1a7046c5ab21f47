"""Shared fixtures for auth action tests."""

from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import UUID

import pytest


@pytest.fixture
def mock_user_id() -> UUID:
    """Provide a consistent test user ID."""
    return UUID("123e4567-e89b-12d3-a456-426614174000")


@pytest.fixture
def mock_session() -> SimpleNamespace:
    """Provider-issued session."""
    return SimpleNamespace(access_token="access-token", refresh_token="refresh-token", expires_in=3600)


@pytest.fixture
def auth_response(mock_user_id: UUID, mock_session: SimpleNamespace) -> SimpleNamespace:
    """Successful Supabase AuthResponse."""
    return SimpleNamespace(user=SimpleNamespace(id=mock_user_id), session=mock_session)


@pytest.fixture
def supabase_client() -> MagicMock:
    """Mock Supabase client for calling actions directly."""
    return MagicMock()
