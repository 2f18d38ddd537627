"""Pytest configuration and fixtures for drive-access tests."""

import os

os.environ.setdefault("DRIVE_ACCESS_SKIP_LOGGING_SETUP", "true")

import pytest
from unittest.mock import AsyncMock

from drive_access.config.settings import DriveAccessSettings
from drive_access.features.access import Access


@pytest.fixture
def settings():
    """Settings pointing at a test API."""
    return DriveAccessSettings(
        api_url="https://api.test.com",
        api_key="test-api-key",
        version="1",
    )


@pytest.fixture
def mock_transport():
    """Mock transport for testing."""
    transport = AsyncMock()
    transport.get = AsyncMock()
    transport.post = AsyncMock()
    transport.delete = AsyncMock()
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def drive_access(mock_transport, settings):
    """Access engine bound to drive 123."""
    return Access("/drive/123", transport=mock_transport, settings=settings)


class UserModel:
    """Stand-in for a User/OrgUser/Agent/Client model object."""

    def __init__(self, id, **attrs):
        self.id = id
        for key, value in attrs.items():
            setattr(self, key, value)


@pytest.fixture
def make_model():
    """Factory for model objects exposing an ``id``."""
    return UserModel
