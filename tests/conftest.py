"""
Shared pytest fixtures for Color Service tests.
"""

import os

# Keep test runs from writing rotating log files
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient

from color_service.main import app
from color_service.services.color_registry import ColorRegistry


@pytest.fixture
def registry():
    """Create an empty registry with the default capacity."""
    return ColorRegistry()


@pytest.fixture
def client():
    """Test client with the application lifespan running, so each test gets a fresh registry."""
    with TestClient(app) as test_client:
        yield test_client
