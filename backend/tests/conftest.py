"""
Test configuration and fixtures for HueKit tests.
"""
import pytest
from fastapi.testclient import TestClient

# Import the main app
from main import app
from huekit.api.v1 import get_namer
from huekit.services.colors.naming import LocalColorNamer


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app, always naming colors locally."""
    app.dependency_overrides[get_namer] = LocalColorNamer
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    from huekit.utils.metrics import reset_metrics
    reset_metrics()
