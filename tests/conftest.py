"""
Shared fixtures for the test suite.

Centralizes the API test client so individual route tests don't repeat
override boilerplate.
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture()
def client() -> TestClient:
    """TestClient with dependency overrides reset before and after each test."""
    app.dependency_overrides.clear()
    yield TestClient(app)
    app.dependency_overrides.clear()
