"""API test fixtures: TestClient over the app factory with mocked store and cache."""

import pytest
from starlette.testclient import TestClient

from api.app import create_app


@pytest.fixture
def app(invoice_service):
    """Dashboard app wired to the mocked invoice service."""
    return create_app(invoice_service)


@pytest.fixture
def client(app):
    """Test client that reports redirects instead of following them."""
    return TestClient(app, raise_server_exceptions=False, follow_redirects=False)
