"""Shared test fixtures for the invoice dashboard test suite."""

import os
from pathlib import Path
from unittest.mock import Mock

import pytest
from dotenv import load_dotenv

# Load .env file BEFORE any other imports that might use env vars
load_dotenv(Path(__file__).parent.parent / ".env", override=True)

from clients.postgres_client import PostgresClient
from clients.valkey_client import ValkeyClient
from core.config import reset_config
from core.view_cache import ViewCache


# =============================================================================
# CONFIG FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def reset_config_cache():
    """Ensure every test reads configuration afresh."""
    reset_config()
    yield
    reset_config()


# =============================================================================
# MOCKED COLLABORATORS
# =============================================================================


@pytest.fixture
def mock_postgres():
    """PostgresClient stand-in; every statement affects one row by default."""
    mock = Mock(spec=PostgresClient)
    mock.execute_rowcount.return_value = 1
    mock.execute.return_value = []
    mock.execute_single.return_value = None
    return mock


@pytest.fixture
def mock_valkey():
    """ValkeyClient stand-in with an empty cache."""
    mock = Mock(spec=ValkeyClient)
    mock.get_json.return_value = None
    mock.set_members.return_value = set()
    mock.delete.return_value = 0
    return mock


@pytest.fixture
def view_cache(mock_valkey):
    return ViewCache(mock_valkey, ttl_seconds=300)


@pytest.fixture
def invoice_service(mock_postgres, view_cache):
    from core.services.invoice_service import InvoiceMutationService

    return InvoiceMutationService(mock_postgres, view_cache)


# =============================================================================
# DATABASE FIXTURES (real PostgreSQL, skipped without POSTGRES_URL)
# =============================================================================


@pytest.fixture(scope="session")
def db():
    """Session-scoped PostgresClient with the invoices table in place."""
    database_url = os.getenv("POSTGRES_URL")
    if not database_url:
        pytest.skip("POSTGRES_URL not set")

    client = PostgresClient(database_url)
    client.execute("""
        CREATE TABLE IF NOT EXISTS invoices (
            id UUID DEFAULT gen_random_uuid() PRIMARY KEY,
            customer_id VARCHAR(255) NOT NULL,
            amount INT NOT NULL,
            status VARCHAR(255) NOT NULL,
            date DATE NOT NULL
        )
    """)
    yield client
    client.close()


@pytest.fixture
def clean_db(db):
    """Empty invoices table before each test that uses it."""
    db.execute("TRUNCATE invoices")
    yield db


# =============================================================================
# VALKEY FIXTURES (real Valkey, skipped without VALKEY_URL)
# =============================================================================


@pytest.fixture(scope="session")
def valkey():
    """Session-scoped ValkeyClient."""
    valkey_url = os.getenv("VALKEY_URL")
    if not valkey_url:
        pytest.skip("VALKEY_URL not set")

    client = ValkeyClient(valkey_url)
    yield client
    client.close()
