"""
Shared test configuration and fixtures for the Gift List API.
"""

import pytest
from fastapi.testclient import TestClient

from gift_list_api.app.core.config import Settings
from gift_list_api.app.core.storage import StorageRegistry
from gift_list_api.app.main import create_app
from gift_list_api.app.services.gift_list_service import GiftListService


@pytest.fixture
def db_path(tmp_path):
    """Path of a fresh SQLite database file."""
    return str(tmp_path / "gifts.db")


@pytest.fixture
def settings(db_path):
    return Settings(
        database_url=db_path,
        default_list_name="test-list",
        exa_api_key="",
        log_level="WARNING",
    )


@pytest.fixture
def registry(db_path):
    """Registry with migrations applied."""
    return StorageRegistry(db_path).open()


@pytest.fixture
def unit(registry):
    return registry.get("test-list")


@pytest.fixture
def service(unit):
    return GiftListService(unit)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client; entering the context runs the startup event."""
    with TestClient(app) as test_client:
        yield test_client
