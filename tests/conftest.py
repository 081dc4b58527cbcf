import pytest
from fastapi.testclient import TestClient

from hotel_reviews_api.app.core.config import Settings
from hotel_reviews_api.app.main import create_app
from hotel_reviews_api.app.services.repository import Repository
from hotel_reviews_api.app.storage import MemoryEntityStore, SQLiteEntityStore


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """A fresh entity store; every store test runs against both backends."""
    if request.param == "memory":
        return MemoryEntityStore()
    return SQLiteEntityStore(str(tmp_path / "hotel_reviews.db"))


@pytest.fixture
def repository(store):
    return Repository(store, destination_image_url="https://img.test/?q={query}")


@pytest.fixture
def app_settings():
    return Settings(secret_key="test-secret", storage_backend="memory")


@pytest.fixture
def app(app_settings, repository):
    return create_app(app_settings, repository=repository)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
