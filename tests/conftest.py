"""
Shared fixtures.

Repositories under test run against FakeDocumentStore / FakeBlobStore; API
tests get a TestClient whose store, blob store and auth dependencies are
overridden with those fakes.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import (
    get_blob_store_required,
    get_current_user,
    get_document_store_required,
    get_identity_provider,
)
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeBlobStore, FakeDocumentStore, StaticIdentityProvider

TEST_USER_ID = "test-user"


@pytest.fixture
def store() -> FakeDocumentStore:
    """A fresh fake document store."""
    return FakeDocumentStore()


@pytest.fixture
def blobs() -> FakeBlobStore:
    """A fresh fake blob store."""
    return FakeBlobStore()


@pytest.fixture
def app(store: FakeDocumentStore, blobs: FakeBlobStore):
    """App wired to the fakes, authenticated as TEST_USER_ID."""
    settings = Settings(environment="test", _env_file=None)
    app = create_app(settings=settings)

    async def mock_get_current_user() -> str:
        return TEST_USER_ID

    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_identity_provider] = lambda: StaticIdentityProvider(TEST_USER_ID)
    app.dependency_overrides[get_document_store_required] = lambda: store
    app.dependency_overrides[get_blob_store_required] = lambda: blobs
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
