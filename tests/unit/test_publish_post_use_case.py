"""
Unit tests for PublishPostUseCase.

Tests for:
- Upload then post creation with the durable URL
- Missing image / missing principal rejected before any write
- Upload failure aborts before the post is created
"""

import pytest

from application.exceptions import InvalidArgumentError, NotAuthenticatedError
from application.use_cases import PublishPostUseCase
from infrastructure.db import DocumentPostRepository
from infrastructure.db.collections import post_doc, user_doc
from infrastructure.storage import BlobPhotoRepository
from tests.fakes import FAKE_URL_PREFIX, FakeBlobStore, FakeDocumentStore

pytestmark = pytest.mark.unit


@pytest.fixture
def use_case(store: FakeDocumentStore, blobs: FakeBlobStore) -> PublishPostUseCase:
    return PublishPostUseCase(
        photo_repo=BlobPhotoRepository(blobs, clock=lambda: 42),
        post_repo=DocumentPostRepository(store),
    )


class TestPublishPost:

    async def test_publish_uploads_then_creates_post(self, use_case, store, blobs):
        result = await use_case.execute("alice", "/tmp/photo.png", "leg day", "image/png")

        assert result.success
        post = store.document(post_doc(result.value))
        assert post["photoUrl"] == f"{FAKE_URL_PREFIX}images/alice/42.png"
        assert post["caption"] == "leg day"
        assert post["ownerUserId"] == "alice"
        assert store.document(user_doc("alice"))["dailyPostStatus"]["postId"] == result.value
        assert len(blobs.uploads) == 1

    async def test_missing_image_rejected(self, use_case, store, blobs):
        result = await use_case.execute("alice", None, "caption")

        assert isinstance(result.error, InvalidArgumentError)
        assert str(result.error) == "Image is missing"
        assert blobs.uploads == []
        assert store.commits == []

    async def test_missing_principal_rejected(self, use_case, store, blobs):
        result = await use_case.execute(None, "/tmp/photo.jpg", "caption")

        assert isinstance(result.error, NotAuthenticatedError)
        assert blobs.uploads == []
        assert store.commits == []

    async def test_upload_failure_creates_no_post(self, use_case, store, blobs):
        error = IOError("upload failed")
        blobs.fail_uploads(error)

        result = await use_case.execute("alice", "/tmp/photo.jpg", "caption")

        assert result.error is error
        assert store.commits == []

    async def test_post_creation_failure_returned(self, use_case, store, blobs):
        error = RuntimeError("commit failed")
        store.fail_commits(error)

        result = await use_case.execute("alice", "/tmp/photo.jpg", "caption")

        assert result.error is error
        assert len(blobs.uploads) == 1
