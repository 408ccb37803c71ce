"""
Unit tests for DocumentPostRepository.

Tests for:
- Post creation with the denormalized daily post status
- Post reads (single, by user, by owners)
- Post and comment likes
- Comments
- Failure propagation through Result
"""

import pytest

from application.exceptions import NotFoundError
from infrastructure.db import DocumentPostRepository
from infrastructure.db.collections import post_doc, user_doc
from tests.fakes import FakeDocumentStore, seed_post, seed_user, ts

pytestmark = pytest.mark.unit


@pytest.fixture
def repo(store: FakeDocumentStore) -> DocumentPostRepository:
    return DocumentPostRepository(store)


# =============================================================================
# create_post
# =============================================================================


class TestCreatePost:
    """Post creation."""

    async def test_create_post_writes_post_and_daily_status_in_one_batch(self, repo, store):
        result = await repo.create_post("alice", "leg day", "https://cdn/p.jpg")

        assert result.success
        post_id = result.value
        post = store.document(post_doc(post_id))
        assert post["caption"] == "leg day"
        assert post["ownerUserId"] == "alice"
        assert post["photoUrl"] == "https://cdn/p.jpg"
        assert post["createdAt"] is not None

        user = store.document(user_doc("alice"))
        assert user["dailyPostStatus"] == {"hasPostedToday": True, "postId": post_id}
        assert len(store.commits) == 1

    async def test_create_post_preserves_other_profile_fields(self, repo, store):
        seed_user(store, "alice", fullName="Alice A", dailyPostStatus={"hasPostedToday": False, "postId": None})

        result = await repo.create_post("alice", "", "https://cdn/p.jpg")

        user = store.document(user_doc("alice"))
        assert user["fullName"] == "Alice A"
        assert user["email"] == "alice@example.com"
        assert user["notificationPrefs"] == {"enabled": True}
        assert user["dailyPostStatus"]["postId"] == result.value

    async def test_create_post_without_daily_status(self, repo, store):
        result = await repo.create_post("alice", "", "u", update_daily_status=False)

        assert result.success
        assert store.document(user_doc("alice")) is None

    async def test_failed_commit_writes_nothing(self, repo, store):
        error = RuntimeError("unavailable")
        store.fail_commits(error)

        result = await repo.create_post("alice", "caption", "u")

        assert result.failed
        assert result.error is error
        assert store.paths() == []

    async def test_created_post_is_readable(self, repo):
        post_id = (await repo.create_post("alice", "hi", "u")).value

        post = (await repo.get_post(post_id)).value
        assert post.id == post_id
        assert post.owner_user_id == "alice"


# =============================================================================
# Reads
# =============================================================================


class TestReads:
    """Post reads."""

    async def test_get_missing_post_is_not_found(self, repo):
        result = await repo.get_post("nope")

        assert result.failed
        assert isinstance(result.error, NotFoundError)

    async def test_get_post_reads_missing_fields_leniently(self, repo, store):
        store.seed(post_doc("p1"), {"createdAt": ts(0)})

        post = (await repo.get_post("p1")).value
        assert post.caption == ""
        assert post.owner_user_id == ""
        assert post.photo_url == ""

    async def test_get_post_read_failure_surfaces_store_error(self, repo, store):
        error = ConnectionError("offline")
        store.fail_reads(error)

        result = await repo.get_post("p1")

        assert result.error is error

    async def test_posts_by_user_newest_first_with_limit(self, repo, store):
        seed_post(store, "old", "alice", ts(1))
        seed_post(store, "new", "alice", ts(3))
        seed_post(store, "mid", "alice", ts(2))
        seed_post(store, "other", "bob", ts(4))

        posts = (await repo.get_posts_by_user("alice", limit=2)).value

        assert [p.id for p in posts] == ["new", "mid"]
        assert store.queries[-1].limit == 2

    async def test_posts_by_owners_uses_membership_query(self, repo, store):
        seed_post(store, "a1", "alice", ts(1))
        seed_post(store, "b1", "bob", ts(2))
        seed_post(store, "c1", "carol", ts(3))

        posts = (await repo.get_posts_by_owners(["alice", "bob"], limit=10)).value

        assert [p.id for p in posts] == ["b1", "a1"]
        assert store.queries[-1].in_values() == ["alice", "bob"]

    async def test_posts_by_owners_query_failure(self, repo, store):
        error = RuntimeError("boom")
        store.fail_queries(error)

        result = await repo.get_posts_by_owners(["alice"], limit=10)

        assert result.error is error


# =============================================================================
# Likes
# =============================================================================


class TestPostLikes:
    """Post like markers."""

    async def test_like_then_is_liked(self, repo):
        assert (await repo.like_post("p1", "bob")).success

        assert (await repo.is_post_liked_by_user("p1", "bob")).value is True
        assert (await repo.is_post_liked_by_user("p1", "carol")).value is False

    async def test_like_is_idempotent(self, repo, store):
        await repo.like_post("p1", "bob")
        await repo.like_post("p1", "bob")

        assert store.paths("posts/p1/likes/") == ["posts/p1/likes/bob"]

    async def test_unlike_removes_marker(self, repo):
        await repo.like_post("p1", "bob")
        await repo.unlike_post("p1", "bob")

        assert (await repo.is_post_liked_by_user("p1", "bob")).value is False

    async def test_unlike_without_like_succeeds(self, repo):
        assert (await repo.unlike_post("p1", "bob")).success

    async def test_like_failure_surfaces_store_error(self, repo, store):
        error = PermissionError("denied")
        store.fail_commits(error)

        result = await repo.like_post("p1", "bob")

        assert result.error is error


# =============================================================================
# Comments
# =============================================================================


class TestComments:
    """Comments and comment likes."""

    async def test_comments_returned_oldest_first(self, repo):
        first = (await repo.add_comment("p1", "bob", "first")).value
        second = (await repo.add_comment("p1", "carol", "second")).value

        comments = (await repo.get_comments("p1")).value

        assert [c.id for c in comments] == [first, second]
        assert comments[0].author_user_id == "bob"
        assert comments[0].post_id == "p1"
        assert comments[1].text == "second"

    async def test_comments_are_per_post(self, repo):
        await repo.add_comment("p1", "bob", "here")

        assert (await repo.get_comments("p2")).value == []

    async def test_comment_like_lifecycle(self, repo):
        comment_id = (await repo.add_comment("p1", "bob", "nice")).value

        await repo.like_comment("p1", comment_id, "alice")
        assert (await repo.is_comment_liked_by_user("p1", comment_id, "alice")).value is True

        await repo.unlike_comment("p1", comment_id, "alice")
        assert (await repo.is_comment_liked_by_user("p1", comment_id, "alice")).value is False

    async def test_comment_like_does_not_like_post(self, repo):
        comment_id = (await repo.add_comment("p1", "bob", "nice")).value
        await repo.like_comment("p1", comment_id, "alice")

        assert (await repo.is_post_liked_by_user("p1", "alice")).value is False

    async def test_add_comment_failure(self, repo, store):
        store.fail_commits(RuntimeError("down"))

        result = await repo.add_comment("p1", "bob", "text")

        assert result.failed

