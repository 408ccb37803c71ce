"""
Unit tests for the follows and feed routers.
"""

import pytest

from infrastructure.db.collections import followers_doc, follows_doc
from tests.fakes import seed_follow, seed_post, ts

pytestmark = pytest.mark.unit

TEST_USER_ID = "test-user"


class TestFollowsRouter:

    def test_follow_and_status(self, client, store):
        assert client.put("/follows/bob").status_code == 204

        assert store.document(follows_doc(TEST_USER_ID, "bob")) is not None
        assert store.document(followers_doc("bob", TEST_USER_ID)) is not None
        assert client.get("/follows/bob/status").json() == {"following": True}

    def test_unfollow(self, client, store):
        client.put("/follows/bob")

        assert client.delete("/follows/bob").status_code == 204
        assert client.get("/follows/bob/status").json() == {"following": False}
        assert store.paths("users/") == []

    def test_following_and_followers_lists(self, client, store):
        seed_follow(store, TEST_USER_ID, "bob")
        seed_follow(store, TEST_USER_ID, "alice")
        seed_follow(store, "carol", TEST_USER_ID)

        following = client.get("/follows/following").json()
        followers = client.get("/follows/followers").json()

        assert following == {"user_ids": ["alice", "bob"], "count": 2}
        assert followers == {"user_ids": ["carol"], "count": 1}

    def test_failure_is_502(self, client, store):
        store.fail_commits(RuntimeError("down"))

        assert client.put("/follows/bob").status_code == 502


class TestFeedRouter:

    def test_empty_feed_without_follows(self, client, store):
        seed_post(store, "mine", TEST_USER_ID, ts(1))

        response = client.get("/feed")

        assert response.status_code == 200
        assert response.json() == {"posts": [], "count": 0}

    def test_feed_merges_followed_and_own_posts(self, client, store):
        seed_follow(store, TEST_USER_ID, "bob")
        seed_post(store, "mine", TEST_USER_ID, ts(1))
        seed_post(store, "bobs", "bob", ts(2))
        seed_post(store, "stranger", "zed", ts(3))

        body = client.get("/feed").json()

        assert [p["id"] for p in body["posts"]] == ["bobs", "mine"]

    def test_feed_limit(self, client, store):
        seed_follow(store, TEST_USER_ID, "bob")
        for i in range(4):
            seed_post(store, f"p{i}", "bob", ts(i))

        body = client.get("/feed", params={"limit": 2}).json()

        assert [p["id"] for p in body["posts"]] == ["p3", "p2"]

    def test_chunk_failure_is_502(self, client, store):
        seed_follow(store, TEST_USER_ID, "bob")
        store.fail_queries(RuntimeError("down"), when=lambda q: q.collection_path == "posts")

        assert client.get("/feed").status_code == 502
