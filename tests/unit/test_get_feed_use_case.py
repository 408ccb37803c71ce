"""
Unit tests for GetFeedUseCase.

Tests for:
- Owner set construction (empty following, self, deduplication)
- Chunking under the membership query cap
- Merge order and truncation
- Failure handling: first failure wins, outstanding chunks cancelled
- Concurrency of chunk queries
"""

import asyncio
from typing import List, Sequence

import pytest

from application.ports.document_store import MAX_IN_VALUES
from application.result import Result
from application.use_cases import FEED_CHUNK_SIZE, GetFeedUseCase, chunked
from domain.models import Post
from infrastructure.db import DocumentFollowRepository, DocumentPostRepository
from infrastructure.db.collections import COLLECTION_POSTS, post_doc
from tests.fakes import FakeDocumentStore, seed_follow, seed_post, ts

pytestmark = pytest.mark.unit


@pytest.fixture
def follow_repo(store: FakeDocumentStore) -> DocumentFollowRepository:
    return DocumentFollowRepository(store)


@pytest.fixture
def use_case(store, follow_repo) -> GetFeedUseCase:
    post_repo = DocumentPostRepository(store)
    return GetFeedUseCase(post_repo=post_repo, follow_repo=follow_repo)


def _post_queries(store: FakeDocumentStore):
    return [q for q in store.queries if q.collection_path == COLLECTION_POSTS]


class TestChunked:
    """chunked() helper."""

    def test_chunk_size_is_the_membership_cap(self):
        assert FEED_CHUNK_SIZE == MAX_IN_VALUES == 10

    def test_splits_into_consecutive_chunks(self):
        ids = [str(i) for i in range(23)]

        chunks = chunked(ids, 10)

        assert [len(c) for c in chunks] == [10, 10, 3]
        assert [i for c in chunks for i in c] == ids

    def test_empty_input(self):
        assert chunked([], 10) == []


class TestOwnerSet:
    """Which owners are queried."""

    async def test_no_follows_returns_empty_feed_without_post_query(self, use_case, store):
        seed_post(store, "mine", "alice", ts(1))

        result = await use_case.execute("alice")

        assert result.success
        assert result.value == []
        assert _post_queries(store) == []

    async def test_following_only_self_is_one_chunk(self, use_case, store):
        seed_follow(store, "alice", "alice")
        seed_post(store, "mine", "alice", ts(1))

        result = await use_case.execute("alice")

        assert [p.id for p in result.value] == ["mine"]
        queries = _post_queries(store)
        assert len(queries) == 1
        assert queries[0].in_values() == ["alice"]

    async def test_self_added_once(self, use_case, store):
        for target in ("alice", "bob", "carol"):
            seed_follow(store, "alice", target)

        await use_case.execute("alice")

        owners = [o for q in _post_queries(store) for o in q.in_values()]
        assert sorted(owners) == ["alice", "bob", "carol"]

    async def test_many_follows_split_into_chunks_of_ten(self, use_case, store):
        for i in range(25):
            seed_follow(store, "alice", f"user{i:02d}")

        await use_case.execute("alice", limit=7)

        queries = _post_queries(store)
        sizes = sorted(len(q.in_values()) for q in queries)
        assert sizes == [6, 10, 10]
        assert all(q.limit == 7 for q in queries)
        assert all(q.order_by == "createdAt" and q.descending for q in queries)
        owners = [o for q in queries for o in q.in_values()]
        assert len(owners) == len(set(owners)) == 26

    async def test_follow_read_failure_returned_without_post_query(self, use_case, store):
        error = RuntimeError("follows unavailable")
        store.fail_queries(error, when=lambda q: q.collection_path.endswith("/follows"))

        result = await use_case.execute("alice")

        assert result.error is error
        assert _post_queries(store) == []


class TestMerge:
    """Merging chunk results."""

    async def test_posts_merged_across_chunks_newest_first(self, use_case, store):
        for i in range(15):
            owner = f"user{i:02d}"
            seed_follow(store, "alice", owner)
            seed_post(store, f"p{i:02d}", owner, ts(i))
        seed_post(store, "own", "alice", ts(100))
        seed_post(store, "stranger", "zed", ts(200))

        result = await use_case.execute("alice", limit=50)

        ids = [p.id for p in result.value]
        assert ids[0] == "own"
        assert "stranger" not in ids
        assert ids[1:] == [f"p{i:02d}" for i in reversed(range(15))]

    async def test_result_truncated_to_limit(self, use_case, store):
        for i in range(12):
            owner = f"user{i:02d}"
            seed_follow(store, "alice", owner)
            seed_post(store, f"a{i:02d}", owner, ts(i))
            seed_post(store, f"b{i:02d}", owner, ts(100 + i))

        result = await use_case.execute("alice", limit=5)

        assert [p.id for p in result.value] == ["b11", "b10", "b09", "b08", "b07"]

    async def test_zoneless_timestamps_merge_with_server_timestamps(self, use_case, store):
        for i in range(FEED_CHUNK_SIZE):
            seed_follow(store, "alice", f"u{i:02d}")
        seed_follow(store, "alice", "zed")
        # u00 lands in the first chunk, zed in the second.
        store.seed(post_doc("old"), {
            "caption": "",
            "ownerUserId": "u00",
            "photoUrl": "",
            "createdAt": "2024-01-01T00:00:00",
        })
        created = await DocumentPostRepository(store).create_post("zed", "hi", "")

        result = await use_case.execute("alice")

        assert result.success
        assert [p.id for p in result.value] == [created.value, "old"]
        assert result.value[1].created_at.tzinfo is not None

    async def test_followed_users_without_posts(self, use_case, store):
        seed_follow(store, "alice", "bob")

        result = await use_case.execute("alice")

        assert result.success
        assert result.value == []


class TestFailures:
    """Chunk failures."""

    async def test_chunk_failure_returns_no_partial_feed(self, use_case, store):
        for i in range(15):
            seed_follow(store, "alice", f"user{i:02d}")
            seed_post(store, f"p{i:02d}", f"user{i:02d}", ts(i))
        error = RuntimeError("chunk failed")
        store.fail_queries(error, when=lambda q: "user00" in q.in_values())

        result = await use_case.execute("alice")

        assert result.failed
        assert result.error is error
        assert result.value is None

    async def test_first_observed_failure_wins(self, use_case, store):
        for i in range(15):
            seed_follow(store, "alice", f"user{i:02d}")
        slow_error = RuntimeError("slow failure")
        fast_error = RuntimeError("fast failure")
        store.delay_queries(0.05, when=lambda q: "user00" in q.in_values())
        store.fail_queries(slow_error, when=lambda q: "user00" in q.in_values())
        store.fail_queries(fast_error, when=lambda q: "user14" in q.in_values())

        result = await use_case.execute("alice")

        assert result.error is fast_error

    async def test_outstanding_chunks_cancelled_after_failure(self, use_case, store):
        for i in range(15):
            seed_follow(store, "alice", f"user{i:02d}")
        error = RuntimeError("fast failure")
        store.delay_queries(30, when=lambda q: "user00" in q.in_values())
        store.fail_queries(error, when=lambda q: "user14" in q.in_values())

        result = await asyncio.wait_for(use_case.execute("alice"), timeout=5)
        # Let the cancelled task observe its cancellation.
        for _ in range(3):
            await asyncio.sleep(0)

        assert result.error is error
        assert len(store.cancelled_queries) == 1
        assert "user00" in store.cancelled_queries[0].in_values()


class _TrackingPostRepository:
    """Post repository stub that records how many chunk queries overlap."""

    def __init__(self):
        self.in_flight = 0
        self.max_in_flight = 0
        self.calls: List[List[str]] = []

    async def get_posts_by_owners(self, owner_user_ids: Sequence[str], limit: int) -> Result[List[Post]]:
        self.calls.append(list(owner_user_ids))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0.01)
        self.in_flight -= 1
        return Result.ok([])


class TestConcurrency:
    """Chunk queries run concurrently."""

    async def test_all_chunks_in_flight_together(self, store, follow_repo):
        for i in range(35):
            seed_follow(store, "alice", f"user{i:02d}")
        post_repo = _TrackingPostRepository()
        use_case = GetFeedUseCase(post_repo=post_repo, follow_repo=follow_repo)

        result = await use_case.execute("alice")

        assert result.success
        assert len(post_repo.calls) == 4
        assert post_repo.max_in_flight == 4
