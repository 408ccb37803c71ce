"""
Fake Implementations for Testing.

This package provides in-memory fakes of the external collaborators
(document store, blob store, identity) for fast, isolated testing. The real
repositories run on top of them unchanged.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data and reset() for test isolation
- Failure injection and query recording on the document store
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeDocumentStore, seed_post, seed_follow

    store = FakeDocumentStore()
    seed_follow(store, "alice", "bob")
    seed_post(store, "p1", owner="bob", created_at=ts(10))
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from infrastructure.db.collections import followers_doc, follows_doc, post_doc, user_doc
from tests.fakes.blob_store import FAKE_URL_PREFIX, FakeBlobStore, StoredBlob
from tests.fakes.document_store import FakeDocumentStore, RecordedQuery

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# Factory Functions
# =============================================================================


def ts(seconds: int) -> datetime:
    """A fixed, tz-aware timestamp `seconds` after BASE_TIME."""
    return BASE_TIME + timedelta(seconds=seconds)


def seed_post(
    store: FakeDocumentStore,
    post_id: str,
    owner: str,
    created_at: datetime,
    caption: str = "",
    photo_url: str = "",
) -> None:
    store.seed(post_doc(post_id), {
        "caption": caption,
        "ownerUserId": owner,
        "photoUrl": photo_url,
        "createdAt": created_at,
    })


def seed_follow(store: FakeDocumentStore, me: str, target: str) -> None:
    """Seed both halves of a follow edge."""
    store.seed(follows_doc(me, target), {"createdAt": BASE_TIME})
    store.seed(followers_doc(target, me), {"createdAt": BASE_TIME})


def seed_user(store: FakeDocumentStore, user_id: str, **fields: Any) -> Dict[str, Any]:
    data = {
        "email": f"{user_id}@example.com",
        "dailyPostStatus": {"hasPostedToday": False, "postId": None},
        "notificationPrefs": {"enabled": True},
        "createdAt": BASE_TIME,
    }
    data.update(fields)
    store.seed(user_doc(user_id), data)
    return data


class StaticIdentityProvider:
    """IdentityProvider returning a fixed principal (None = signed out)."""

    def __init__(self, user_id: Optional[str]):
        self._user_id = user_id

    def current_principal_id(self) -> Optional[str]:
        return self._user_id


__all__ = [
    "BASE_TIME",
    "FAKE_URL_PREFIX",
    "FakeBlobStore",
    "FakeDocumentStore",
    "RecordedQuery",
    "StaticIdentityProvider",
    "StoredBlob",
    "seed_follow",
    "seed_post",
    "seed_user",
    "ts",
]
