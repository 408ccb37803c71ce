"""
Document store implementation of FollowRepository.

Each follow edge is written twice, once per direction, so both "who do I
follow" and "who follows me" are single collection reads. The two halves are
always written and deleted in one batch.
"""
import logging
from typing import Set

from application.ports.document_store import SERVER_TIMESTAMP, DocumentStore
from application.result import Result
from infrastructure.db.collections import (
    followers_collection,
    followers_doc,
    follows_collection,
    follows_doc,
)

logger = logging.getLogger(__name__)


class DocumentFollowRepository:
    """
    DocumentStore implementation of FollowRepository protocol.

    The store is injected via constructor for testability.
    """

    def __init__(self, store: DocumentStore):
        self._store = store

    async def follow(self, my_user_id: str, target_user_id: str) -> Result[None]:
        """Write both halves of the edge atomically."""
        payload = {"createdAt": SERVER_TIMESTAMP}

        batch = self._store.batch()
        batch.set(follows_doc(my_user_id, target_user_id), payload)
        batch.set(followers_doc(target_user_id, my_user_id), payload)

        try:
            await batch.commit()
        except Exception as e:
            logger.error(f"Failed to follow {target_user_id} as {my_user_id}: {e}")
            return Result.fail(e)

        logger.info(f"User {my_user_id} now follows {target_user_id}")
        return Result.ok()

    async def unfollow(self, my_user_id: str, target_user_id: str) -> Result[None]:
        """Delete both halves of the edge atomically."""
        batch = self._store.batch()
        batch.delete(follows_doc(my_user_id, target_user_id))
        batch.delete(followers_doc(target_user_id, my_user_id))

        try:
            await batch.commit()
        except Exception as e:
            logger.error(f"Failed to unfollow {target_user_id} as {my_user_id}: {e}")
            return Result.fail(e)

        logger.info(f"User {my_user_id} unfollowed {target_user_id}")
        return Result.ok()

    async def is_following(self, my_user_id: str, target_user_id: str) -> Result[bool]:
        try:
            snap = await self._store.get(follows_doc(my_user_id, target_user_id))
            return Result.ok(snap.exists)
        except Exception as e:
            logger.error(f"Failed to check follow {my_user_id} -> {target_user_id}: {e}")
            return Result.fail(e)

    async def get_following_ids(self, my_user_id: str) -> Result[Set[str]]:
        try:
            snaps = await self._store.query(follows_collection(my_user_id))
            return Result.ok({s.id for s in snaps})
        except Exception as e:
            logger.error(f"Failed to get following for {my_user_id}: {e}")
            return Result.fail(e)

    async def get_follower_ids(self, my_user_id: str) -> Result[Set[str]]:
        try:
            snaps = await self._store.query(followers_collection(my_user_id))
            return Result.ok({s.id for s in snaps})
        except Exception as e:
            logger.error(f"Failed to get followers for {my_user_id}: {e}")
            return Result.fail(e)
