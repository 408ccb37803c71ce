"""
Get Feed Use Case.

Builds a user's home feed from the posts of everyone they follow plus their
own. The document store caps membership ("in") queries at MAX_IN_VALUES
values, so the owner set is split into chunks queried concurrently and the
results are merged client-side.

Each chunk query is itself limited to `limit` posts, and the merged page
keeps the newest `limit` of those. Only the first page can be built this
way: there is no cursor to continue from.
"""
import asyncio
import logging
from typing import List, Sequence

from application.ports.document_store import MAX_IN_VALUES
from application.ports.follow_repository import FollowRepository
from application.ports.post_repository import PostRepository
from application.result import Result
from domain.models import Post

logger = logging.getLogger(__name__)

# Hard limit imposed by the store's membership queries, not a tuning knob.
FEED_CHUNK_SIZE = MAX_IN_VALUES


def chunked(ids: Sequence[str], size: int) -> List[List[str]]:
    """Split `ids` into consecutive lists of at most `size` items."""
    return [list(ids[i:i + size]) for i in range(0, len(ids), size)]


class GetFeedUseCase:
    """
    Use case for assembling a home feed.

    Delivers exactly one outcome: either every chunk query succeeded and the
    merged page is returned, or the first chunk failure observed is returned
    and no posts are.
    """

    def __init__(self, post_repo: PostRepository, follow_repo: FollowRepository):
        """
        Initialize with required dependencies.

        Args:
            post_repo: Repository used for the per-chunk post queries
            follow_repo: Follow graph supplying the followed user IDs
        """
        self._post_repo = post_repo
        self._follow_repo = follow_repo

    async def execute(self, user_id: str, limit: int = 50) -> Result[List[Post]]:
        """
        Get the newest posts from the user and everyone they follow.

        Args:
            user_id: User whose feed to build
            limit: Page size; also the per-chunk query limit

        Returns:
            Result with posts sorted newest first, at most `limit` long.
            A user who follows nobody gets an empty feed and no post
            query is issued.
        """
        following = await self._follow_repo.get_following_ids(user_id)
        if following.failed:
            return Result.fail(following.error)
        if not following.value:
            return Result.ok([])

        owner_ids = list(dict.fromkeys([*sorted(following.value), user_id]))
        chunks = chunked(owner_ids, FEED_CHUNK_SIZE)
        logger.debug(
            f"Building feed for {user_id}: {len(owner_ids)} owner(s) in {len(chunks)} chunk(s)"
        )

        tasks = [
            asyncio.create_task(self._post_repo.get_posts_by_owners(chunk, limit))
            for chunk in chunks
        ]
        posts: List[Post] = []
        try:
            for next_done in asyncio.as_completed(tasks):
                result = await next_done
                if result.failed:
                    logger.error(f"Feed chunk query failed for {user_id}: {result.error}")
                    return Result.fail(result.error)
                posts.extend(result.value)
        finally:
            # Outstanding chunks after a failure are dropped, never delivered.
            for task in tasks:
                if not task.done():
                    task.cancel()

        posts.sort(key=lambda post: post.created_at, reverse=True)
        return Result.ok(posts[:limit])
