"""
Post Repository Interface (Port).

This module defines the abstract interface for posts, their comments and the
like markers nested under both.
"""
from typing import List, Protocol, Sequence

from application.result import Result
from domain.models import Comment, Post


class PostRepository(Protocol):
    """
    Abstract interface for post persistence operations.

    Every method returns a Result; the underlying store error is carried
    unchanged in `Result.error`. Nothing is retried.

    The home feed is not served here: GetFeedUseCase builds it from
    get_posts_by_owners.
    """

    async def create_post(
        self,
        owner_user_id: str,
        caption: str,
        photo_url: str,
        *,
        update_daily_status: bool = True,
    ) -> Result[str]:
        """
        Create a post and, in the same atomic batch, mark the owner as having
        posted today.

        Args:
            owner_user_id: ID of the posting user
            caption: Caption text
            photo_url: Durable photo URL
            update_daily_status: Merge {hasPostedToday: True, postId} into the
                                 owner's profile as part of the batch

        Returns:
            Result with the new post ID
        """
        ...

    async def get_post(self, post_id: str) -> Result[Post]:
        """
        Get a single post.

        Returns:
            Result with the post, or a NotFoundError failure if absent
        """
        ...

    async def get_posts_by_user(
        self,
        owner_user_id: str,
        limit: int = 50,
    ) -> Result[List[Post]]:
        """Get a user's posts, newest first, truncated to `limit`."""
        ...

    async def get_posts_by_owners(
        self,
        owner_user_ids: Sequence[str],
        limit: int,
    ) -> Result[List[Post]]:
        """
        Get posts owned by any of the given users, newest first.

        A single membership query: `owner_user_ids` must fit in one "in"
        filter.
        """
        ...

    async def like_post(self, post_id: str, liker_user_id: str) -> Result[None]:
        """Like a post. Liking twice leaves a single like."""
        ...

    async def unlike_post(self, post_id: str, liker_user_id: str) -> Result[None]:
        """Remove a like. Unliking a post that was never liked succeeds."""
        ...

    async def is_post_liked_by_user(self, post_id: str, liker_user_id: str) -> Result[bool]:
        ...

    async def add_comment(
        self,
        post_id: str,
        author_user_id: str,
        text: str,
    ) -> Result[str]:
        """
        Add a comment to a post.

        Returns:
            Result with the new comment ID
        """
        ...

    async def get_comments(self, post_id: str) -> Result[List[Comment]]:
        """Get a post's comments, oldest first."""
        ...

    async def like_comment(
        self,
        post_id: str,
        comment_id: str,
        liker_user_id: str,
    ) -> Result[None]:
        ...

    async def unlike_comment(
        self,
        post_id: str,
        comment_id: str,
        liker_user_id: str,
    ) -> Result[None]:
        ...

    async def is_comment_liked_by_user(
        self,
        post_id: str,
        comment_id: str,
        liker_user_id: str,
    ) -> Result[bool]:
        ...
