"""
Follow Repository Interface (Port).

A follow edge (follower -> followee) is stored twice: under the follower's
"follows" collection and under the followee's "followers" collection. Both
halves exist or neither does.
"""
from typing import Protocol, Set

from application.result import Result


class FollowRepository(Protocol):
    """Abstract interface for the follow graph."""

    async def follow(self, my_user_id: str, target_user_id: str) -> Result[None]:
        """
        Write both halves of the edge in one atomic batch.

        Following an already-followed user overwrites the edge in place.
        """
        ...

    async def unfollow(self, my_user_id: str, target_user_id: str) -> Result[None]:
        """
        Delete both halves of the edge in one atomic batch.

        Unfollowing a user that is not followed succeeds.
        """
        ...

    async def is_following(self, my_user_id: str, target_user_id: str) -> Result[bool]:
        """Check the follower-side half of the edge."""
        ...

    async def get_following_ids(self, my_user_id: str) -> Result[Set[str]]:
        """
        Get the IDs of every user `my_user_id` follows.

        Unpaginated: the whole collection is read.
        """
        ...

    async def get_follower_ids(self, my_user_id: str) -> Result[Set[str]]:
        """Get the IDs of every user following `my_user_id`. Unpaginated."""
        ...
