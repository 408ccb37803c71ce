"""
Document store implementation of PostRepository.

Posts live at posts/{postId} with likes and comments nested below. Creating a
post also records it in the owner's denormalized `dailyPostStatus`; both
writes go out in a single batch so they commit together or not at all.
"""
import logging
from typing import List, Sequence

from application.exceptions import NotFoundError
from application.ports.document_store import SERVER_TIMESTAMP, DocumentStore, FieldFilter
from application.result import Result
from domain.converters import document_to_comment, document_to_post
from domain.models import Comment, Post
from infrastructure.db.collections import (
    COLLECTION_POSTS,
    comment_likes_collection,
    post_comments_collection,
    post_doc,
    post_likes_collection,
    user_doc,
)

logger = logging.getLogger(__name__)


class DocumentPostRepository:
    """
    DocumentStore implementation of PostRepository protocol.

    The store is injected via constructor for testability.
    """

    def __init__(self, store: DocumentStore):
        """
        Initialize with document store.

        Args:
            store: DocumentStore instance (injected, not global)
        """
        self._store = store

    async def create_post(
        self,
        owner_user_id: str,
        caption: str,
        photo_url: str,
        *,
        update_daily_status: bool = True,
    ) -> Result[str]:
        """Create a post and update the owner's daily status in one batch."""
        post_id = self._store.new_id(COLLECTION_POSTS)

        batch = self._store.batch()
        batch.set(post_doc(post_id), {
            "caption": caption,
            "ownerUserId": owner_user_id,
            "photoUrl": photo_url,
            "createdAt": SERVER_TIMESTAMP,
        })
        if update_daily_status:
            batch.set(
                user_doc(owner_user_id),
                {"dailyPostStatus": {"hasPostedToday": True, "postId": post_id}},
                merge=True,
            )

        try:
            await batch.commit()
        except Exception as e:
            logger.error(f"Failed to create post for user {owner_user_id}: {e}")
            return Result.fail(e)

        logger.info(f"Post {post_id} created for user {owner_user_id}")
        return Result.ok(post_id)

    async def get_post(self, post_id: str) -> Result[Post]:
        """Get a single post by ID."""
        try:
            snap = await self._store.get(post_doc(post_id))
        except Exception as e:
            logger.error(f"Failed to get post {post_id}: {e}")
            return Result.fail(e)

        if not snap.exists:
            return Result.fail(NotFoundError(f"Post not found: {post_id}"))
        return Result.ok(document_to_post(snap.id, snap.data))

    async def get_posts_by_user(
        self,
        owner_user_id: str,
        limit: int = 50,
    ) -> Result[List[Post]]:
        """Get a user's posts, newest first."""
        try:
            snaps = await self._store.query(
                COLLECTION_POSTS,
                [FieldFilter("ownerUserId", "==", owner_user_id)],
                order_by="createdAt",
                descending=True,
                limit=limit,
            )
        except Exception as e:
            logger.error(f"Failed to get posts for user {owner_user_id}: {e}")
            return Result.fail(e)

        return Result.ok([document_to_post(s.id, s.data) for s in snaps])

    async def get_posts_by_owners(
        self,
        owner_user_ids: Sequence[str],
        limit: int,
    ) -> Result[List[Post]]:
        """Get posts owned by any of the given users, newest first."""
        try:
            snaps = await self._store.query(
                COLLECTION_POSTS,
                [FieldFilter("ownerUserId", "in", list(owner_user_ids))],
                order_by="createdAt",
                descending=True,
                limit=limit,
            )
        except Exception as e:
            logger.error(f"Failed to get posts for owners {list(owner_user_ids)}: {e}")
            return Result.fail(e)

        return Result.ok([document_to_post(s.id, s.data) for s in snaps])

    # =========================================================================
    # Likes
    # =========================================================================

    async def like_post(self, post_id: str, liker_user_id: str) -> Result[None]:
        """Like a post (idempotent overwrite of the liker's marker)."""
        path = f"{post_likes_collection(post_id)}/{liker_user_id}"
        try:
            await self._store.set(path, {"createdAt": SERVER_TIMESTAMP})
            return Result.ok()
        except Exception as e:
            logger.error(f"Failed to like post {post_id} for user {liker_user_id}: {e}")
            return Result.fail(e)

    async def unlike_post(self, post_id: str, liker_user_id: str) -> Result[None]:
        """Remove a like from a post."""
        path = f"{post_likes_collection(post_id)}/{liker_user_id}"
        try:
            await self._store.delete(path)
            return Result.ok()
        except Exception as e:
            logger.error(f"Failed to unlike post {post_id} for user {liker_user_id}: {e}")
            return Result.fail(e)

    async def is_post_liked_by_user(self, post_id: str, liker_user_id: str) -> Result[bool]:
        """Check whether the user's like marker exists."""
        path = f"{post_likes_collection(post_id)}/{liker_user_id}"
        try:
            snap = await self._store.get(path)
            return Result.ok(snap.exists)
        except Exception as e:
            logger.error(f"Failed to check like on post {post_id}: {e}")
            return Result.fail(e)

    # =========================================================================
    # Comments
    # =========================================================================

    async def add_comment(
        self,
        post_id: str,
        author_user_id: str,
        text: str,
    ) -> Result[str]:
        """Add a comment to a post."""
        collection = post_comments_collection(post_id)
        comment_id = self._store.new_id(collection)
        try:
            await self._store.set(f"{collection}/{comment_id}", {
                "authorUserId": author_user_id,
                "text": text,
                "createdAt": SERVER_TIMESTAMP,
            })
        except Exception as e:
            logger.error(f"Failed to add comment to post {post_id}: {e}")
            return Result.fail(e)

        return Result.ok(comment_id)

    async def get_comments(self, post_id: str) -> Result[List[Comment]]:
        """Get a post's comments, oldest first."""
        try:
            snaps = await self._store.query(
                post_comments_collection(post_id),
                order_by="createdAt",
            )
        except Exception as e:
            logger.error(f"Failed to get comments for post {post_id}: {e}")
            return Result.fail(e)

        return Result.ok([document_to_comment(s.id, post_id, s.data) for s in snaps])

    async def like_comment(
        self,
        post_id: str,
        comment_id: str,
        liker_user_id: str,
    ) -> Result[None]:
        """Like a comment (idempotent)."""
        path = f"{comment_likes_collection(post_id, comment_id)}/{liker_user_id}"
        try:
            await self._store.set(path, {"createdAt": SERVER_TIMESTAMP})
            return Result.ok()
        except Exception as e:
            logger.error(f"Failed to like comment {comment_id} on post {post_id}: {e}")
            return Result.fail(e)

    async def unlike_comment(
        self,
        post_id: str,
        comment_id: str,
        liker_user_id: str,
    ) -> Result[None]:
        """Remove a like from a comment."""
        path = f"{comment_likes_collection(post_id, comment_id)}/{liker_user_id}"
        try:
            await self._store.delete(path)
            return Result.ok()
        except Exception as e:
            logger.error(f"Failed to unlike comment {comment_id} on post {post_id}: {e}")
            return Result.fail(e)

    async def is_comment_liked_by_user(
        self,
        post_id: str,
        comment_id: str,
        liker_user_id: str,
    ) -> Result[bool]:
        """Check whether the user's like marker exists on a comment."""
        path = f"{comment_likes_collection(post_id, comment_id)}/{liker_user_id}"
        try:
            snap = await self._store.get(path)
            return Result.ok(snap.exists)
        except Exception as e:
            logger.error(f"Failed to check like on comment {comment_id}: {e}")
            return Result.fail(e)
