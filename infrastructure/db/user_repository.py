"""
Document store implementation of UserRepository.

Profiles live at users/{userId}. Besides identity fields they hold two
sub-objects with deliberately different defaults: `dailyPostStatus` starts
out "not posted" while `notificationPrefs` starts out enabled.
"""
import logging
from typing import Optional

from application.exceptions import InvalidArgumentError, NotFoundError
from application.ports.document_store import SERVER_TIMESTAMP, DocumentStore
from application.result import Result
from domain.converters import document_to_user
from domain.models import User
from infrastructure.db.collections import user_doc

logger = logging.getLogger(__name__)


class DocumentUserRepository:
    """
    DocumentStore implementation of UserRepository protocol.

    The store is injected via constructor for testability.
    """

    def __init__(self, store: DocumentStore):
        self._store = store

    async def create_user_profile(self, user_id: str, email: str) -> Result[None]:
        """
        Create the profile document at signup.

        A plain set, not a merge: calling this for an existing user resets
        the whole profile.
        """
        payload = {
            "email": email,
            "dailyPostStatus": {
                "hasPostedToday": False,
                "postId": None,
            },
            "notificationPrefs": {
                "enabled": True,
            },
            "createdAt": SERVER_TIMESTAMP,
        }
        try:
            await self._store.set(user_doc(user_id), payload)
        except Exception as e:
            logger.error(f"Failed to create profile for user {user_id}: {e}")
            return Result.fail(e)

        logger.info(f"Profile created for user {user_id}")
        return Result.ok()

    async def get_user(self, user_id: str) -> Result[User]:
        try:
            snap = await self._store.get(user_doc(user_id))
        except Exception as e:
            logger.error(f"Failed to get user {user_id}: {e}")
            return Result.fail(e)

        if not snap.exists:
            return Result.fail(NotFoundError(f"User doc not found for {user_id}"))
        return Result.ok(document_to_user(user_id, snap.data))

    async def update_profile(self, user_id: str, full_name: str) -> Result[None]:
        if not full_name or not full_name.strip():
            return Result.fail(InvalidArgumentError("fullName is required"))
        return await self._update_field(user_id, "fullName", full_name)

    async def update_notification_enabled(self, user_id: str, enabled: bool) -> Result[None]:
        return await self._update_field(user_id, "notificationPrefs", {"enabled": enabled})

    async def update_daily_post_status(
        self,
        user_id: str,
        has_posted_today: bool,
        post_id: Optional[str],
    ) -> Result[None]:
        return await self._update_field(
            user_id,
            "dailyPostStatus",
            {"hasPostedToday": has_posted_today, "postId": post_id},
        )

    async def update_full_name(self, user_id: str, full_name: str) -> Result[None]:
        return await self._update_field(user_id, "fullName", full_name)

    async def update_display_name(self, user_id: str, display_name: str) -> Result[None]:
        return await self._update_field(user_id, "displayName", display_name)

    async def _update_field(self, user_id: str, field: str, value) -> Result[None]:
        """Overwrite one top-level field of an existing profile."""
        try:
            await self._store.update(user_doc(user_id), {field: value})
            return Result.ok()
        except Exception as e:
            logger.error(f"Failed to update {field} for user {user_id}: {e}")
            return Result.fail(e)
