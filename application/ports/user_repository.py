"""
User Repository Interface (Port).

This module defines the abstract interface for user profile documents,
including the denormalized daily-post status.
"""
from typing import Optional, Protocol

from application.result import Result
from domain.models import User


class UserRepository(Protocol):
    """
    Abstract interface for user profile operations.

    Each update touches a single field or sub-object and is never batched
    with another write.
    """

    async def create_user_profile(self, user_id: str, email: str) -> Result[None]:
        """
        Create the profile document at signup.

        Writes the whole document: invoking it again for an existing user
        replaces every field, including names set since signup.
        """
        ...

    async def get_user(self, user_id: str) -> Result[User]:
        """
        Get a user profile.

        Returns:
            Result with the user, or a NotFoundError failure if absent
        """
        ...

    async def update_profile(self, user_id: str, full_name: str) -> Result[None]:
        """
        Update the full name from the profile editor.

        Fails with InvalidArgumentError, without writing, if `full_name` is
        blank.
        """
        ...

    async def update_notification_enabled(self, user_id: str, enabled: bool) -> Result[None]:
        ...

    async def update_daily_post_status(
        self,
        user_id: str,
        has_posted_today: bool,
        post_id: Optional[str],
    ) -> Result[None]:
        ...

    async def update_full_name(self, user_id: str, full_name: str) -> Result[None]:
        ...

    async def update_display_name(self, user_id: str, display_name: str) -> Result[None]:
        ...
