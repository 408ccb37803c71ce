"""
User profile model.

The profile carries a denormalized `daily_post_status`: whether the user has
posted today and which post that was. Post creation keeps it current; an
external scheduler resets it once per day.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class DailyPostStatus(BaseModel):
    """Cached "posted today" flag plus today's post ID."""

    has_posted_today: bool = Field(default=False)
    post_id: Optional[str] = Field(default=None)

    model_config = {"frozen": True}


class NotificationPrefs(BaseModel):
    """Notification preferences. Notifications are on unless turned off."""

    enabled: bool = Field(default=True)

    model_config = {"frozen": True}


class User(BaseModel):
    """A user profile. `user_id` equals the identity provider's principal ID."""

    user_id: str = Field(..., description="Principal ID from the identity provider")
    full_name: str = Field(default="")
    display_name: str = Field(default="")
    email: str = Field(default="")
    daily_post_status: DailyPostStatus = Field(default_factory=DailyPostStatus)
    notification_prefs: NotificationPrefs = Field(default_factory=NotificationPrefs)
    created_at: Optional[datetime] = Field(
        default=None,
        description="Server timestamp of profile creation, if recorded",
    )

    model_config = {"frozen": True}
