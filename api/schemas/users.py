"""
User Profile Schemas.

Request bodies for the /users endpoints. Profiles are returned as
domain.models.User.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CreateProfileRequest(BaseModel):
    """Request body for POST /users/me."""
    email: str = Field(..., min_length=3)


class FullNameRequest(BaseModel):
    full_name: str


class DisplayNameRequest(BaseModel):
    display_name: str


class NotificationPrefsRequest(BaseModel):
    enabled: bool


class DailyPostStatusRequest(BaseModel):
    """Request body for PUT /users/me/daily-status."""
    has_posted_today: bool
    post_id: Optional[str] = None
