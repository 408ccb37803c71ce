"""
Users router.

This router contains endpoints for:
- POST /users/me - Create the current user's profile (overwrites an existing one)
- GET /users/me - Get the current user's profile
- GET /users/{user_id} - Get another user's profile
- PATCH /users/me/profile - Set full name (required, non-blank)
- PUT /users/me/full-name - Set full name
- PUT /users/me/display-name - Set display name
- PUT /users/me/notifications - Enable or disable notifications
- PUT /users/me/daily-status - Set the daily post status
"""

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_user_repo
from api.errors import unwrap_or_raise
from api.schemas.users import (
    CreateProfileRequest,
    DailyPostStatusRequest,
    DisplayNameRequest,
    FullNameRequest,
    NotificationPrefsRequest,
)
from application.ports import UserRepository
from domain.models import User

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


@router.post("/me", status_code=201)
async def create_profile_endpoint(
    request: CreateProfileRequest,
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    """
    Create the profile document at signup.

    Calling this again resets the whole profile to its defaults.
    """
    unwrap_or_raise(await user_repo.create_user_profile(user_id, request.email))
    return {"success": True, "user_id": user_id}


@router.get("/me", response_model=User)
async def get_my_profile_endpoint(
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    return unwrap_or_raise(await user_repo.get_user(user_id))


@router.get("/{profile_user_id}", response_model=User)
async def get_profile_endpoint(
    profile_user_id: str,
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    return unwrap_or_raise(await user_repo.get_user(profile_user_id))


@router.patch("/me/profile", status_code=204)
async def update_profile_endpoint(
    request: FullNameRequest,
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    """Update the profile; a blank full name is rejected with 400."""
    unwrap_or_raise(await user_repo.update_profile(user_id, request.full_name))


@router.put("/me/full-name", status_code=204)
async def update_full_name_endpoint(
    request: FullNameRequest,
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    unwrap_or_raise(await user_repo.update_full_name(user_id, request.full_name))


@router.put("/me/display-name", status_code=204)
async def update_display_name_endpoint(
    request: DisplayNameRequest,
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    unwrap_or_raise(await user_repo.update_display_name(user_id, request.display_name))


@router.put("/me/notifications", status_code=204)
async def update_notifications_endpoint(
    request: NotificationPrefsRequest,
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    unwrap_or_raise(await user_repo.update_notification_enabled(user_id, request.enabled))


@router.put("/me/daily-status", status_code=204)
async def update_daily_status_endpoint(
    request: DailyPostStatusRequest,
    user_id: str = Depends(get_current_user),
    user_repo: UserRepository = Depends(get_user_repo),
):
    unwrap_or_raise(await user_repo.update_daily_post_status(
        user_id,
        request.has_posted_today,
        request.post_id,
    ))
