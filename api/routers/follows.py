"""
Follows router.

This router contains endpoints for:
- GET /follows/following - IDs the current user follows
- GET /follows/followers - IDs following the current user
- PUT /follows/{target_user_id} - Follow a user
- DELETE /follows/{target_user_id} - Unfollow a user
- GET /follows/{target_user_id}/status - Whether the current user follows target
"""

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_follow_repo
from api.errors import unwrap_or_raise
from application.ports import FollowRepository

router = APIRouter(
    prefix="/follows",
    tags=["Follows"],
)


@router.get("/following")
async def get_following_endpoint(
    user_id: str = Depends(get_current_user),
    follow_repo: FollowRepository = Depends(get_follow_repo),
):
    ids = unwrap_or_raise(await follow_repo.get_following_ids(user_id))
    return {"user_ids": sorted(ids), "count": len(ids)}


@router.get("/followers")
async def get_followers_endpoint(
    user_id: str = Depends(get_current_user),
    follow_repo: FollowRepository = Depends(get_follow_repo),
):
    ids = unwrap_or_raise(await follow_repo.get_follower_ids(user_id))
    return {"user_ids": sorted(ids), "count": len(ids)}


@router.put("/{target_user_id}", status_code=204)
async def follow_endpoint(
    target_user_id: str,
    user_id: str = Depends(get_current_user),
    follow_repo: FollowRepository = Depends(get_follow_repo),
):
    """Follow a user. Following twice is a no-op."""
    unwrap_or_raise(await follow_repo.follow(user_id, target_user_id))


@router.delete("/{target_user_id}", status_code=204)
async def unfollow_endpoint(
    target_user_id: str,
    user_id: str = Depends(get_current_user),
    follow_repo: FollowRepository = Depends(get_follow_repo),
):
    """Unfollow a user. Unfollowing a user not followed is a no-op."""
    unwrap_or_raise(await follow_repo.unfollow(user_id, target_user_id))


@router.get("/{target_user_id}/status")
async def follow_status_endpoint(
    target_user_id: str,
    user_id: str = Depends(get_current_user),
    follow_repo: FollowRepository = Depends(get_follow_repo),
):
    following = unwrap_or_raise(await follow_repo.is_following(user_id, target_user_id))
    return {"following": following}
