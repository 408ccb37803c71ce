"""
Feed router.

- GET /feed - Home feed for the current user
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_current_user, get_feed_use_case, get_settings
from api.errors import unwrap_or_raise
from api.schemas.posts import PostListResponse
from application.use_cases import GetFeedUseCase
from backend.settings import Settings

router = APIRouter(
    tags=["Feed"],
)


@router.get("/feed", response_model=PostListResponse)
async def get_feed_endpoint(
    limit: Optional[int] = Query(None, ge=1, le=200),
    user_id: str = Depends(get_current_user),
    feed: GetFeedUseCase = Depends(get_feed_use_case),
    settings: Settings = Depends(get_settings),
):
    """
    Get the newest posts from the current user and everyone they follow.

    A user who follows nobody gets an empty feed; their own posts are not
    shown either.
    """
    posts = unwrap_or_raise(await feed.execute(user_id, limit=limit or settings.feed_page_size))
    return PostListResponse(posts=posts, count=len(posts))
