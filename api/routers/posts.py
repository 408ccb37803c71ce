"""
Posts router.

This router contains endpoints for:
- POST /posts - Create a post for the current user
- GET /posts/{post_id} - Get a post
- GET /posts/by-user/{owner_user_id} - Get a user's posts, newest first
- PUT/DELETE /posts/{post_id}/likes - Like / unlike a post
- GET /posts/{post_id}/likes/me - Whether the current user liked a post
- POST/GET /posts/{post_id}/comments - Add / list comments
- PUT/DELETE /posts/{post_id}/comments/{comment_id}/likes - Like / unlike a comment
- GET /posts/{post_id}/comments/{comment_id}/likes/me - Comment like status
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_current_user, get_post_repo, get_settings
from api.errors import unwrap_or_raise
from api.schemas.posts import (
    AddCommentRequest,
    CommentListResponse,
    CreatePostRequest,
    LikeStatusResponse,
    PostListResponse,
)
from application.ports import PostRepository
from backend.settings import Settings
from domain.models import Post

router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
)


# =============================================================================
# Posts
# =============================================================================


@router.post("", status_code=201)
async def create_post_endpoint(
    request: CreatePostRequest,
    user_id: str = Depends(get_current_user),
    post_repo: PostRepository = Depends(get_post_repo),
):
    """
    Create a post owned by the current user.

    The owner's daily post status is updated in the same batch unless
    update_daily_status is false.
    """
    post_id = unwrap_or_raise(await post_repo.create_post(
        user_id,
        request.caption,
        request.photo_url,
        update_daily_status=request.update_daily_status,
    ))
    return {"success": True, "post_id": post_id}


@router.get("/by-user/{owner_user_id}", response_model=PostListResponse)
async def get_posts_by_user_endpoint(
    owner_user_id: str,
    limit: Optional[int] = Query(None, ge=1, le=200),
    user_id: str = Depends(get_current_user),
    post_repo: PostRepository = Depends(get_post_repo),
    settings: Settings = Depends(get_settings),
):
    """Get a user's posts, newest first."""
    posts = unwrap_or_raise(await post_repo.get_posts_by_user(
        owner_user_id,
        limit=limit or settings.profile_posts_page_size,
    ))
    return PostListResponse(posts=posts, count=len(posts))


@router.get("/{post_id}", response_model=Post)
async def get_post_endpoint(
    post_id: str,
    user_id: str = Depends(get_current_user),
    post_repo: PostRepository = Depends(get_post_repo),
):
    return unwrap_or_raise(await post_repo.get_post(post_id))


# =============================================================================
# Post Likes
# =============================================================================


@router.put("/{post_id}/likes", status_code=204)
async def like_post_endpoint(
    post_id: str,
    user_id: str = Depends(get_current_user),
    post_repo: PostRepository = Depends(get_post_repo),
):
    unwrap_or_raise(await post_repo.like_post(post_id, user_id))


@router.delete("/{post_id}/likes", status_code=204)
async def unlike_post_endpoint(
    post_id: str,
    user_id: str = Depends(get_current_user),
    post_repo: PostRepository = Depends(get_post_repo),
):
    unwrap_or_raise(await post_repo.unlike_post(post_id, user_id))


@router.get("/{post_id}/likes/me", response_model=LikeStatusResponse)
async def post_like_status_endpoint(
    post_id: str,
    user_id: str = Depends(get_current_user),
    post_repo: PostRepository = Depends(get_post_repo),
):
    liked = unwrap_or_raise(await post_repo.is_post_liked_by_user(post_id, user_id))
    return LikeStatusResponse(liked=liked)


# =============================================================================
# Comments
# =============================================================================


@router.post("/{post_id}/comments", status_code=201)
async def add_comment_endpoint(
    post_id: str,
    request: AddCommentRequest,
    user_id: str = Depends(get_current_user),
    post_repo: PostRepository = Depends(get_post_repo),
):
    """Add a comment by the current user. The post's existence is not checked."""
    comment_id = unwrap_or_raise(await post_repo.add_comment(post_id, user_id, request.text))
    return {"success": True, "comment_id": comment_id}


@router.get("/{post_id}/comments", response_model=CommentListResponse)
async def get_comments_endpoint(
    post_id: str,
    user_id: str = Depends(get_current_user),
    post_repo: PostRepository = Depends(get_post_repo),
):
    """Get a post's comments, oldest first."""
    comments = unwrap_or_raise(await post_repo.get_comments(post_id))
    return CommentListResponse(comments=comments, count=len(comments))


@router.put("/{post_id}/comments/{comment_id}/likes", status_code=204)
async def like_comment_endpoint(
    post_id: str,
    comment_id: str,
    user_id: str = Depends(get_current_user),
    post_repo: PostRepository = Depends(get_post_repo),
):
    unwrap_or_raise(await post_repo.like_comment(post_id, comment_id, user_id))


@router.delete("/{post_id}/comments/{comment_id}/likes", status_code=204)
async def unlike_comment_endpoint(
    post_id: str,
    comment_id: str,
    user_id: str = Depends(get_current_user),
    post_repo: PostRepository = Depends(get_post_repo),
):
    unwrap_or_raise(await post_repo.unlike_comment(post_id, comment_id, user_id))


@router.get("/{post_id}/comments/{comment_id}/likes/me", response_model=LikeStatusResponse)
async def comment_like_status_endpoint(
    post_id: str,
    comment_id: str,
    user_id: str = Depends(get_current_user),
    post_repo: PostRepository = Depends(get_post_repo),
):
    liked = unwrap_or_raise(
        await post_repo.is_comment_liked_by_user(post_id, comment_id, user_id)
    )
    return LikeStatusResponse(liked=liked)
