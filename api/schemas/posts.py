"""
Post Schemas.

Schemas for:
- CreatePostRequest / AddCommentRequest: request bodies
- PostListResponse / CommentListResponse / LikeStatusResponse: responses
"""

from typing import List

from pydantic import BaseModel, Field

from domain.models import Comment, Post


class CreatePostRequest(BaseModel):
    """Request body for POST /posts."""
    caption: str = Field(default="", max_length=2200)
    photo_url: str = Field(..., min_length=1, description="Durable URL of an uploaded photo")
    update_daily_status: bool = Field(
        default=True,
        description="Also mark the owner as having posted today",
    )


class AddCommentRequest(BaseModel):
    """Request body for POST /posts/{post_id}/comments."""
    text: str = Field(..., min_length=1, max_length=2200)


class PostListResponse(BaseModel):
    posts: List[Post]
    count: int


class CommentListResponse(BaseModel):
    comments: List[Comment]
    count: int


class LikeStatusResponse(BaseModel):
    liked: bool
