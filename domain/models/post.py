"""
Post and Comment read models.

A post owns nested like markers (one per liker, keyed by liker ID) and nested
comments; a comment owns like markers of the same shape one level deeper.
Likes are not modelled: their existence is the whole state.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class Post(BaseModel):
    """
    A photo post.

    Examples:
        >>> post = Post(id="p1", caption="leg day", owner_user_id="u1",
        ...             photo_url="https://cdn/p1.jpg", created_at=datetime(2024, 1, 1))
        >>> post.owner_user_id
        'u1'
    """

    id: str = Field(..., description="Store-assigned post ID")
    caption: str = Field(default="", description="Caption text")
    owner_user_id: str = Field(
        default="",
        description="ID of the owning user (not enforced by the store)",
    )
    photo_url: str = Field(default="", description="Opaque photo URL")
    created_at: datetime = Field(..., description="Server-assigned creation time")

    model_config = {"frozen": True}


class Comment(BaseModel):
    """A comment on a post."""

    id: str = Field(..., description="Store-assigned comment ID")
    post_id: str = Field(..., description="Parent post ID")
    author_user_id: str = Field(default="", description="ID of the commenting user")
    text: str = Field(default="", description="Comment body")
    created_at: datetime = Field(..., description="Creation time")

    model_config = {"frozen": True}
