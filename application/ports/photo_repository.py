"""
Photo Repository Interface (Port).

Uploads post and profile photos to blob storage under their well-known paths.
"""
from enum import Enum
from typing import Protocol

from application.result import Result


class PhotoType(str, Enum):
    """Where a photo is stored."""
    POST_PHOTO = "post_photo"
    PROFILE_PHOTO = "profile_photo"


class PhotoRepository(Protocol):
    """Abstract interface for photo uploads."""

    async def upload_photo(
        self,
        photo_type: PhotoType,
        user_id: str,
        local_path: str,
        content_type: str = "image/jpeg",
    ) -> Result[str]:
        """
        Upload a photo.

        Args:
            photo_type: Post photo or profile photo
            user_id: Owning user ID (part of the object path)
            local_path: Local file to upload
            content_type: MIME type; also selects the file extension

        Returns:
            Result with the durable URL of the uploaded photo
        """
        ...
