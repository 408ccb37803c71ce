"""
Infrastructure Storage Layer.

Blob storage for photos: the Supabase Storage adapter and the photo
repository that decides object paths.
"""

from infrastructure.storage.photo_repository import (
    BlobPhotoRepository,
    extension_for_content_type,
    post_photo_path,
    profile_photo_path,
)
from infrastructure.storage.supabase_blob_store import SupabaseBlobStore

__all__ = [
    "BlobPhotoRepository",
    "SupabaseBlobStore",
    "extension_for_content_type",
    "post_photo_path",
    "profile_photo_path",
]
