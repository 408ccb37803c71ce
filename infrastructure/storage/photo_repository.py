"""
Blob store implementation of PhotoRepository.

Post photos are stored under images/{userId}/{epochMillis}.{ext} so every
upload gets a fresh object. A user's profile photo always lives at
profilePhotos/{userId}/profile.{ext} and is replaced on re-upload.
"""
import logging
import time
from typing import Callable, Dict, Optional

from application.ports.blob_store import BlobStore
from application.ports.photo_repository import PhotoType
from application.result import Result

logger = logging.getLogger(__name__)

POST_PHOTOS_ROOT = "images"
PROFILE_PHOTOS_ROOT = "profilePhotos"

_EXTENSIONS: Dict[str, str] = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}
DEFAULT_EXTENSION = "jpg"


def extension_for_content_type(content_type: Optional[str]) -> str:
    """Map a MIME type to a file extension; unknown types fall back to jpg."""
    if not content_type:
        return DEFAULT_EXTENSION
    return _EXTENSIONS.get(content_type.strip().lower(), DEFAULT_EXTENSION)


def post_photo_path(user_id: str, epoch_millis: int, content_type: Optional[str]) -> str:
    return f"{POST_PHOTOS_ROOT}/{user_id}/{epoch_millis}.{extension_for_content_type(content_type)}"


def profile_photo_path(user_id: str, content_type: Optional[str]) -> str:
    return f"{PROFILE_PHOTOS_ROOT}/{user_id}/profile.{extension_for_content_type(content_type)}"


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class BlobPhotoRepository:
    """
    BlobStore implementation of PhotoRepository protocol.

    Args:
        blob_store: Where photo bytes are written
        clock: Returns epoch milliseconds; used to name post photos
    """

    def __init__(self, blob_store: BlobStore, clock: Optional[Callable[[], int]] = None):
        self._blob_store = blob_store
        self._clock = clock or _epoch_millis

    def path_for(self, photo_type: PhotoType, user_id: str, content_type: str) -> str:
        if photo_type == PhotoType.PROFILE_PHOTO:
            return profile_photo_path(user_id, content_type)
        return post_photo_path(user_id, self._clock(), content_type)

    async def upload_photo(
        self,
        photo_type: PhotoType,
        user_id: str,
        local_path: str,
        content_type: str = "image/jpeg",
    ) -> Result[str]:
        """Upload a photo and resolve its durable URL."""
        path = self.path_for(photo_type, user_id, content_type)
        try:
            handle = await self._blob_store.upload(path, local_path, content_type)
            url = await self._blob_store.get_durable_url(handle)
        except Exception as e:
            logger.error(f"Failed to upload {photo_type.value} for user {user_id} to {path}: {e}")
            return Result.fail(e)

        logger.info(f"Uploaded {photo_type.value} for user {user_id} to {path}")
        return Result.ok(url)
