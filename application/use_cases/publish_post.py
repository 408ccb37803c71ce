"""
Publish Post Use Case.

Uploads a post photo to blob storage, then creates the post document that
references it. Nothing is written to the document store unless the upload
succeeded.
"""
import logging
from typing import Optional

from application.exceptions import InvalidArgumentError, NotAuthenticatedError
from application.ports.photo_repository import PhotoRepository, PhotoType
from application.ports.post_repository import PostRepository
from application.result import Result

logger = logging.getLogger(__name__)


class PublishPostUseCase:
    """
    Use case for publishing a photo post.

    Usage:
        >>> use_case = PublishPostUseCase(photo_repo=photo_repo, post_repo=post_repo)
        >>> result = await use_case.execute(
        ...     user_id="user-123",
        ...     local_path="/tmp/upload.jpg",
        ...     caption="leg day",
        ... )
        >>> if result.success:
        ...     print(f"Published post: {result.value}")
    """

    def __init__(self, photo_repo: PhotoRepository, post_repo: PostRepository) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            photo_repo: Uploads the photo and returns its durable URL
            post_repo: Creates the post document
        """
        self._photo_repo = photo_repo
        self._post_repo = post_repo

    async def execute(
        self,
        user_id: Optional[str],
        local_path: Optional[str],
        caption: str,
        content_type: str = "image/jpeg",
    ) -> Result[str]:
        """
        Publish a post.

        Args:
            user_id: Signed-in user, or None if nobody is signed in
            local_path: Local photo file to upload
            caption: Post caption
            content_type: MIME type of the photo

        Returns:
            Result with the new post ID
        """
        if not local_path:
            return Result.fail(InvalidArgumentError("Image is missing"))
        if not user_id:
            return Result.fail(NotAuthenticatedError("User not logged in"))

        upload = await self._photo_repo.upload_photo(
            PhotoType.POST_PHOTO,
            user_id,
            local_path,
            content_type,
        )
        if upload.failed:
            logger.warning(f"Photo upload failed for user {user_id}, post not created: {upload.error}")
            return Result.fail(upload.error)

        created = await self._post_repo.create_post(user_id, caption, upload.value)
        if created.success:
            logger.info(f"User {user_id} published post {created.value}")
        return created
