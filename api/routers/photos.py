"""
Photos router.

This router contains endpoints for:
- POST /photos - Upload a post or profile photo, returning its durable URL
- POST /photos/posts - Upload a photo and publish a post referencing it
"""

import logging
import os
import tempfile
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from api.deps import (
    get_current_user,
    get_identity_provider,
    get_photo_repo,
    get_publish_post_use_case,
)
from api.errors import unwrap_or_raise
from application.ports import IdentityProvider, PhotoRepository, PhotoType
from application.use_cases import PublishPostUseCase
from infrastructure.storage import extension_for_content_type

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/photos",
    tags=["Photos"],
)

MAX_PHOTO_BYTES = 10 * 1024 * 1024
SPOOL_CHUNK_BYTES = 1024 * 1024


async def _spool_to_disk(file: UploadFile) -> str:
    """
    Write an upload to a temporary file and return its path.

    The body is read in chunks and reading stops as soon as it passes
    MAX_PHOTO_BYTES, so an oversized upload is never held in memory.
    """
    suffix = f".{extension_for_content_type(file.content_type)}"
    tmp = tempfile.NamedTemporaryFile(suffix=suffix, delete=False)
    try:
        with tmp:
            size = 0
            while True:
                chunk = await file.read(SPOOL_CHUNK_BYTES)
                if not chunk:
                    break
                size += len(chunk)
                if size > MAX_PHOTO_BYTES:
                    raise HTTPException(status_code=413, detail="Photo too large")
                tmp.write(chunk)
    except Exception:
        _discard(tmp.name)
        raise
    return tmp.name


def _discard(path: Optional[str]) -> None:
    if path and os.path.exists(path):
        os.remove(path)


@router.post("", status_code=201)
async def upload_photo_endpoint(
    file: UploadFile = File(...),
    photo_type: PhotoType = Form(PhotoType.POST_PHOTO),
    user_id: str = Depends(get_current_user),
    photo_repo: PhotoRepository = Depends(get_photo_repo),
):
    """
    Upload a photo for the current user.

    Profile photos replace the previous one; post photos are always stored
    as a new object.
    """
    content_type = file.content_type or "image/jpeg"
    local_path = await _spool_to_disk(file)
    try:
        url = unwrap_or_raise(
            await photo_repo.upload_photo(photo_type, user_id, local_path, content_type)
        )
    finally:
        _discard(local_path)
    return {"success": True, "url": url}


@router.post("/posts", status_code=201)
async def publish_post_endpoint(
    file: Optional[UploadFile] = File(None),
    caption: str = Form(""),
    identity: IdentityProvider = Depends(get_identity_provider),
    publish: PublishPostUseCase = Depends(get_publish_post_use_case),
):
    """
    Upload a photo and create a post for it.

    A missing photo is rejected with 400 and a missing or invalid token with
    401. No post is created if the upload fails.
    """
    local_path = await _spool_to_disk(file) if file is not None else None
    try:
        post_id = unwrap_or_raise(await publish.execute(
            identity.current_principal_id(),
            local_path,
            caption,
            (file.content_type if file is not None else None) or "image/jpeg",
        ))
    finally:
        _discard(local_path)
    return {"success": True, "post_id": post_id}
