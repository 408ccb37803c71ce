"""
API package for the Locked API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: mapping of store errors to HTTP responses
- routers/: API route handlers
- schemas/: request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_document_store,
    get_document_store_required,
    get_blob_store_required,
    get_follow_repo,
    get_post_repo,
    get_user_repo,
    get_workout_repo,
    get_photo_repo,
    get_feed_use_case,
    get_publish_post_use_case,
    get_current_user,
    get_identity_provider,
)

__all__ = [
    # Settings
    "get_settings",
    # Stores
    "get_document_store",
    "get_document_store_required",
    "get_blob_store_required",
    # Repositories
    "get_follow_repo",
    "get_post_repo",
    "get_user_repo",
    "get_workout_repo",
    "get_photo_repo",
    # Use cases
    "get_feed_use_case",
    "get_publish_post_use_case",
    # Authentication
    "get_current_user",
    "get_identity_provider",
]
