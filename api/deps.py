"""
FastAPI Dependency Providers for the Locked API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings, the Firestore client and the Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request over the shared store
- Auth providers wrap backend.auth

Usage in routers:
    from api.deps import get_post_repo, get_current_user
    from application.ports import PostRepository

    @router.get("/posts/{post_id}")
    async def get_post(
        post_id: str,
        user_id: str = Depends(get_current_user),
        post_repo: PostRepository = Depends(get_post_repo),
    ):
        return (await post_repo.get_post(post_id)).unwrap()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_document_store_required] = lambda: FakeDocumentStore()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from google.cloud import firestore
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    BlobStore,
    DocumentStore,
    FollowRepository,
    IdentityProvider,
    PhotoRepository,
    PostRepository,
    UserRepository,
    WorkoutRepository,
)
from application.use_cases import GetFeedUseCase, PublishPostUseCase

# Concrete implementations
from infrastructure import (
    BlobPhotoRepository,
    DocumentFollowRepository,
    DocumentPostRepository,
    DocumentUserRepository,
    DocumentWorkoutRepository,
    FirestoreDocumentStore,
    InMemoryDocumentStore,
    SupabaseBlobStore,
)

from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import (
    get_current_user as _get_current_user,
    get_identity_provider as _get_identity_provider,
)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Document Store Provider
# =============================================================================


@lru_cache
def get_firestore_client() -> Optional[firestore.AsyncClient]:
    """
    Get Firestore client instance (cached).

    Returns:
        AsyncClient: Firestore client, or None if no project is configured
    """
    settings = _get_settings()
    if not settings.firestore_project_id:
        return None
    return firestore.AsyncClient(
        project=settings.firestore_project_id,
        database=settings.firestore_database,
    )


@lru_cache
def get_document_store() -> Optional[DocumentStore]:
    """
    Get the process-wide DocumentStore (cached).

    With USE_IN_MEMORY_STORE set, every request shares one in-memory store;
    its contents are lost on restart.

    Returns:
        DocumentStore: Configured store, or None if not configured
    """
    settings = _get_settings()
    if settings.use_in_memory_store:
        return InMemoryDocumentStore()

    client = get_firestore_client()
    if client is None:
        return None
    return FirestoreDocumentStore(client)


def get_document_store_required() -> DocumentStore:
    """
    Get DocumentStore, raising if not configured.

    Raises:
        HTTPException: 503 if no document store is configured
    """
    store = get_document_store()
    if store is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Firestore project not configured.",
        )
    return store


# =============================================================================
# Blob Store Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_blob_store_required(
    settings: Settings = Depends(get_settings),
) -> BlobStore:
    """
    Get BlobStore implementation, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Photo storage not available. Supabase credentials not configured.",
        )
    return SupabaseBlobStore(client, settings.storage_bucket)


# =============================================================================
# Repository Providers
# =============================================================================


def get_follow_repo(
    store: DocumentStore = Depends(get_document_store_required),
) -> FollowRepository:
    """
    Get FollowRepository implementation.

    Args:
        store: Document store (injected)

    Returns:
        FollowRepository: Repository for the follow graph
    """
    return DocumentFollowRepository(store)


def get_post_repo(
    store: DocumentStore = Depends(get_document_store_required),
) -> PostRepository:
    """
    Get PostRepository implementation.

    Args:
        store: Document store (injected)

    Returns:
        PostRepository: Repository for posts, comments and likes
    """
    return DocumentPostRepository(store)


def get_user_repo(
    store: DocumentStore = Depends(get_document_store_required),
) -> UserRepository:
    """
    Get UserRepository implementation.

    Args:
        store: Document store (injected)

    Returns:
        UserRepository: Repository for user profiles
    """
    return DocumentUserRepository(store)


def get_workout_repo(
    store: DocumentStore = Depends(get_document_store_required),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Args:
        store: Document store (injected)

    Returns:
        WorkoutRepository: Repository for workouts and exercises
    """
    return DocumentWorkoutRepository(store)


def get_photo_repo(
    blob_store: BlobStore = Depends(get_blob_store_required),
) -> PhotoRepository:
    """
    Get PhotoRepository implementation.

    Args:
        blob_store: Blob store (injected)

    Returns:
        PhotoRepository: Repository for photo uploads
    """
    return BlobPhotoRepository(blob_store)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_feed_use_case(
    post_repo: PostRepository = Depends(get_post_repo),
    follow_repo: FollowRepository = Depends(get_follow_repo),
) -> GetFeedUseCase:
    """Get GetFeedUseCase with injected repositories."""
    return GetFeedUseCase(post_repo=post_repo, follow_repo=follow_repo)


def get_publish_post_use_case(
    photo_repo: PhotoRepository = Depends(get_photo_repo),
    post_repo: PostRepository = Depends(get_post_repo),
) -> PublishPostUseCase:
    """Get PublishPostUseCase with injected repositories."""
    return PublishPostUseCase(photo_repo=photo_repo, post_repo=post_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(authorization=authorization, settings=settings)


def get_identity_provider(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> IdentityProvider:
    """
    Get the IdentityProvider for the current request.

    Unlike get_current_user this never raises; a missing or invalid token
    yields a provider with no principal.
    """
    return _get_identity_provider(authorization=authorization, settings=settings)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Document store
    "get_firestore_client",
    "get_document_store",
    "get_document_store_required",
    # Blob store
    "get_supabase_client",
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
