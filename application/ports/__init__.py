"""
Repository Interfaces (Ports) for the Locked API.

This package defines abstract interfaces that decouple application logic from
infrastructure (document store, blob storage, identity). Implementations are
provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import PostRepository, FollowRepository

    class FeedService:
        def __init__(self, post_repo: PostRepository, follow_repo: FollowRepository):
            self.post_repo = post_repo
            self.follow_repo = follow_repo
"""

# External collaborators
from application.ports.document_store import (
    DocumentStore,
    DocumentSnapshot,
    FieldFilter,
    WriteBatch,
    SERVER_TIMESTAMP,
    MAX_IN_VALUES,
)
from application.ports.blob_store import BlobStore
from application.ports.identity_provider import IdentityProvider

# Stores
from application.ports.post_repository import PostRepository
from application.ports.follow_repository import FollowRepository
from application.ports.user_repository import UserRepository
from application.ports.workout_repository import WorkoutRepository
from application.ports.photo_repository import PhotoRepository, PhotoType

__all__ = [
    # Document store
    "DocumentStore",
    "DocumentSnapshot",
    "FieldFilter",
    "WriteBatch",
    "SERVER_TIMESTAMP",
    "MAX_IN_VALUES",
    # Blob store / identity
    "BlobStore",
    "IdentityProvider",
    # Stores
    "PostRepository",
    "FollowRepository",
    "UserRepository",
    "WorkoutRepository",
    "PhotoRepository",
    "PhotoType",
]
