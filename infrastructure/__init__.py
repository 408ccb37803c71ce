"""
Infrastructure Layer for the Locked API.

This package contains concrete implementations of the application ports:
- db/: repositories built on the DocumentStore port
- document_store/: Firestore and in-memory DocumentStore adapters
- storage/: Supabase Storage blob adapter and photo repository
"""

from infrastructure.db import (
    DocumentFollowRepository,
    DocumentPostRepository,
    DocumentUserRepository,
    DocumentWorkoutRepository,
)
from infrastructure.document_store import FirestoreDocumentStore, InMemoryDocumentStore
from infrastructure.storage import BlobPhotoRepository, SupabaseBlobStore

__all__ = [
    "DocumentFollowRepository",
    "DocumentPostRepository",
    "DocumentUserRepository",
    "DocumentWorkoutRepository",
    "FirestoreDocumentStore",
    "InMemoryDocumentStore",
    "BlobPhotoRepository",
    "SupabaseBlobStore",
]
