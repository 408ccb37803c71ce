"""
Infrastructure Database Layer.

Document-store-backed implementations of the repository interfaces defined
in application.ports. Every repository takes a DocumentStore in its
constructor, so the same code runs against Firestore or the in-memory store.

Usage:
    from google.cloud import firestore
    from infrastructure.document_store import FirestoreDocumentStore
    from infrastructure.db import DocumentPostRepository, DocumentFollowRepository

    store = FirestoreDocumentStore(firestore.AsyncClient(project="locked-app"))

    follow_repo = DocumentFollowRepository(store)
    post_repo = DocumentPostRepository(store)
"""

from infrastructure.db.follow_repository import DocumentFollowRepository
from infrastructure.db.post_repository import DocumentPostRepository
from infrastructure.db.user_repository import DocumentUserRepository
from infrastructure.db.workout_repository import DocumentWorkoutRepository

__all__ = [
    # Social graph
    "DocumentFollowRepository",

    # Posts, comments, likes
    "DocumentPostRepository",

    # Profiles
    "DocumentUserRepository",

    # Workouts and exercises
    "DocumentWorkoutRepository",
]
