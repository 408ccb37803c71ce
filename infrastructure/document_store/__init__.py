"""
Document store adapters.

- FirestoreDocumentStore: production adapter over google-cloud-firestore
- InMemoryDocumentStore: dict-backed store for local development and tests

Usage:
    from google.cloud import firestore
    from infrastructure.document_store import FirestoreDocumentStore

    store = FirestoreDocumentStore(firestore.AsyncClient(project="locked-app"))
"""

from infrastructure.document_store.firestore import FirestoreDocumentStore
from infrastructure.document_store.memory import InMemoryDocumentStore, InMemoryWriteBatch

__all__ = [
    "FirestoreDocumentStore",
    "InMemoryDocumentStore",
    "InMemoryWriteBatch",
]
