"""
Firestore implementation of DocumentStore.

Wraps a `google.cloud.firestore.AsyncClient` injected through the constructor.
Errors raised by the client (google.api_core.exceptions.*) are propagated
unchanged so stores can surface them as-is.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter as FirestoreFieldFilter

from application.ports.document_store import (
    SERVER_TIMESTAMP,
    DocumentSnapshot,
    FieldFilter,
)

logger = logging.getLogger(__name__)


def _to_firestore(value: Any) -> Any:
    """Swap our SERVER_TIMESTAMP sentinel for Firestore's."""
    if value is SERVER_TIMESTAMP:
        return firestore.SERVER_TIMESTAMP
    if isinstance(value, dict):
        return {k: _to_firestore(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_firestore(v) for v in value]
    return value


def _to_snapshot(doc: Any, path: str) -> DocumentSnapshot:
    return DocumentSnapshot(
        id=doc.id,
        path=path,
        data=doc.to_dict() if doc.exists else None,
    )


class FirestoreWriteBatch:
    """WriteBatch backed by a Firestore AsyncWriteBatch."""

    def __init__(self, client: firestore.AsyncClient):
        self._client = client
        self._batch = client.batch()

    def set(self, path: str, data: Dict[str, Any], *, merge: bool = False) -> None:
        self._batch.set(self._client.document(path), _to_firestore(data), merge=merge)

    def update(self, path: str, data: Dict[str, Any]) -> None:
        self._batch.update(self._client.document(path), _to_firestore(data))

    def delete(self, path: str) -> None:
        self._batch.delete(self._client.document(path))

    async def commit(self) -> None:
        await self._batch.commit()


class FirestoreDocumentStore:
    """
    Firestore implementation of DocumentStore protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: firestore.AsyncClient):
        """
        Initialize with Firestore client.

        Args:
            client: Firestore AsyncClient instance (injected, not global)
        """
        self._client = client

    def new_id(self, collection_path: str) -> str:
        # document() with no ID allocates one client-side without writing.
        return self._client.collection(collection_path).document().id

    async def get(self, path: str) -> DocumentSnapshot:
        doc = await self._client.document(path).get()
        return _to_snapshot(doc, path)

    async def set(
        self,
        path: str,
        data: Dict[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        await self._client.document(path).set(_to_firestore(data), merge=merge)

    async def update(self, path: str, data: Dict[str, Any]) -> None:
        await self._client.document(path).update(_to_firestore(data))

    async def delete(self, path: str) -> None:
        await self._client.document(path).delete()

    async def query(
        self,
        collection_path: str,
        filters: Sequence[FieldFilter] = (),
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[DocumentSnapshot]:
        query = self._client.collection(collection_path)

        for flt in filters:
            value = list(flt.value) if flt.op == "in" else flt.value
            query = query.where(filter=FirestoreFieldFilter(flt.field, flt.op, value))
        if order_by is not None:
            direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            query = query.order_by(order_by, direction=direction)
        if limit is not None:
            query = query.limit(limit)

        docs = await query.get()
        return [_to_snapshot(doc, doc.reference.path) for doc in docs]

    def batch(self) -> FirestoreWriteBatch:
        return FirestoreWriteBatch(self._client)
