"""
Document Store Interface (Port).

This module defines the abstract interface for the document database behind
the Locked app. Documents are addressed by slash-delimited paths
("posts/{postId}/likes/{likerId}"); collections by the path of their parent
plus the collection name.

The store guarantees:
- atomic single-document writes
- atomic batches across the documents explicitly listed in the batch
- equality, range and membership ("in") queries with an optional limit

Implementations may use Firestore, in-memory storage, or other backends.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence

# Server-enforced cap on the number of values in an "in" filter.
MAX_IN_VALUES = 10

QUERY_OPERATORS = ("==", "in", "<", "<=", ">", ">=")


class _ServerTimestamp:
    """Sentinel replaced by the store with its own commit time."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


@dataclass(frozen=True)
class FieldFilter:
    """A single query predicate: `field op value`."""
    field: str
    op: str
    value: Any

    def __post_init__(self):
        if self.op not in QUERY_OPERATORS:
            raise ValueError(f"Unsupported query operator: {self.op!r}")


@dataclass(frozen=True)
class DocumentSnapshot:
    """
    Point-in-time read of a single document.

    `data` is None when the document does not exist.
    """
    id: str
    path: str
    data: Optional[Dict[str, Any]] = None

    @property
    def exists(self) -> bool:
        return self.data is not None

    def get(self, field: str, default: Any = None) -> Any:
        if self.data is None:
            return default
        return self.data.get(field, default)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.data) if self.data is not None else {}


class WriteBatch(Protocol):
    """
    A named set of writes committed all-or-nothing.

    Writes are only staged by set/update/delete; nothing reaches the store
    until commit() succeeds.
    """

    def set(self, path: str, data: Dict[str, Any], *, merge: bool = False) -> None:
        ...

    def update(self, path: str, data: Dict[str, Any]) -> None:
        ...

    def delete(self, path: str) -> None:
        ...

    async def commit(self) -> None:
        """
        Apply every staged write atomically.

        Raises:
            The store's error if the batch was rejected; no write is applied.
        """
        ...


class DocumentStore(Protocol):
    """
    Abstract interface for document storage operations.

    All I/O methods are coroutines. Errors raised by the underlying client are
    propagated unchanged.
    """

    def new_id(self, collection_path: str) -> str:
        """
        Allocate a new unique document ID within a collection.

        No document is written.
        """
        ...

    async def get(self, path: str) -> DocumentSnapshot:
        """
        Read a single document.

        Returns:
            Snapshot whose `exists` is False if the document is absent
        """
        ...

    async def set(
        self,
        path: str,
        data: Dict[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        """
        Create or overwrite a document.

        Args:
            path: Document path
            data: Field values; SERVER_TIMESTAMP is resolved by the store
            merge: Merge into existing fields (nested maps recursively)
                   instead of replacing the whole document
        """
        ...

    async def update(self, path: str, data: Dict[str, Any]) -> None:
        """
        Overwrite the given top-level fields of an existing document.

        Raises:
            The store's not-found error if the document does not exist.
        """
        ...

    async def delete(self, path: str) -> None:
        """Delete a document. Deleting an absent document succeeds."""
        ...

    async def query(
        self,
        collection_path: str,
        filters: Sequence[FieldFilter] = (),
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[DocumentSnapshot]:
        """
        Query the direct children of a collection.

        Args:
            collection_path: Collection path (e.g. "posts")
            filters: Predicates combined with AND; an "in" filter accepts at
                     most MAX_IN_VALUES values
            order_by: Field to order by; documents missing it are excluded
            descending: Sort direction for order_by
            limit: Server-side truncation

        Returns:
            Matching snapshots in query order
        """
        ...

    def batch(self) -> WriteBatch:
        """Start a new atomic write batch."""
        ...
