"""
In-memory implementation of DocumentStore.

Used for local development (USE_IN_MEMORY_STORE=true) and as the base of the
test fake. Follows the document store's semantics closely enough for the
stores built on top of it:

- every write, single or batched, goes through one commit path that applies
  all staged operations to a copy and swaps it in, so a batch is all-or-nothing
- SERVER_TIMESTAMP resolves to one strictly increasing time per commit
- `update` on a missing document fails; `delete` of a missing one succeeds
- queries see direct children only, skip documents missing a filtered or
  ordered field, and reject "in" filters over MAX_IN_VALUES values
"""
import copy
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from application.exceptions import InvalidArgumentError, NotFoundError, StoreError
from application.ports.document_store import (
    MAX_IN_VALUES,
    SERVER_TIMESTAMP,
    DocumentSnapshot,
    FieldFilter,
)

logger = logging.getLogger(__name__)


@dataclass
class WriteOp:
    """A staged write: kind is "set", "update" or "delete"."""
    kind: str
    path: str
    data: Dict[str, Any] = field(default_factory=dict)
    merge: bool = False


def _check_document_path(path: str) -> None:
    segments = path.split("/")
    if len(segments) % 2 != 0 or not all(segments):
        raise ValueError(f"Not a document path: {path!r}")


def _check_collection_path(path: str) -> None:
    segments = path.split("/")
    if len(segments) % 2 != 1 or not all(segments):
        raise ValueError(f"Not a collection path: {path!r}")


def _resolve(value: Any, timestamp: datetime) -> Any:
    """Deep-copy `value`, replacing SERVER_TIMESTAMP with `timestamp`."""
    if value is SERVER_TIMESTAMP:
        return timestamp
    if isinstance(value, dict):
        return {k: _resolve(v, timestamp) for k, v in value.items()}
    if isinstance(value, list):
        return [_resolve(v, timestamp) for v in value]
    return copy.deepcopy(value)


def _merge_into(target: Dict[str, Any], incoming: Dict[str, Any]) -> None:
    for key, value in incoming.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge_into(target[key], value)
        else:
            target[key] = value


def _update_into(target: Dict[str, Any], incoming: Dict[str, Any]) -> None:
    # Dotted keys address nested fields; plain keys replace the whole field.
    for key, value in incoming.items():
        parts = key.split(".")
        node = target
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value


def _matches(data: Dict[str, Any], flt: FieldFilter) -> bool:
    if flt.field not in data:
        return False
    actual = data[flt.field]
    if flt.op == "==":
        return actual == flt.value
    if flt.op == "in":
        return actual in flt.value
    try:
        if flt.op == "<":
            return actual < flt.value
        if flt.op == "<=":
            return actual <= flt.value
        if flt.op == ">":
            return actual > flt.value
        return actual >= flt.value
    except TypeError:
        return False


class InMemoryWriteBatch:
    """WriteBatch that stages operations until commit()."""

    def __init__(self, store: "InMemoryDocumentStore"):
        self._store = store
        self._ops: List[WriteOp] = []
        self._committed = False

    def set(self, path: str, data: Dict[str, Any], *, merge: bool = False) -> None:
        _check_document_path(path)
        self._ops.append(WriteOp("set", path, data, merge))

    def update(self, path: str, data: Dict[str, Any]) -> None:
        _check_document_path(path)
        self._ops.append(WriteOp("update", path, data))

    def delete(self, path: str) -> None:
        _check_document_path(path)
        self._ops.append(WriteOp("delete", path))

    @property
    def operations(self) -> List[WriteOp]:
        return list(self._ops)

    async def commit(self) -> None:
        if self._committed:
            raise StoreError("Batch has already been committed")
        self._committed = True
        await self._store._commit(self._ops)


class InMemoryDocumentStore:
    """
    Dict-backed DocumentStore.

    Documents are keyed by their full path. Nothing is persisted.
    """

    def __init__(self, *, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize with empty storage.

        Args:
            clock: Source of commit times (defaults to UTC now)
        """
        self._documents: Dict[str, Dict[str, Any]] = {}
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._last_timestamp: Optional[datetime] = None

    def _next_timestamp(self) -> datetime:
        now = self._clock()
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    async def _commit(self, ops: Sequence[WriteOp]) -> None:
        """Apply `ops` atomically: on any failure nothing is applied."""
        timestamp = self._next_timestamp()
        # Only the touched documents are copied; None marks a deleted path.
        staged: Dict[str, Optional[Dict[str, Any]]] = {}

        for op in ops:
            if op.path not in staged:
                current = self._documents.get(op.path)
                staged[op.path] = copy.deepcopy(current) if current is not None else None
            data = _resolve(op.data, timestamp)
            if op.kind == "set":
                if op.merge and staged[op.path] is not None:
                    _merge_into(staged[op.path], data)
                else:
                    staged[op.path] = data
            elif op.kind == "update":
                if staged[op.path] is None:
                    raise NotFoundError(f"No document to update: {op.path}")
                _update_into(staged[op.path], data)
            elif op.kind == "delete":
                staged[op.path] = None
            else:
                raise ValueError(f"Unknown write kind: {op.kind!r}")

        for path, data in staged.items():
            if data is None:
                self._documents.pop(path, None)
            else:
                self._documents[path] = data

    # =========================================================================
    # DocumentStore Protocol Methods
    # =========================================================================

    def new_id(self, collection_path: str) -> str:
        _check_collection_path(collection_path)
        return uuid.uuid4().hex[:20]

    async def get(self, path: str) -> DocumentSnapshot:
        _check_document_path(path)
        data = self._documents.get(path)
        return DocumentSnapshot(
            id=path.rsplit("/", 1)[-1],
            path=path,
            data=copy.deepcopy(data) if data is not None else None,
        )

    async def set(
        self,
        path: str,
        data: Dict[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        _check_document_path(path)
        await self._commit([WriteOp("set", path, data, merge)])

    async def update(self, path: str, data: Dict[str, Any]) -> None:
        _check_document_path(path)
        await self._commit([WriteOp("update", path, data)])

    async def delete(self, path: str) -> None:
        _check_document_path(path)
        await self._commit([WriteOp("delete", path)])

    async def query(
        self,
        collection_path: str,
        filters: Sequence[FieldFilter] = (),
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[DocumentSnapshot]:
        _check_collection_path(collection_path)
        for flt in filters:
            if flt.op == "in":
                values = list(flt.value)
                if not values:
                    raise InvalidArgumentError("'in' filter requires at least one value")
                if len(values) > MAX_IN_VALUES:
                    raise InvalidArgumentError(
                        f"'in' filter supports at most {MAX_IN_VALUES} values, got {len(values)}"
                    )

        matches: List[DocumentSnapshot] = []
        for path, data in self._documents.items():
            parent, _, doc_id = path.rpartition("/")
            if parent != collection_path:
                continue
            if not all(_matches(data, flt) for flt in filters):
                continue
            if order_by is not None and order_by not in data:
                continue
            matches.append(DocumentSnapshot(id=doc_id, path=path, data=copy.deepcopy(data)))

        if order_by is not None:
            matches.sort(key=lambda snap: (snap.data[order_by], snap.id), reverse=descending)
        if limit is not None:
            matches = matches[:limit]

        logger.debug(f"Query {collection_path} matched {len(matches)} document(s)")
        return matches

    def batch(self) -> InMemoryWriteBatch:
        return InMemoryWriteBatch(self)
