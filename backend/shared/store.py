"""
Document store abstraction.

Repositories talk to a named collection through exact-match lookups and
never see the engine behind it. Two implementations are provided:

- SupabaseDocumentStore: tables in Supabase (PostgREST), used in production
- InMemoryDocumentStore: dictionaries guarded by a lock, used by tests and
  by local runs with STORE_BACKEND=memory
"""

import copy
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Optional, Protocol, runtime_checkable

from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import DevConnectorError, DuplicateKeyError, FatalStorageError

Document = dict[str, Any]

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"

# Unique columns per collection, mirroring migrations/
UNIQUE_KEYS: dict[str, tuple[str, ...]] = {
    "users": ("email",),
    "profiles": ("user_id",),
}


def _storage_error(operation: str, collection: str, error: Exception) -> DevConnectorError:
    if isinstance(error, APIError) and error.code == UNIQUE_VIOLATION:
        return DuplicateKeyError(collection, error.message or str(error))
    return FatalStorageError(operation, collection, str(error))


@runtime_checkable
class IDocumentStore(Protocol):
    """
    Interface for document storage.

    Every method matches documents by exact equality on all keys in
    ``match``. Implementations must give read-after-write consistency on a
    single document and make ``upsert`` atomic for its key.
    """

    def find_one(self, collection: str, match: Document) -> Optional[Document]:
        ...

    def find(self, collection: str, match: Optional[Document] = None) -> list[Document]:
        ...

    def insert(self, collection: str, document: Document) -> Document:
        """
        Insert a document, returning it with generated ``id`` and ``created_at``.

        Raises:
            DuplicateKeyError: If a unique column already holds the value
        """
        ...

    def update(self, collection: str, match: Document, values: Document) -> Optional[Document]:
        """Set ``values`` on the first matching document, None if nothing matched."""
        ...

    def upsert(self, collection: str, key: Document, values: Document) -> Document:
        """
        Atomically update the document identified by ``key`` or create it.

        Only the fields in ``values`` are written on update; other fields
        keep their stored value.
        """
        ...

    def delete(self, collection: str, match: Document) -> int:
        """Delete all matching documents, returning how many were removed."""
        ...


class SupabaseDocumentStore:
    """
    Document store backed by Supabase tables.

    Upserts use PostgREST's ``on_conflict`` so they map to a single
    ``INSERT ... ON CONFLICT DO UPDATE`` statement; the key columns must
    carry a unique constraint (see migrations/).
    """

    def __init__(self, db: Client) -> None:
        self._db = db

    def find_one(self, collection: str, match: Document) -> Optional[Document]:
        try:
            query = self._db.table(collection).select("*")
            for field, value in match.items():
                query = query.eq(field, value)
            result = query.limit(1).execute()
        except Exception as e:
            raise _storage_error("find_one", collection, e)
        return result.data[0] if result.data else None

    def find(self, collection: str, match: Optional[Document] = None) -> list[Document]:
        try:
            query = self._db.table(collection).select("*")
            for field, value in (match or {}).items():
                query = query.eq(field, value)
            result = query.execute()
        except Exception as e:
            raise _storage_error("find", collection, e)
        return list(result.data)

    def insert(self, collection: str, document: Document) -> Document:
        try:
            result = self._db.table(collection).insert(document).execute()
        except Exception as e:
            raise _storage_error("insert", collection, e)
        return result.data[0]

    def update(self, collection: str, match: Document, values: Document) -> Optional[Document]:
        try:
            query = self._db.table(collection).update(values)
            for field, value in match.items():
                query = query.eq(field, value)
            result = query.execute()
        except Exception as e:
            raise _storage_error("update", collection, e)
        return result.data[0] if result.data else None

    def upsert(self, collection: str, key: Document, values: Document) -> Document:
        try:
            result = (
                self._db.table(collection)
                .upsert({**values, **key}, on_conflict=",".join(key))
                .execute()
            )
        except Exception as e:
            raise _storage_error("upsert", collection, e)
        return result.data[0]

    def delete(self, collection: str, match: Document) -> int:
        try:
            query = self._db.table(collection).delete()
            for field, value in match.items():
                query = query.eq(field, value)
            result = query.execute()
        except Exception as e:
            raise _storage_error("delete", collection, e)
        return len(result.data or [])


class InMemoryDocumentStore:
    """
    Process-local document store.

    Documents are deep-copied on the way in and out so callers can never
    mutate stored state behind the store's back. Writes that would give two
    documents the same value in a unique column raise DuplicateKeyError,
    like the Postgres constraints do.
    """

    def __init__(self, unique_keys: Optional[dict[str, tuple[str, ...]]] = None) -> None:
        self._collections: dict[str, dict[str, Document]] = {}
        self._unique_keys = UNIQUE_KEYS if unique_keys is None else unique_keys
        self._lock = threading.Lock()

    def _table(self, collection: str) -> dict[str, Document]:
        return self._collections.setdefault(collection, {})

    @staticmethod
    def _matches(document: Document, match: Document) -> bool:
        return all(document.get(field) == value for field, value in match.items())

    def _first(self, collection: str, match: Document) -> Optional[Document]:
        for document in self._table(collection).values():
            if self._matches(document, match):
                return document
        return None

    def _check_unique(self, collection: str, candidate: Document) -> None:
        for field in self._unique_keys.get(collection, ()):
            value = candidate.get(field)
            if value is None:
                continue
            for document in self._table(collection).values():
                if document["id"] != candidate["id"] and document.get(field) == value:
                    raise DuplicateKeyError(collection, f"{field}={value!r} already exists")

    def _new_document(self, document: Document) -> Document:
        stored = copy.deepcopy(document)
        stored.setdefault("id", uuid.uuid4().hex)
        stored.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        return stored

    def find_one(self, collection: str, match: Document) -> Optional[Document]:
        with self._lock:
            return copy.deepcopy(self._first(collection, match))

    def find(self, collection: str, match: Optional[Document] = None) -> list[Document]:
        with self._lock:
            return [
                copy.deepcopy(document)
                for document in self._table(collection).values()
                if self._matches(document, match or {})
            ]

    def insert(self, collection: str, document: Document) -> Document:
        with self._lock:
            stored = self._new_document(document)
            self._check_unique(collection, stored)
            self._table(collection)[stored["id"]] = stored
            return copy.deepcopy(stored)

    def update(self, collection: str, match: Document, values: Document) -> Optional[Document]:
        with self._lock:
            document = self._first(collection, match)
            if document is None:
                return None
            self._check_unique(collection, {**document, **values})
            document.update(copy.deepcopy(values))
            return copy.deepcopy(document)

    def upsert(self, collection: str, key: Document, values: Document) -> Document:
        with self._lock:
            document = self._first(collection, key)
            if document is None:
                document = self._new_document({**values, **key})
                self._check_unique(collection, document)
                self._table(collection)[document["id"]] = document
            else:
                self._check_unique(collection, {**document, **values})
                document.update(copy.deepcopy(values))
            return copy.deepcopy(document)

    def delete(self, collection: str, match: Document) -> int:
        with self._lock:
            table = self._table(collection)
            doomed = [doc_id for doc_id, doc in table.items() if self._matches(doc, match)]
            for doc_id in doomed:
                del table[doc_id]
            return len(doomed)
