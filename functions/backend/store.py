"""
Document store abstraction for Cloud Firestore and in-memory testing.

Handlers only need single-document writes, atomic increments, appends and
server timestamps, so that is all the interface exposes.
"""

from __future__ import annotations

import copy
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Protocol

from google.api_core import exceptions
from google.cloud.firestore_v1 import SERVER_TIMESTAMP, Increment

from backend.config import Settings


class StoreError(Exception):
    """Base class for document store failures."""


class DocumentNotFoundError(StoreError):
    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"Document {collection}/{doc_id} does not exist")


class DocumentExistsError(StoreError):
    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"Document {collection}/{doc_id} already exists")


class DocumentStore(Protocol):
    """Defines the operations the handlers need from the document store."""

    def update(self, collection: str, doc_id: str, fields: dict) -> None:
        ...

    def increment(
        self,
        collection: str,
        doc_id: str,
        field: str,
        amount: int = 1,
        extra_fields: Optional[dict] = None,
    ) -> None:
        ...

    def append(
        self, collection: str, data: dict, doc_id: Optional[str] = None
    ) -> str:
        ...

    def now(self) -> Any:
        ...


class FirestoreDocumentStore:
    """DocumentStore backed by a `google.cloud.firestore` client."""

    def __init__(self, client):
        self.client = client

    def update(self, collection: str, doc_id: str, fields: dict) -> None:
        try:
            self.client.collection(collection).document(doc_id).update(fields)
        except exceptions.NotFound as e:
            raise DocumentNotFoundError(collection, doc_id) from e

    def increment(
        self,
        collection: str,
        doc_id: str,
        field: str,
        amount: int = 1,
        extra_fields: Optional[dict] = None,
    ) -> None:
        # A single update keeps the increment and the extra fields atomic.
        fields = {field: Increment(amount)}
        fields.update(extra_fields or {})
        self.update(collection, doc_id, fields)

    def append(
        self, collection: str, data: dict, doc_id: Optional[str] = None
    ) -> str:
        collection_ref = self.client.collection(collection)
        if doc_id is None:
            _, doc_ref = collection_ref.add(data)
            return doc_ref.id

        try:
            collection_ref.document(doc_id).create(data)
        except exceptions.AlreadyExists as e:
            raise DocumentExistsError(collection, doc_id) from e
        return doc_id

    def now(self) -> Any:
        return SERVER_TIMESTAMP


class InMemoryDocumentStore:
    """Simple in-memory document store for development and tests."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.collections: Dict[str, Dict[str, dict]] = {}
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._lock = threading.Lock()

    def seed(self, collection: str, doc_id: str, data: dict) -> None:
        with self._lock:
            self.collections.setdefault(collection, {})[doc_id] = copy.deepcopy(
                data
            )

    def get(self, collection: str, doc_id: str) -> Optional[dict]:
        with self._lock:
            doc = self.collections.get(collection, {}).get(doc_id)
            return copy.deepcopy(doc) if doc is not None else None

    def documents(self, collection: str) -> Dict[str, dict]:
        with self._lock:
            return copy.deepcopy(self.collections.get(collection, {}))

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        with self._lock:
            self.collections.clear()

    def _existing(self, collection: str, doc_id: str) -> dict:
        doc = self.collections.get(collection, {}).get(doc_id)
        if doc is None:
            raise DocumentNotFoundError(collection, doc_id)
        return doc

    def update(self, collection: str, doc_id: str, fields: dict) -> None:
        with self._lock:
            self._existing(collection, doc_id).update(copy.deepcopy(fields))

    def increment(
        self,
        collection: str,
        doc_id: str,
        field: str,
        amount: int = 1,
        extra_fields: Optional[dict] = None,
    ) -> None:
        with self._lock:
            doc = self._existing(collection, doc_id)
            doc[field] = doc.get(field, 0) + amount
            doc.update(copy.deepcopy(extra_fields or {}))

    def append(
        self, collection: str, data: dict, doc_id: Optional[str] = None
    ) -> str:
        with self._lock:
            docs = self.collections.setdefault(collection, {})
            if doc_id is None:
                doc_id = uuid.uuid4().hex
            elif doc_id in docs:
                raise DocumentExistsError(collection, doc_id)
            docs[doc_id] = copy.deepcopy(data)
            return doc_id

    def now(self) -> datetime:
        return self._clock()


def create_document_store(
    settings: Settings, client_factory: Callable[[], Any]
) -> DocumentStore:
    """
    Build the store for this process. `client_factory` is only called when a
    real Firestore client is needed.
    """
    if settings.in_memory:
        return InMemoryDocumentStore()
    return FirestoreDocumentStore(client_factory())
