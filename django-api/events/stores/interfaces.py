"""Store interfaces (repository pattern) for the remote backend.

Stores must be swappable. They move plain records (camelCase documents);
events/stores/records.py converts them to domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable
from typing import Any

import structlog

from common.subscriptions import Subscription, spawn

logger = structlog.get_logger(__name__)

Record = dict[str, Any]

EVENTS_COLLECTION = "events"
REGISTRATIONS_COLLECTION = "registrations"


class DocumentStore(ABC):
    """Interface for the remote document store."""

    @abstractmethod
    def snapshots(self, collection: str) -> AsyncIterator[list[Record]]:
        """Yield the full collection now and again after every change.

        Each record carries its document id under ``id`` unless the stored
        data has its own. The stream ends only when the consumer stops.
        """
        ...

    @abstractmethod
    async def list_documents(self, collection: str) -> list[Record]:
        """Return the collection in arrival order."""
        ...

    @abstractmethod
    async def write_document(
        self, collection: str, doc_id: str, record: Record
    ) -> None:
        """Create or replace a document.

        Raises:
            WriteError: If the store rejects the write.
        """
        ...

    @abstractmethod
    async def add_document(self, collection: str, record: Record) -> str:
        """Create a document under a generated id and return the id.

        Raises:
            WriteError: If the store rejects the write.
        """
        ...

    def subscribe_collection(
        self, collection: str, on_snapshot: Callable[[list[Record]], None]
    ) -> Subscription:
        """Feed every snapshot of ``collection`` to ``on_snapshot``.

        Must be called from a running event loop. Cancel the returned
        handle on teardown.
        """

        async def consume() -> None:
            try:
                async for records in self.snapshots(collection):
                    on_snapshot(records)
            except Exception:
                logger.exception("document_store.stream_failed", collection=collection)
                raise

        return spawn(consume(), name=f"snapshots:{collection}")


class BlobStore(ABC):
    """Interface for the remote file store."""

    @abstractmethod
    async def upload(self, path: str, data: bytes) -> str:
        """Store ``data`` and return the path it was saved under."""
        ...

    @abstractmethod
    async def get_url(self, path: str) -> str:
        """Return a public URL for a stored path."""
        ...
