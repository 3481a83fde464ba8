"""In-memory document store for tests and single-process runs."""

import asyncio
import uuid
from collections import defaultdict
from collections.abc import AsyncIterator

from common.subscriptions import ListenerSet
from events.stores.interfaces import DocumentStore, Record


class InMemoryDocumentStore(DocumentStore):
    def __init__(self) -> None:
        self._collections: dict[str, dict[str, Record]] = defaultdict(dict)
        self._watchers: dict[str, ListenerSet[None]] = defaultdict(ListenerSet)

    async def snapshots(self, collection: str) -> AsyncIterator[list[Record]]:
        changes: asyncio.Queue[None] = asyncio.Queue()
        unsubscribe = self._watchers[collection].add(changes.put_nowait)
        try:
            yield self._snapshot(collection)
            while True:
                await changes.get()
                yield self._snapshot(collection)
        finally:
            unsubscribe()

    async def list_documents(self, collection: str) -> list[Record]:
        return self._snapshot(collection)

    async def write_document(
        self, collection: str, doc_id: str, record: Record
    ) -> None:
        self._collections[collection][doc_id] = dict(record)
        self._watchers[collection].notify(None)

    async def add_document(self, collection: str, record: Record) -> str:
        doc_id = uuid.uuid4().hex
        await self.write_document(collection, doc_id, record)
        return doc_id

    def watcher_count(self, collection: str) -> int:
        return len(self._watchers[collection])

    def _snapshot(self, collection: str) -> list[Record]:
        documents = self._collections[collection]
        return [{"id": doc_id, **data} for doc_id, data in documents.items()]
