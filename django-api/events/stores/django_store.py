"""Django ORM implementation of the DocumentStore.

Documents live in one table keyed by (collection, doc_id). Saves and
deletes publish a change notice through ``document_changes`` (wired in
events/signals.py); every open snapshot stream then re-reads its
collection.
"""

import asyncio
import threading
import uuid
from collections.abc import AsyncIterator

import structlog
from django.db import DatabaseError

from common.subscriptions import Unsubscribe
from events.domain import WriteError
from events.models import Document
from events.stores.interfaces import DocumentStore, Record

logger = structlog.get_logger(__name__)


class ChangeFeed:
    """Fans change notices out to queues owned by running event loops.

    ``publish`` may be called from any thread (signal handlers run in the
    thread that saved the row).
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._watchers: list[
            tuple[str, asyncio.AbstractEventLoop, asyncio.Queue[None]]
        ] = []

    def watch(self, collection: str) -> tuple[asyncio.Queue[None], Unsubscribe]:
        entry = (collection, asyncio.get_running_loop(), asyncio.Queue())
        with self._lock:
            self._watchers.append(entry)

        def unsubscribe() -> None:
            with self._lock:
                if entry in self._watchers:
                    self._watchers.remove(entry)

        return entry[2], unsubscribe

    def publish(self, collection: str) -> None:
        with self._lock:
            targets = [
                (loop, queue)
                for name, loop, queue in self._watchers
                if name == collection
            ]
        for loop, queue in targets:
            try:
                loop.call_soon_threadsafe(queue.put_nowait, None)
            except RuntimeError:
                logger.debug("change_feed.loop_closed", collection=collection)


document_changes = ChangeFeed()


class DjangoDocumentStore(DocumentStore):
    """Database-backed document store using Django's async ORM."""

    def __init__(self, feed: ChangeFeed = document_changes) -> None:
        self._feed = feed

    async def snapshots(self, collection: str) -> AsyncIterator[list[Record]]:
        changes, unsubscribe = self._feed.watch(collection)
        try:
            yield await self.list_documents(collection)
            while True:
                await changes.get()
                # Several saves in a burst only need one re-read.
                while not changes.empty():
                    changes.get_nowait()
                yield await self.list_documents(collection)
        finally:
            unsubscribe()

    async def list_documents(self, collection: str) -> list[Record]:
        documents = Document.objects.filter(collection=collection)
        return [document.as_record() async for document in documents]

    async def write_document(
        self, collection: str, doc_id: str, record: Record
    ) -> None:
        try:
            await Document.objects.aupdate_or_create(
                collection=collection, doc_id=doc_id, defaults={"data": record}
            )
        except DatabaseError as exc:
            logger.error(
                "document_store.write_failed",
                collection=collection,
                doc_id=doc_id,
                error=str(exc),
            )
            raise WriteError(collection, str(exc)) from exc

    async def add_document(self, collection: str, record: Record) -> str:
        doc_id = uuid.uuid4().hex
        try:
            await Document.objects.acreate(
                collection=collection, doc_id=doc_id, data=record
            )
        except DatabaseError as exc:
            logger.error(
                "document_store.write_failed",
                collection=collection,
                doc_id=doc_id,
                error=str(exc),
            )
            raise WriteError(collection, str(exc)) from exc
        return doc_id
