from events.stores.interfaces import (
    EVENTS_COLLECTION,
    REGISTRATIONS_COLLECTION,
    BlobStore,
    DocumentStore,
    Record,
)
from events.stores.memory import InMemoryDocumentStore

__all__ = [
    "BlobStore",
    "DocumentStore",
    "Record",
    "EVENTS_COLLECTION",
    "REGISTRATIONS_COLLECTION",
    "InMemoryDocumentStore",
]
