"""Application context, built once at process start.

Views receive it through ``as_view(app_context=...)`` (see urls.py); the
services never look it up themselves.
"""

from collections.abc import Callable
from dataclasses import dataclass

from django.conf import settings
from django.http import HttpRequest
from django.utils.module_loading import import_string

from accounts.services import RoleStore, SessionManager
from accounts.stores import AuthProvider, CacheKeyValueStore
from accounts.stores.django_auth import DjangoAuthProvider
from events.domain import Event
from events.seed import SEED_EVENTS
from events.services import EventMergeCache, EventService, RegistrationAggregator
from events.stores import BlobStore, DocumentStore, InMemoryDocumentStore
from events.stores.blob import DjangoStorageBlobStore

AuthProviderFactory = Callable[[HttpRequest], AuthProvider]


@dataclass(frozen=True)
class AppContext:
    document_store: DocumentStore
    blob_store: BlobStore
    role_store: RoleStore
    auth_provider_factory: AuthProviderFactory
    seed_events: tuple[Event, ...] = SEED_EVENTS

    def session_manager(self, request: HttpRequest) -> SessionManager:
        return SessionManager(self.auth_provider_factory(request), self.role_store)

    def event_cache(self) -> EventMergeCache:
        return EventMergeCache(self.document_store, self.seed_events)

    def registration_aggregator(
        self, cache: EventMergeCache, session: SessionManager
    ) -> RegistrationAggregator:
        return RegistrationAggregator(self.document_store, cache, session)

    def event_service(self, cache: EventMergeCache) -> EventService:
        return EventService(self.document_store, cache, self.blob_store)


def build_document_store(backend: str) -> DocumentStore:
    if backend == "memory":
        return InMemoryDocumentStore()
    if backend == "django":
        from events.stores.django_store import DjangoDocumentStore

        return DjangoDocumentStore()
    raise ValueError(f"Unknown DOCUMENT_STORE_BACKEND: {backend!r}")


def build_context() -> AppContext:
    verifier = None
    if settings.FEDERATED_AUTH_VERIFIER:
        verifier = import_string(settings.FEDERATED_AUTH_VERIFIER)

    def auth_provider_factory(request: HttpRequest) -> AuthProvider:
        return DjangoAuthProvider(request, federated_verifier=verifier)

    return AppContext(
        document_store=build_document_store(settings.DOCUMENT_STORE_BACKEND),
        blob_store=DjangoStorageBlobStore(),
        role_store=RoleStore(CacheKeyValueStore(settings.ROLE_STORE_CACHE)),
        auth_provider_factory=auth_provider_factory,
    )
