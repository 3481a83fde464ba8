"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from accounts.services import RoleStore, SessionManager
from accounts.stores import InMemoryAuthProvider, InMemoryKeyValueStore
from events.seed import SEED_EVENTS
from events.services import EventMergeCache
from events.stores import InMemoryDocumentStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def isolated_caches(settings, tmp_path):
    """Keep the role cache and media files out of the working tree."""
    locmem = "django.core.cache.backends.locmem.LocMemCache"
    settings.CACHES = {
        "default": {"BACKEND": locmem, "LOCATION": "default"},
        "roles": {"BACKEND": locmem, "LOCATION": "roles"},
    }
    settings.MEDIA_ROOT = str(tmp_path / "media")
    from django.core.cache import caches

    caches["roles"].clear()
    yield
    caches["roles"].clear()


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def role_store(kv_store) -> RoleStore:
    return RoleStore(kv_store)


@pytest.fixture
def auth_provider() -> InMemoryAuthProvider:
    return InMemoryAuthProvider()


@pytest.fixture
def session(auth_provider, role_store) -> SessionManager:
    return SessionManager(auth_provider, role_store)


@pytest.fixture
def document_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def event_cache(document_store) -> EventMergeCache:
    return EventMergeCache(document_store, SEED_EVENTS)
