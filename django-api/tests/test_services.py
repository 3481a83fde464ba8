"""Tests for EventService."""

import pytest
from django.core.files.storage import FileSystemStorage

from accounts.domain import Identity, NoActiveSessionError
from events.domain import EventCategory, EventNotFoundError, WriteError
from events.seed import SEED_EVENTS
from events.services import EventService, RegistrationForm
from events.stores import (
    EVENTS_COLLECTION,
    REGISTRATIONS_COLLECTION,
    InMemoryDocumentStore,
)
from events.stores.blob import DjangoStorageBlobStore

from tests.factories import make_event

ORGANIZER = Identity(
    uid="organizer-demo-1", email="dev@example.com", display_name="Dev Club"
)
PARTICIPANT = Identity(uid="p-1", email="ana@example.com")

FORM = RegistrationForm(
    name="Ana",
    email="ana@example.com",
    phone="555-0100",
    college_or_company="State U",
    year_of_study="3",
)


class RejectingDocumentStore(InMemoryDocumentStore):
    async def write_document(self, collection, doc_id, record):
        raise WriteError(collection, "permission denied")

    async def add_document(self, collection, record):
        raise WriteError(collection, "permission denied")


@pytest.fixture
def blob_store(tmp_path) -> DjangoStorageBlobStore:
    storage = FileSystemStorage(location=tmp_path, base_url="/media/")
    return DjangoStorageBlobStore(storage)


@pytest.fixture
def service(document_store, event_cache, blob_store) -> EventService:
    return EventService(document_store, event_cache, blob_store)


class TestNewEvent:
    def test_draft_is_owned_by_identity(self, service):
        draft = service.new_event(ORGANIZER)
        assert draft.id.startswith("ev-")
        assert draft.created_by_uid == ORGANIZER.uid
        assert draft.organizer_name == "Dev Club"
        assert draft.category is EventCategory.TECH_EVENTS
        assert draft.team_size == "Individual"

    def test_draft_falls_back_to_placeholders(self, service):
        """Identities without name or email get placeholder contact details."""
        draft = service.new_event(Identity(uid="u-2"))
        assert draft.organizer_name == "You"
        assert draft.organizer_contact == "you@example.com"


class TestSaveEvent:
    @pytest.mark.asyncio
    async def test_save_writes_and_shows_locally(
        self, document_store, event_cache, service
    ):
        async with event_cache:
            await event_cache.ready()
            await service.save_event(make_event(id="ev9"))
            assert event_cache.get("ev9") is not None
        stored = await document_store.list_documents(EVENTS_COLLECTION)
        assert stored[0]["id"] == "ev9"
        assert stored[0]["createdByUid"] == "u-9"

    @pytest.mark.asyncio
    async def test_failed_write_keeps_local_copy(self, event_cache, blob_store):
        """The optimistic local copy stays when the remote write fails."""
        service = EventService(RejectingDocumentStore(), event_cache, blob_store)
        with pytest.raises(WriteError) as exc_info:
            await service.save_event(make_event(id="ev9"))
        assert exc_info.value.message == "Failed to save. Please try again."
        assert event_cache.get("ev9") is not None


class TestDeleteEvent:
    def test_delete_is_local_only(self, event_cache, service):
        service.delete_event("ev1")
        assert event_cache.get("ev1") is None

    def test_delete_unknown_event(self, service):
        with pytest.raises(EventNotFoundError):
            service.delete_event("ev404")


class TestSyncEvents:
    @pytest.mark.asyncio
    async def test_sync_writes_every_merged_event(
        self, document_store, event_cache, service
    ):
        async with event_cache:
            await event_cache.ready()
            assert await service.sync_events() == len(SEED_EVENTS)
        stored = await document_store.list_documents(EVENTS_COLLECTION)
        assert [record["id"] for record in stored] == [
            event.id for event in SEED_EVENTS
        ]


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_records_participant(
        self, document_store, event_cache, service
    ):
        async with event_cache:
            await event_cache.ready()
            registration = await service.register("ev2", PARTICIPANT, FORM)

        assert registration.id
        assert registration.user_id == "p-1"
        assert registration.registered_at is not None
        stored = await document_store.list_documents(REGISTRATIONS_COLLECTION)
        assert stored == [
            {
                "id": registration.id,
                "eventId": "ev2",
                "name": "Ana",
                "email": "ana@example.com",
                "phone": "555-0100",
                "collegeOrCompany": "State U",
                "yearOfStudy": "3",
                "userId": "p-1",
                "registeredAt": registration.registered_at,
            }
        ]

    @pytest.mark.asyncio
    async def test_unknown_event_is_checked_first(self, service):
        with pytest.raises(EventNotFoundError):
            await service.register("ev404", None, FORM)

    @pytest.mark.asyncio
    async def test_register_requires_identity(self, service):
        with pytest.raises(NoActiveSessionError):
            await service.register("ev1", None, FORM)


class TestUploadMedia:
    @pytest.mark.asyncio
    async def test_upload_returns_public_url(self, service, tmp_path):
        url = await service.upload_media("ev1", "poster final.png", b"\x89PNG")
        assert url == "/media/events/ev1/poster_final.png"
        saved = tmp_path / "events" / "ev1" / "poster_final.png"
        assert saved.read_bytes() == b"\x89PNG"

    @pytest.mark.asyncio
    async def test_upload_for_unknown_event(self, service):
        with pytest.raises(EventNotFoundError):
            await service.upload_media("ev404", "poster.png", b"")
