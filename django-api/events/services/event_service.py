"""Event service - organizer and participant operations.

Services:
- Depend only on interfaces (stores) and the merge cache
- Raise domain errors; handlers turn them into responses
- Leave ownership checks to the caller (see accounts/services/access_gate.py)
"""

import time
from dataclasses import dataclass, replace

import structlog
from django.utils import timezone
from django.utils.text import get_valid_filename

from accounts.domain import Identity, NoActiveSessionError
from events.domain import Event, EventCategory, EventNotFoundError, Registration
from events.services.merge_cache import EventMergeCache
from events.stores.interfaces import (
    EVENTS_COLLECTION,
    REGISTRATIONS_COLLECTION,
    BlobStore,
    DocumentStore,
)
from events.stores.records import event_to_record, registration_to_record

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RegistrationForm:
    """Fields a participant fills in to register."""

    name: str
    email: str
    phone: str
    college_or_company: str
    year_of_study: str
    team_members: str | None = None


class EventService:
    """Service for managing events and registrations."""

    def __init__(
        self, store: DocumentStore, cache: EventMergeCache, blob_store: BlobStore
    ) -> None:
        self._store = store
        self._cache = cache
        self._blobs = blob_store

    def new_event(self, identity: Identity) -> Event:
        """Return a blank draft owned by ``identity``."""
        return Event(
            id=f"ev-{int(time.time() * 1000)}",
            title="",
            category=EventCategory.TECH_EVENTS,
            date="",
            time="",
            location="",
            organizer_name=identity.display_name or "You",
            organizer_contact=identity.email or "you@example.com",
            description="",
            team_size="Individual",
            created_by_uid=identity.uid,
        )

    async def save_event(self, event: Event) -> Event:
        """Show the event locally, then write it to the remote store.

        The local copy is not rolled back if the write fails.

        Raises:
            WriteError: If the remote store rejects the write.
        """
        self._cache.upsert_local(event)
        await self._store.write_document(
            EVENTS_COLLECTION, event.id, event_to_record(event)
        )
        logger.info("event.saved", event_id=event.id, owner=event.created_by_uid)
        return event

    def delete_event(self, event_id: str) -> None:
        """Remove the event from the local view only.

        The remote document stays, so the event reappears on the next
        snapshot. Deleting remotely is not implemented yet.
        """
        if self._cache.get(event_id) is None:
            raise EventNotFoundError(event_id)
        self._cache.remove_local(event_id)

    async def sync_events(self) -> int:
        """Write every event of the merged view to the remote store.

        Raises:
            WriteError: On the first rejected write; earlier writes stay.
        """
        events = self._cache.events
        for event in events:
            await self._store.write_document(
                EVENTS_COLLECTION, event.id, event_to_record(event)
            )
        logger.info("event.synced", count=len(events))
        return len(events)

    async def register(
        self, event_id: str, identity: Identity | None, form: RegistrationForm
    ) -> Registration:
        """Record a participant's registration for an event.

        Raises:
            EventNotFoundError: If the event is not in the merged view.
            NoActiveSessionError: If nobody is signed in.
            WriteError: If the remote store rejects the write.
        """
        event = self._cache.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        if identity is None:
            raise NoActiveSessionError("register")

        registration = Registration(
            id="",
            event_id=event.id,
            name=form.name,
            email=form.email,
            phone=form.phone,
            college_or_company=form.college_or_company,
            year_of_study=form.year_of_study,
            team_members=form.team_members or None,
            user_id=identity.uid,
            registered_at=timezone.now().isoformat(),
        )
        doc_id = await self._store.add_document(
            REGISTRATIONS_COLLECTION, registration_to_record(registration)
        )
        logger.info(
            "registration.created",
            event_id=event.id,
            registration_id=doc_id,
            uid=identity.uid,
        )
        return replace(registration, id=doc_id)

    async def upload_media(self, event_id: str, filename: str, data: bytes) -> str:
        """Store an image or brochure for an event and return its URL."""
        if self._cache.get(event_id) is None:
            raise EventNotFoundError(event_id)
        path = f"events/{event_id}/{get_valid_filename(filename)}"
        saved = await self._blobs.upload(path, data)
        logger.info(
            "event.media_uploaded", event_id=event_id, path=saved, size=len(data)
        )
        return await self._blobs.get_url(saved)
