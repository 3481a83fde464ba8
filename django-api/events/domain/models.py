"""Domain models representing events and registrations.

These are pure domain objects. The remote document shape (camelCase keys)
is handled in events/stores/records.py; the ORM model for stored documents
is in events/models.py.
"""

from dataclasses import dataclass

from events.domain.value_objects import EventCategory


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: str
    title: str
    category: EventCategory
    date: str
    time: str
    location: str
    organizer_name: str
    organizer_contact: str
    description: str
    created_by_uid: str
    image_url: str | None = None
    poster_url: str | None = None
    brochure_url: str | None = None
    about_event: str | None = None
    rules: str | None = None
    prizes: str | None = None
    registration_fee: str | None = None
    team_size: str | None = None

    def is_owned_by(self, uid: str | None) -> bool:
        return uid is not None and self.created_by_uid == uid


@dataclass(frozen=True)
class Registration:
    """Domain representation of a participant's registration."""

    id: str
    event_id: str
    name: str
    email: str
    phone: str
    college_or_company: str
    year_of_study: str
    team_members: str | None = None
    user_id: str | None = None
    registered_at: str | None = None


@dataclass(frozen=True)
class OwnedRegistration:
    """A registration joined to the event it targets."""

    registration: Registration
    event: Event
