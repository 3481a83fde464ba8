"""Conversion between remote documents and domain models.

Documents use camelCase keys. Registrations written by older clients
stored ``college`` and ``year`` instead of ``collegeOrCompany`` and
``yearOfStudy``; both are read.
"""

from collections.abc import Iterable

import structlog

from events.domain import Event, EventCategory, Registration
from events.stores.interfaces import Record

logger = structlog.get_logger(__name__)

_EVENT_REQUIRED = (
    ("title", "title"),
    ("date", "date"),
    ("time", "time"),
    ("location", "location"),
    ("organizer_name", "organizerName"),
    ("organizer_contact", "organizerContact"),
    ("description", "description"),
    ("created_by_uid", "createdByUid"),
)

_EVENT_OPTIONAL = (
    ("image_url", "imageUrl"),
    ("poster_url", "posterUrl"),
    ("brochure_url", "brochureUrl"),
    ("about_event", "aboutEvent"),
    ("rules", "rules"),
    ("prizes", "prizes"),
    ("registration_fee", "registrationFee"),
    ("team_size", "teamSize"),
)


def _required(record: Record, key: str) -> str:
    """Return a required value as text. Null counts as missing."""
    value = record[key]
    if value is None:
        raise KeyError(key)
    return str(value)


def event_from_record(record: Record) -> Event:
    """Build an Event from a document.

    Raises:
        KeyError: If a required key is missing or null.
        ValueError: If the category is not a known label.
    """
    fields = {attr: _required(record, key) for attr, key in _EVENT_REQUIRED}
    fields.update(
        {
            attr: record[key]
            for attr, key in _EVENT_OPTIONAL
            if record.get(key) is not None
        }
    )
    return Event(
        id=_required(record, "id"),
        category=EventCategory.from_label(_required(record, "category")),
        **fields,
    )


def event_to_record(event: Event) -> Record:
    record: Record = {"id": event.id, "category": event.category.value}
    record.update({key: getattr(event, attr) for attr, key in _EVENT_REQUIRED})
    record.update(
        {
            key: getattr(event, attr)
            for attr, key in _EVENT_OPTIONAL
            if getattr(event, attr) is not None
        }
    )
    return record


def registration_from_record(record: Record) -> Registration:
    """Build a Registration from a document.

    Raises:
        KeyError: If a required key is missing or null.
    """
    return Registration(
        id=_required(record, "id"),
        event_id=_required(record, "eventId"),
        name=record.get("name", ""),
        email=record.get("email", ""),
        phone=record.get("phone", ""),
        college_or_company=record.get("collegeOrCompany", record.get("college", "")),
        year_of_study=record.get("yearOfStudy", record.get("year", "")),
        team_members=record.get("teamMembers") or None,
        user_id=record.get("userId"),
        registered_at=record.get("registeredAt"),
    )


def registration_to_record(registration: Registration) -> Record:
    record: Record = {
        "eventId": registration.event_id,
        "name": registration.name,
        "email": registration.email,
        "phone": registration.phone,
        "collegeOrCompany": registration.college_or_company,
        "yearOfStudy": registration.year_of_study,
    }
    if registration.team_members:
        record["teamMembers"] = registration.team_members
    if registration.user_id is not None:
        record["userId"] = registration.user_id
    if registration.registered_at is not None:
        record["registeredAt"] = registration.registered_at
    return record


def parse_events(records: Iterable[Record]) -> list[Event]:
    """Map documents to events, skipping the ones that do not fit."""
    events = []
    for record in records:
        try:
            events.append(event_from_record(record))
        except (KeyError, ValueError) as exc:
            logger.warning(
                "records.event_skipped", doc_id=record.get("id"), error=repr(exc)
            )
    return events


def parse_registrations(records: Iterable[Record]) -> list[Registration]:
    registrations = []
    for record in records:
        try:
            registrations.append(registration_from_record(record))
        except KeyError as exc:
            logger.warning(
                "records.registration_skipped",
                doc_id=record.get("id"),
                error=repr(exc),
            )
    return registrations
