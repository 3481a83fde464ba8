from events.domain.errors import DomainError, ErrorCode, EventNotFoundError, WriteError
from events.domain.models import Event, OwnedRegistration, Registration
from events.domain.value_objects import EventCategory

__all__ = [
    "Event",
    "Registration",
    "OwnedRegistration",
    "EventCategory",
    "DomainError",
    "ErrorCode",
    "EventNotFoundError",
    "WriteError",
]
