from events.services.event_service import EventService, RegistrationForm
from events.services.merge_cache import (
    EventMergeCache,
    by_category,
    merge_events,
    not_owned_by,
    owned_by,
)
from events.services.registration_aggregator import (
    RegistrationAggregator,
    join_registrations,
)

__all__ = [
    "EventService",
    "RegistrationForm",
    "EventMergeCache",
    "RegistrationAggregator",
    "merge_events",
    "by_category",
    "owned_by",
    "not_owned_by",
    "join_registrations",
]
