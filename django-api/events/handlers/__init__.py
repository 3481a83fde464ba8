from events.handlers.views import (
    EventListView,
    EventMediaView,
    EventSyncView,
    OrganizerEventsView,
    OrganizerRegistrationsView,
    RegistrationCreateView,
)

__all__ = [
    "EventListView",
    "EventMediaView",
    "EventSyncView",
    "OrganizerEventsView",
    "OrganizerRegistrationsView",
    "RegistrationCreateView",
]
