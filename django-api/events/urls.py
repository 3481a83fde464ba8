from django.urls import path

from events.handlers import (
    EventListView,
    EventMediaView,
    EventSyncView,
    OrganizerEventsView,
    OrganizerRegistrationsView,
    RegistrationCreateView,
)


def event_urlpatterns(app_context):
    return [
        path(
            "events",
            EventListView.as_view(app_context=app_context),
            name="event-list",
        ),
        path(
            "events/<str:event_id>/registrations",
            RegistrationCreateView.as_view(app_context=app_context),
            name="registration-create",
        ),
        path(
            "organizer/events",
            OrganizerEventsView.as_view(app_context=app_context),
            name="organizer-events",
        ),
        path(
            "organizer/events/sync",
            EventSyncView.as_view(app_context=app_context),
            name="organizer-events-sync",
        ),
        path(
            "organizer/events/<str:event_id>/media",
            EventMediaView.as_view(app_context=app_context),
            name="organizer-event-media",
        ),
        path(
            "organizer/registrations",
            OrganizerRegistrationsView.as_view(app_context=app_context),
            name="organizer-registrations",
        ),
    ]
