"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Open the merged event view for the duration of the request
- Call services for business logic
- Leave domain error mapping to common.exception_handlers
"""

from collections.abc import Awaitable, Callable
from dataclasses import replace
from typing import TypeVar

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.exceptions import PermissionDenied, ValidationError
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response

from accounts.domain import Role
from accounts.handlers import SessionAPIView
from events.domain import Event, EventCategory, EventNotFoundError
from events.handlers.serializers import (
    EventInputSerializer,
    EventSerializer,
    MediaUploadSerializer,
    OwnedRegistrationSerializer,
    RegistrationInputSerializer,
    RegistrationSerializer,
)
from events.services import EventMergeCache, RegistrationForm

T = TypeVar("T")

SCOPES = ("mine", "others", "all")


class EventsAPIView(SessionAPIView):
    """SessionAPIView that can run work against a ready merged event view."""

    def with_events(self, work: Callable[[EventMergeCache], Awaitable[T]]) -> T:
        async def run() -> T:
            async with self.app_context.event_cache() as cache:
                await cache.ready()
                return await work(cache)

        return async_to_sync(run)()


class EventListView(EventsAPIView):
    """Handler for GET /api/events?category=<label>"""

    def get(self, request: Request) -> Response:
        label = request.query_params.get("category")
        category = None
        if label:
            try:
                category = EventCategory.from_label(label)
            except ValueError:
                raise ValidationError(
                    {"category": f"Unknown category: {label}"}
                ) from None

        async def load(cache: EventMergeCache) -> tuple[Event, ...]:
            return cache.by_category(category) if category else cache.events

        events = self.with_events(load)
        return Response(EventSerializer(events, many=True).data)


class OrganizerEventsView(EventsAPIView):
    """Handler for GET and POST /api/organizer/events"""

    required_role = Role.ORGANIZER

    def get(self, request: Request) -> Response:
        scope = request.query_params.get("scope", "mine")
        if scope not in SCOPES:
            raise ValidationError({"scope": f"Expected one of {', '.join(SCOPES)}."})
        uid = self.session.snapshot.uid

        async def load(cache: EventMergeCache) -> tuple[Event, ...]:
            if scope == "mine":
                return cache.owned_by(uid)
            if scope == "others":
                return cache.not_owned_by(uid)
            return cache.events

        events = self.with_events(load)
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        fields = dict(serializer.validated_data)
        event_id = fields.pop("id", None)
        fields["category"] = EventCategory.from_label(fields["category"])
        identity = self.session.identity

        async def save(cache: EventMergeCache) -> tuple[Event, bool]:
            service = self.app_context.event_service(cache)
            existing = cache.get(event_id) if event_id else None
            if existing is None:
                draft = service.new_event(identity)
                if event_id:
                    draft = replace(draft, id=event_id)
                return await service.save_event(replace(draft, **fields)), True
            if not existing.is_owned_by(identity.uid):
                raise PermissionDenied(
                    "Only the organizer who created this event can edit it."
                )
            return await service.save_event(replace(existing, **fields)), False

        event, created = self.with_events(save)
        return Response(
            EventSerializer(event).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class EventSyncView(EventsAPIView):
    """Handler for POST /api/organizer/events/sync"""

    required_role = Role.ORGANIZER

    def post(self, request: Request) -> Response:
        async def sync(cache: EventMergeCache) -> int:
            return await self.app_context.event_service(cache).sync_events()

        return Response({"synced": self.with_events(sync)})


class EventMediaView(EventsAPIView):
    """Handler for POST /api/organizer/events/<event_id>/media"""

    required_role = Role.ORGANIZER
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request: Request, event_id: str) -> Response:
        serializer = MediaUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        upload = serializer.validated_data["file"]
        data = upload.read()
        uid = self.session.snapshot.uid

        async def store(cache: EventMergeCache) -> str:
            event = cache.get(event_id)
            if event is None:
                raise EventNotFoundError(event_id)
            if not event.is_owned_by(uid):
                raise PermissionDenied(
                    "Only the organizer who created this event can upload media."
                )
            service = self.app_context.event_service(cache)
            return await service.upload_media(event_id, upload.name, data)

        return Response(
            {"url": self.with_events(store)}, status=status.HTTP_201_CREATED
        )


class OrganizerRegistrationsView(EventsAPIView):
    """Handler for GET /api/organizer/registrations"""

    required_role = Role.ORGANIZER

    def get(self, request: Request) -> Response:
        async def load(cache: EventMergeCache):
            aggregator = self.app_context.registration_aggregator(cache, self.session)
            async with aggregator:
                await aggregator.ready()
                return aggregator.registrations

        registrations = self.with_events(load)
        return Response(
            {
                "count": len(registrations),
                "registrations": OwnedRegistrationSerializer(
                    registrations, many=True
                ).data,
            }
        )


class RegistrationCreateView(EventsAPIView):
    """Handler for POST /api/events/<event_id>/registrations"""

    required_role = Role.PARTICIPANT

    def post(self, request: Request, event_id: str) -> Response:
        serializer = RegistrationInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        form = RegistrationForm(**serializer.validated_data)
        identity = self.session.identity

        async def register(cache: EventMergeCache):
            service = self.app_context.event_service(cache)
            return await service.register(event_id, identity, form)

        registration = self.with_events(register)
        return Response(
            RegistrationSerializer(registration).data, status=status.HTTP_201_CREATED
        )
