"""Event merge cache - the seed catalog folded with the live events collection.

Merge rule: start from the seed in its fixed order; a remote event with a
seed id replaces that entry in place, any other remote event is appended in
arrival order. The remote copy always wins.
"""

import asyncio
from collections.abc import Callable, Iterable, Sequence

import structlog

from common.subscriptions import ListenerSet, Subscription, Unsubscribe, wait_for_first
from events.domain import Event, EventCategory
from events.stores.interfaces import EVENTS_COLLECTION, DocumentStore, Record
from events.stores.records import parse_events

logger = structlog.get_logger(__name__)


def merge_events(seed: Iterable[Event], remote: Iterable[Event]) -> tuple[Event, ...]:
    merged = list(seed)
    positions = {event.id: index for index, event in enumerate(merged)}
    for event in remote:
        index = positions.get(event.id)
        if index is None:
            positions[event.id] = len(merged)
            merged.append(event)
        else:
            merged[index] = event
    return tuple(merged)


def by_category(events: Iterable[Event], category: EventCategory) -> tuple[Event, ...]:
    return tuple(event for event in events if event.category is category)


def owned_by(events: Iterable[Event], uid: str | None) -> tuple[Event, ...]:
    return tuple(event for event in events if event.is_owned_by(uid))


def not_owned_by(events: Iterable[Event], uid: str | None) -> tuple[Event, ...]:
    return tuple(event for event in events if not event.is_owned_by(uid))


class EventMergeCache:
    """Continuously updated merged view of events.

    Usage:
        async with EventMergeCache(store, SEED_EVENTS) as cache:
            await cache.ready()
            cache.owned_by(uid)
    """

    def __init__(
        self,
        store: DocumentStore,
        seed: Sequence[Event],
        collection: str = EVENTS_COLLECTION,
    ) -> None:
        self._store = store
        self._seed = tuple(seed)
        self._collection = collection
        self._events: tuple[Event, ...] = self._seed
        self._loaded = asyncio.Event()
        self._listeners: ListenerSet[tuple[Event, ...]] = ListenerSet()
        self._subscription: Subscription | None = None

    async def __aenter__(self) -> "EventMergeCache":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    @property
    def events(self) -> tuple[Event, ...]:
        return self._events

    @property
    def loaded(self) -> bool:
        return self._loaded.is_set()

    def start(self) -> Subscription:
        """Subscribe to the remote collection. Idempotent while running."""
        if self._subscription is None or not self._subscription.active:
            self._subscription = self._store.subscribe_collection(
                self._collection, self.apply_snapshot
            )
        return self._subscription

    async def stop(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            await self._subscription.wait_closed()
            self._subscription = None

    async def ready(self) -> None:
        """Wait until the first remote snapshot has been merged.

        Raises whatever ended the snapshot stream if it stops first.
        """
        await wait_for_first(self._loaded, self._subscription)

    def add_listener(
        self, callback: Callable[[tuple[Event, ...]], None]
    ) -> Unsubscribe:
        return self._listeners.add(callback)

    def apply_snapshot(self, records: list[Record]) -> None:
        self._replace(merge_events(self._seed, parse_events(records)))
        self._loaded.set()

    def get(self, event_id: str) -> Event | None:
        return next((event for event in self._events if event.id == event_id), None)

    def by_category(self, category: EventCategory) -> tuple[Event, ...]:
        return by_category(self._events, category)

    def owned_by(self, uid: str | None) -> tuple[Event, ...]:
        return owned_by(self._events, uid)

    def not_owned_by(self, uid: str | None) -> tuple[Event, ...]:
        return not_owned_by(self._events, uid)

    def upsert_local(self, event: Event) -> None:
        """Apply a save ahead of the remote echo."""
        self._replace(merge_events(self._events, [event]))

    def remove_local(self, event_id: str) -> None:
        """Drop an event from this view only.

        The remote document is untouched, so the event comes back with the
        next snapshot.
        """
        logger.warning("merge_cache.local_only_removal", event_id=event_id)
        self._replace(tuple(event for event in self._events if event.id != event_id))

    def _replace(self, events: tuple[Event, ...]) -> None:
        self._events = events
        self._listeners.notify(events)
