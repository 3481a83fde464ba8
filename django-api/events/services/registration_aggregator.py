"""Registration aggregator - registrations for the viewer's own events.

Three sources feed it independently: the registrations collection, the
merge cache and the viewer's session. Whichever changes, the join is
recomputed from the latest state of all three.
"""

import asyncio
from collections.abc import Iterable

import structlog

from accounts.services import SessionManager
from common.subscriptions import Subscription, Unsubscribe, wait_for_first
from events.domain import Event, OwnedRegistration, Registration
from events.services.merge_cache import EventMergeCache
from events.stores.interfaces import REGISTRATIONS_COLLECTION, DocumentStore, Record
from events.stores.records import parse_registrations

logger = structlog.get_logger(__name__)


def join_registrations(
    registrations: Iterable[Registration],
    events: Iterable[Event],
    owner_uid: str | None,
) -> tuple[OwnedRegistration, ...]:
    """Pair registrations with their events, keeping the owner's ones.

    Registrations whose event is unknown are dropped for every viewer.
    """
    events_by_id: dict[str, Event] = {}
    for event in events:
        events_by_id.setdefault(event.id, event)
    joined = []
    for registration in registrations:
        event = events_by_id.get(registration.event_id)
        if event is not None and event.is_owned_by(owner_uid):
            joined.append(OwnedRegistration(registration=registration, event=event))
    return tuple(joined)


class RegistrationAggregator:
    def __init__(
        self,
        store: DocumentStore,
        events: EventMergeCache,
        session: SessionManager,
    ) -> None:
        self._store = store
        self._events = events
        self._session = session
        self._registrations: tuple[Registration, ...] = ()
        self._joined: tuple[OwnedRegistration, ...] = ()
        self._subscription: Subscription | None = None
        self._unsubscribes: list[Unsubscribe] = []
        self._loaded = asyncio.Event()

    async def __aenter__(self) -> "RegistrationAggregator":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    @property
    def registrations(self) -> tuple[OwnedRegistration, ...]:
        return self._joined

    @property
    def count(self) -> int:
        return len(self._joined)

    def start(self) -> Subscription:
        """Follow registrations, events and the session until ``stop``."""
        if self._subscription is None or not self._subscription.active:
            self._release_listeners()
            self._unsubscribes = [
                self._events.add_listener(lambda _events: self.recompute()),
                self._session.add_listener(lambda _snapshot: self.recompute()),
            ]
            self._subscription = self._store.subscribe_collection(
                REGISTRATIONS_COLLECTION, self.apply_snapshot
            )
        return self._subscription

    async def stop(self) -> None:
        self._release_listeners()
        if self._subscription is not None:
            self._subscription.cancel()
            await self._subscription.wait_closed()
            self._subscription = None

    async def ready(self) -> None:
        """Wait until the first registrations snapshot has been joined."""
        await wait_for_first(self._loaded, self._subscription)

    def apply_snapshot(self, records: list[Record]) -> None:
        self._registrations = tuple(parse_registrations(records))
        self.recompute()
        self._loaded.set()

    def recompute(self) -> None:
        self._joined = join_registrations(
            self._registrations, self._events.events, self._session.snapshot.uid
        )
        logger.debug(
            "aggregator.recomputed",
            registrations=len(self._registrations),
            visible=len(self._joined),
        )

    def _release_listeners(self) -> None:
        for unsubscribe in self._unsubscribes:
            unsubscribe()
        self._unsubscribes = []
