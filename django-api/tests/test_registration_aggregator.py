"""Tests for the registration aggregator."""

import asyncio

import pytest

from accounts.domain import Identity, Role
from events.domain import Registration
from events.seed import SEED_EVENTS
from events.services import RegistrationAggregator, join_registrations
from events.stores import EVENTS_COLLECTION, REGISTRATIONS_COLLECTION
from events.stores.records import event_to_record, registration_to_record

from tests.factories import make_event


def make_registration(registration_id: str, event_id: str) -> Registration:
    return Registration(
        id=registration_id,
        event_id=event_id,
        name="Ana",
        email="ana@example.com",
        phone="555-0100",
        college_or_company="State U",
        year_of_study="3",
    )


async def settle() -> None:
    for _ in range(10):
        await asyncio.sleep(0)


class TestJoinRegistrations:
    """Tests for the pure join."""

    def test_keeps_only_the_owners_events(self):
        registrations = [make_registration("r1", "ev1"), make_registration("r2", "ev2")]
        joined = join_registrations(registrations, SEED_EVENTS, "organizer-demo-1")
        assert [item.registration.id for item in joined] == ["r1"]
        assert joined[0].event.id == "ev1"

    def test_unknown_event_is_dropped(self):
        """Registrations for events missing from the view are not shown."""
        registrations = [make_registration("r1", "ev404")]
        joined = join_registrations(registrations, SEED_EVENTS, "organizer-demo-1")
        assert joined == ()

    def test_signed_out_sees_nothing(self):
        registrations = [make_registration("r1", "ev1")]
        assert join_registrations(registrations, SEED_EVENTS, None) == ()

    def test_preserves_registration_order(self):
        registrations = [make_registration("r2", "ev3"), make_registration("r1", "ev1")]
        joined = join_registrations(registrations, SEED_EVENTS, "organizer-demo-1")
        assert [item.registration.id for item in joined] == ["r2", "r1"]


async def add_registration(document_store, event_id: str) -> None:
    await document_store.add_document(
        REGISTRATIONS_COLLECTION,
        registration_to_record(make_registration("", event_id)),
    )


async def signed_in(session, auth_provider, uid):
    await session.restore_session()
    auth_provider.queue_federated(Identity(uid=uid))
    await session.sign_in_federated(Role.ORGANIZER)
    return session


@pytest.fixture
def aggregator(document_store, event_cache, session) -> RegistrationAggregator:
    return RegistrationAggregator(document_store, event_cache, session)


class TestRegistrationAggregator:
    @pytest.mark.asyncio
    async def test_counts_registrations_for_own_events(
        self, document_store, event_cache, session, auth_provider, aggregator
    ):
        for event_id in ("ev1", "ev2"):
            await add_registration(document_store, event_id)
        await signed_in(session, auth_provider, "organizer-demo-1")

        async with event_cache:
            await event_cache.ready()
            async with aggregator as agg:
                await agg.ready()
                assert agg.count == 1
                assert agg.registrations[0].event.title == SEED_EVENTS[0].title

    @pytest.mark.asyncio
    async def test_new_event_brings_in_its_registrations(
        self, document_store, event_cache, session, auth_provider, aggregator
    ):
        """A registration for a not-yet-known event appears once the event does."""
        await add_registration(document_store, "ev9")
        await signed_in(session, auth_provider, "u-9")
        async with event_cache:
            await event_cache.ready()
            async with aggregator as agg:
                await agg.ready()
                assert agg.count == 0

                await document_store.write_document(
                    EVENTS_COLLECTION, "ev9", event_to_record(make_event())
                )
                await settle()
                assert agg.count == 1

    @pytest.mark.asyncio
    async def test_sign_out_hides_previous_viewers_registrations(
        self, document_store, event_cache, session, auth_provider, aggregator
    ):
        """Signing out empties the view without any manual recompute."""
        await add_registration(document_store, "ev1")
        await signed_in(session, auth_provider, "organizer-demo-1")
        async with event_cache:
            await event_cache.ready()
            async with aggregator as agg:
                await agg.ready()
                assert agg.count == 1

                await session.sign_out()

                assert session.snapshot.uid is None
                assert agg.count == 0

    @pytest.mark.asyncio
    async def test_switching_organizer_recomputes(
        self, document_store, event_cache, session, auth_provider, aggregator
    ):
        await add_registration(document_store, "ev2")
        await signed_in(session, auth_provider, "organizer-demo-1")
        async with event_cache:
            await event_cache.ready()
            async with aggregator as agg:
                await agg.ready()
                assert agg.count == 0

                auth_provider.queue_federated(Identity(uid="organizer-demo-2"))
                await session.sign_in_federated(Role.ORGANIZER)

                assert agg.count == 1
                assert agg.registrations[0].event.id == "ev2"

    @pytest.mark.asyncio
    async def test_stop_releases_every_source(
        self, document_store, event_cache, session, aggregator
    ):
        async with event_cache:
            await event_cache.ready()
            async with aggregator as agg:
                await agg.ready()
                assert document_store.watcher_count(REGISTRATIONS_COLLECTION) == 1
            assert document_store.watcher_count(REGISTRATIONS_COLLECTION) == 0
            assert len(event_cache._listeners) == 0
            assert len(session._listeners) == 0

    @pytest.mark.asyncio
    async def test_restart_then_stop_leaves_no_listeners(
        self, event_cache, session, aggregator
    ):
        """Restarting after the stream ended does not stack listeners."""
        async with event_cache:
            await event_cache.ready()
            first = aggregator.start()
            first.cancel()
            await first.wait_closed()

            assert aggregator.start() is not first
            assert len(event_cache._listeners) == 1
            assert len(session._listeners) == 1

            await aggregator.stop()
            assert len(event_cache._listeners) == 0
            assert len(session._listeners) == 0
