"""Subscription primitives shared by the long-lived consumers.

Every ``subscribe`` in the project returns either a plain ``Unsubscribe``
callable or a ``Subscription`` wrapping the consumer task. Callers invoke it
on teardown.
"""

import asyncio
import inspect
from collections.abc import Callable, Coroutine
from contextlib import suppress
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Unsubscribe = Callable[[], None]


class ListenerSet(Generic[T]):
    """Ordered set of callbacks receiving a single value."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[[T], Any]] = []

    def __len__(self) -> int:
        return len(self._callbacks)

    def add(self, callback: Callable[[T], Any]) -> Unsubscribe:
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            with suppress(ValueError):
                self._callbacks.remove(callback)

        return unsubscribe

    def notify(self, value: T) -> None:
        for callback in list(self._callbacks):
            callback(value)

    async def anotify(self, value: T) -> None:
        """Notify callbacks in order, awaiting the ones that are coroutines."""
        for callback in list(self._callbacks):
            result = callback(value)
            if inspect.isawaitable(result):
                await result


class Subscription:
    """Cancellable handle over the task consuming a snapshot stream."""

    def __init__(self, task: "asyncio.Task[None]") -> None:
        self._task = task

    def __call__(self) -> None:
        self.cancel()

    @property
    def task(self) -> "asyncio.Task[None]":
        return self._task

    @property
    def active(self) -> bool:
        return not self._task.done()

    def cancel(self) -> None:
        if not self._task.done():
            self._task.cancel()

    async def wait_closed(self) -> None:
        """Wait for the task to finish. Its outcome is left to ``task``."""
        await asyncio.wait({self._task})
        if not self._task.cancelled():
            # Failures were logged by the consumer.
            self._task.exception()


def spawn(coro: Coroutine[Any, Any, None], *, name: str | None = None) -> Subscription:
    """Schedule ``coro`` on the running loop and return its handle."""
    return Subscription(asyncio.create_task(coro, name=name))


async def wait_for_first(
    loaded: asyncio.Event, subscription: Subscription | None
) -> None:
    """Wait for ``loaded`` unless the subscription's stream ends first.

    Raises whatever ended the stream, or RuntimeError if nothing was
    started.
    """
    if loaded.is_set():
        return
    if subscription is None:
        raise RuntimeError("start() first")
    waiter = asyncio.ensure_future(loaded.wait())
    stream = subscription.task
    try:
        await asyncio.wait({waiter, stream}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        if not waiter.done():
            waiter.cancel()
    if not loaded.is_set():
        if stream.cancelled():
            raise asyncio.CancelledError()
        raise stream.exception() or RuntimeError(
            "snapshot stream ended before the first snapshot"
        )
