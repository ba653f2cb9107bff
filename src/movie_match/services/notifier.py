"""In-process pub/sub for room events."""

import asyncio
import logging
import threading
from collections.abc import AsyncIterator
from dataclasses import dataclass, field

from movie_match.domain.rooms import RoomRecord
from movie_match.domain.swipes import SwipeRecord

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomStateChanged:
    """Slot B was filled and the room became active."""

    room: RoomRecord


@dataclass(frozen=True)
class SwipeRecorded:
    """A swipe was appended to the room's ledger."""

    swipe: SwipeRecord


RoomEvent = RoomStateChanged | SwipeRecorded


@dataclass(eq=False)
class RoomSubscription:
    """A room-scoped event stream backed by an asyncio queue."""

    key: str
    notifier: "RoomNotifier"
    loop: asyncio.AbstractEventLoop
    queue: asyncio.Queue[RoomEvent] = field(default_factory=asyncio.Queue)
    closed: bool = False

    def deliver(self, event: RoomEvent) -> None:
        """Hand an event to the subscriber's loop from any thread."""
        if self.closed:
            return
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is self.loop:
            self.queue.put_nowait(event)
        else:
            self.loop.call_soon_threadsafe(self.queue.put_nowait, event)

    async def next_event(self) -> RoomEvent:
        return await self.queue.get()

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            self.notifier.unsubscribe(self)

    def __aiter__(self) -> AsyncIterator[RoomEvent]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[RoomEvent]:
        while not self.closed:
            yield await self.queue.get()

    def __enter__(self) -> "RoomSubscription":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()


@dataclass(eq=False)
class RoomNotifier:
    """Fans room events out to subscribers keyed by room code."""

    _subscribers: dict[str, list[RoomSubscription]]
    _lock: threading.Lock

    def __init__(self) -> None:
        self._subscribers = {}
        self._lock = threading.Lock()

    def subscribe(self, key: str) -> RoomSubscription:
        """Open a subscription; must be called from a running event loop."""
        subscription = RoomSubscription(
            key=key, notifier=self, loop=asyncio.get_running_loop()
        )
        with self._lock:
            self._subscribers.setdefault(key, []).append(subscription)
        return subscription

    def unsubscribe(self, subscription: RoomSubscription) -> None:
        with self._lock:
            subscribers = self._subscribers.get(subscription.key, [])
            if subscription in subscribers:
                subscribers.remove(subscription)
            if not subscribers:
                self._subscribers.pop(subscription.key, None)

    def publish(self, key: str, event: RoomEvent) -> int:
        """Deliver an event to every subscriber of the key."""
        with self._lock:
            subscribers = list(self._subscribers.get(key, []))
        for subscription in subscribers:
            try:
                subscription.deliver(event)
            except RuntimeError:
                # Subscriber's loop is already closed.
                _logger.warning("Dropping event for closed subscriber: key=%s", key)
                self.unsubscribe(subscription)
        return len(subscribers)

    def subscriber_count(self, key: str) -> int:
        with self._lock:
            return len(self._subscribers.get(key, []))
