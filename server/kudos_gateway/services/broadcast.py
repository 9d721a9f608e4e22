"""Broadcast hub: fans out newly created recognitions to live subscribers."""

from __future__ import annotations

import asyncio
import logging
import threading
import uuid

from ..models.recognition import Recognition

logger = logging.getLogger(__name__)

NEW_RECOGNITION = "NEW_RECOGNITION"

DEFAULT_QUEUE_SIZE = 100

_CLOSED = object()


class Subscription:
    """A single subscriber's delivery queue.

    Iterate with ``async for`` on the event loop the subscription was created
    on. Iteration only ends when the subscription is closed.
    """

    def __init__(self, hub: BroadcastHub, loop: asyncio.AbstractEventLoop, maxsize: int) -> None:
        self.id = uuid.uuid4().hex[:8]
        self.dropped = 0
        self._hub = hub
        self._loop = loop
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def offer(self, record: Recognition) -> None:
        """Queue a record without blocking. Safe to call from any thread."""
        if self._closed:
            return
        self._call_in_loop(self._put, record)

    def close(self) -> None:
        """Detach from the hub and stop iteration. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._hub._detach(self)
        try:
            self._call_in_loop(self._put, _CLOSED)
        except RuntimeError:
            # Loop already closed; nobody is left waiting on the queue.
            logger.debug("Subscription %s closed after its loop", self.id)

    def _call_in_loop(self, fn, *args) -> None:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is self._loop:
            fn(*args)
        else:
            self._loop.call_soon_threadsafe(fn, *args)

    def _put(self, item: object) -> None:
        if item is not _CLOSED and self._closed:
            return
        if self._queue.full():
            self._queue.get_nowait()
            if item is not _CLOSED:
                self.dropped += 1
                logger.warning("Subscriber %s queue full; dropped oldest recognition", self.id)
        self._queue.put_nowait(item)

    def __aiter__(self) -> Subscription:
        return self

    async def __anext__(self) -> Recognition:
        if self._closed:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED or self._closed:
            raise StopAsyncIteration
        return item

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    async def __aenter__(self) -> Subscription:
        return self

    async def __aexit__(self, *exc) -> None:
        self.close()


class BroadcastHub:
    """Publish/subscribe channel for the NEW_RECOGNITION event."""

    def __init__(self, queue_size: int = DEFAULT_QUEUE_SIZE, channel: str = NEW_RECOGNITION) -> None:
        self.channel = channel
        self.queue_size = queue_size
        self._subscribers: dict[str, Subscription] = {}
        self._lock = threading.Lock()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscribe(self, loop: asyncio.AbstractEventLoop | None = None) -> Subscription:
        """Attach a subscriber that sees only records published from now on."""
        sub = Subscription(self, loop or asyncio.get_running_loop(), self.queue_size)
        with self._lock:
            self._subscribers[sub.id] = sub
            total = len(self._subscribers)
        logger.info("Subscriber %s attached to %s (%d total)", sub.id, self.channel, total)
        return sub

    def publish(self, record: Recognition) -> int:
        """Send a record to every live subscriber. Returns the delivery count."""
        with self._lock:
            subscribers = list(self._subscribers.values())

        delivered = 0
        for sub in subscribers:
            try:
                sub.offer(record)
            except Exception as exc:
                logger.warning("Delivery to subscriber %s failed: %s", sub.id, exc)
                sub.close()
                continue
            delivered += 1
        return delivered

    def close_all(self) -> None:
        """Close every subscription (called on shutdown)."""
        with self._lock:
            subscribers = list(self._subscribers.values())
        for sub in subscribers:
            sub.close()

    def _detach(self, sub: Subscription) -> None:
        with self._lock:
            removed = self._subscribers.pop(sub.id, None)
            total = len(self._subscribers)
        if removed is not None:
            logger.info("Subscriber %s detached from %s (%d total)", sub.id, self.channel, total)
