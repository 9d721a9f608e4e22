"""Recognition service: visibility-filtered queries and the create mutation."""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Iterable

from ..errors import InvalidVisibility, UnknownCaller
from ..models.recognition import Caller, Recognition, RecognitionView, Visibility
from .broadcast import BroadcastHub
from .directory import Directory
from .recognition_store import RecognitionStore
from .visibility import addressed_to, visible_to

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


def parse_visibility(value: Visibility | str) -> Visibility:
    """Coerce a visibility name to the enum, raising InvalidVisibility."""
    if isinstance(value, Visibility):
        return value
    try:
        return Visibility(value)
    except ValueError:
        raise InvalidVisibility(value) from None


class RecognitionService:
    """Orchestrates reads and writes over the store, policy and hub."""

    def __init__(
        self,
        store: RecognitionStore,
        directory: Directory,
        hub: BroadcastHub,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self.store = store
        self.directory = directory
        self.hub = hub
        self._clock = clock
        self._id_factory = id_factory
        self._write_lock = threading.Lock()
        self._last_created_at: datetime | None = None

    def resolve(self, caller_id: str) -> Caller:
        """Resolve a caller or raise UnknownCaller."""
        caller = self.directory.resolve(caller_id)
        if caller is None:
            raise UnknownCaller(caller_id)
        return caller

    # ── Queries ──────────────────────────────────────────────────────────

    def list_visible(self, viewer_id: str) -> list[Recognition]:
        """All recognitions the viewer may see, in creation order."""
        viewer = self.resolve(viewer_id)
        return visible_to(viewer, self.store.list_all())

    def list_mine(self, viewer_id: str) -> list[Recognition]:
        """Recognitions addressed to the viewer, in creation order."""
        viewer = self.resolve(viewer_id)
        return addressed_to(viewer, self.store.find_by_recipient(viewer.id))

    def list_callers(self) -> list[Caller]:
        return self.directory.list_callers()

    def expand(self, records: Iterable[Recognition]) -> list[RecognitionView]:
        """Attach sender and recipient callers; unknown ids resolve to None."""
        return [
            RecognitionView(
                **r.model_dump(),
                sender=self.directory.resolve(r.senderId),
                recipient=self.directory.resolve(r.recipientId),
            )
            for r in records
        ]

    # ── Mutations ────────────────────────────────────────────────────────

    def create(
        self,
        sender_id: str,
        recipient_id: str,
        message: str,
        emoji: str,
        visibility: Visibility | str,
    ) -> Recognition:
        """Record a new recognition and push it to live subscribers.

        Id, timestamp and append are assigned under one lock, so store order
        matches createdAt order. Publishing happens after the lock is released:
        concurrent creates may reach subscribers in a different order than
        they were stored, while each single caller's creates stay in order.
        """
        sender = self.resolve(sender_id)
        level = parse_visibility(visibility)

        with self._write_lock:
            created_at = self._clock()
            if self._last_created_at is not None and created_at < self._last_created_at:
                created_at = self._last_created_at
            record = Recognition(
                id=self._id_factory(),
                senderId=sender.id,
                recipientId=recipient_id,
                message=message,
                emoji=emoji,
                visibility=level,
                createdAt=created_at,
            )
            self.store.append(record)
            self._last_created_at = created_at

        logger.info(
            "Recognition %s created: %s -> %s (%s)",
            record.id, record.senderId, record.recipientId, record.visibility.value,
        )
        self.hub.publish(record)
        return record

    def seed(self, records: Iterable[Recognition]) -> int:
        """Load pre-existing records without publishing them."""
        count = 0
        with self._write_lock:
            for record in records:
                self.store.append(record)
                if self._last_created_at is None or record.createdAt > self._last_created_at:
                    self._last_created_at = record.createdAt
                count += 1
        logger.info("Seeded %d recognitions", count)
        return count
