"""Append-only in-memory store of recognitions."""

from __future__ import annotations

import threading
from typing import Iterator

from ..models.recognition import Recognition


class RecognitionStore:
    """Holds every recognition in insertion order.

    Appends are serialized by a lock. Readers copy the record list under the
    same lock, so a read sees every append that completed before it started
    and never a partial one. Records are frozen models, so handing them out
    cannot mutate the store.
    """

    def __init__(self) -> None:
        self._records: list[Recognition] = []
        self._ids: set[str] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def append(self, record: Recognition) -> None:
        with self._lock:
            if record.id in self._ids:
                raise ValueError(f"Recognition already stored: {record.id}")
            self._ids.add(record.id)
            self._records.append(record)

    def list_all(self) -> list[Recognition]:
        with self._lock:
            return list(self._records)

    def find_by_recipient(self, recipient_id: str) -> Iterator[Recognition]:
        for record in self.list_all():
            if record.recipientId == recipient_id:
                yield record
