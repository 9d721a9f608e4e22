"""Caller directory: resolves caller identifiers to caller records."""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from ..models.recognition import Caller

logger = logging.getLogger(__name__)


class Directory(Protocol):
    """Identity lookup the recognition engine depends on."""

    def resolve(self, caller_id: str) -> Caller | None:
        ...

    def list_callers(self) -> list[Caller]:
        ...


class StaticDirectory:
    """Directory backed by a fixed in-memory set of callers."""

    def __init__(self, callers: Iterable[Caller] = ()) -> None:
        self._callers: dict[str, Caller] = {}
        for caller in callers:
            if caller.id in self._callers:
                raise ValueError(f"Duplicate caller id: {caller.id}")
            self._callers[caller.id] = caller
        logger.info("Directory loaded with %d callers", len(self._callers))

    def resolve(self, caller_id: str) -> Caller | None:
        return self._callers.get(caller_id)

    def list_callers(self) -> list[Caller]:
        return list(self._callers.values())
